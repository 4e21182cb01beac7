from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from agency_ops.reports.constants import ADS_OBJECTIVE_CHOICES
from agency_ops.reports.constants import ADS_PLATFORM_CHOICES
from agency_ops.reports.constants import LEAD_CATEGORY_CHOICES
from agency_ops.reports.constants import PLATFORM_CHOICES

MONTH_VALIDATORS = [MinValueValidator(1), MaxValueValidator(12)]


class PlatformAccount(models.Model):
    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        INACTIVE = "inactive", _("Inactive")

    client = models.ForeignKey(
        "clients.Client", on_delete=models.CASCADE, related_name="platform_accounts"
    )
    platform = models.CharField(max_length=32, choices=PLATFORM_CHOICES)
    account_name = models.CharField(max_length=255)
    username_url = models.CharField(max_length=255, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.ACTIVE
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["client_id", "platform", "account_name"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.account_name} ({self.platform})"


class LockableReport(models.Model):
    report_month = models.PositiveSmallIntegerField(validators=MONTH_VALIDATORS)
    report_year = models.PositiveSmallIntegerField()
    is_locked = models.BooleanField(default=False)
    locked_at = models.DateTimeField(null=True, blank=True)
    locked_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class MonthlyOrganicReport(LockableReport):
    platform_account = models.ForeignKey(
        PlatformAccount, on_delete=models.CASCADE, related_name="organic_reports"
    )
    # Keys come from PLATFORM_METRICS for the account's platform.
    metrics = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ["-report_year", "-report_month"]
        unique_together = ("platform_account", "report_month", "report_year")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.platform_account_id} {self.report_year}-{self.report_month:02d}"


class MonthlyAdsReport(LockableReport):
    client = models.ForeignKey(
        "clients.Client", on_delete=models.CASCADE, related_name="ads_reports"
    )
    platform = models.CharField(max_length=32, choices=ADS_PLATFORM_CHOICES)
    platform_account = models.ForeignKey(
        PlatformAccount,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="ads_reports",
    )
    total_spend = models.DecimalField(max_digits=15, decimal_places=2, default=Decimal("0"))
    impressions = models.PositiveBigIntegerField(default=0)
    reach = models.PositiveBigIntegerField(default=0)
    clicks = models.PositiveBigIntegerField(default=0)
    results = models.PositiveBigIntegerField(default=0)
    objective = models.CharField(
        max_length=32, choices=ADS_OBJECTIVE_CHOICES, default="awareness"
    )
    lead_category = models.CharField(
        max_length=32, choices=LEAD_CATEGORY_CHOICES, blank=True
    )
    cpm = models.DecimalField(max_digits=15, decimal_places=2, null=True, blank=True)
    cpc = models.DecimalField(max_digits=15, decimal_places=2, null=True, blank=True)
    cost_per_result = models.DecimalField(
        max_digits=15, decimal_places=2, null=True, blank=True
    )

    class Meta:
        ordering = ["-report_year", "-report_month"]
        unique_together = ("client", "platform", "report_month", "report_year")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.client_id} {self.platform} {self.report_year}-{self.report_month:02d}"
