from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


def employee_photo_upload_to(
    instance, filename
):  # pragma: no cover - path logic trivial
    return f"employees/photos/{instance.user_id}/{filename}"


def compute_monthly_salary(
    base: Decimal,
    transport: Decimal,
    internet: Decimal,
    kpi: Decimal,
    flat_salary: Decimal | None = None,
) -> Decimal:
    """Sum of the salary components, or the flat salary when they are all zero."""
    total = sum(
        (Decimal(v or 0) for v in (base, transport, internet, kpi)), Decimal("0")
    )
    if total > 0:
        return total
    return Decimal(flat_salary or 0)


class Employee(models.Model):
    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        INACTIVE = "inactive", _("Inactive")

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="employee"
    )
    photo = models.ImageField(upload_to=employee_photo_upload_to, blank=True, null=True)
    position = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=50, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.ACTIVE
    )
    join_date = models.DateField(blank=True, null=True)
    contract_start = models.DateField(blank=True, null=True)
    contract_end = models.DateField(blank=True, null=True)

    # Salary components (IDR per month)
    base_salary = models.DecimalField(max_digits=15, decimal_places=2, default=0)
    transport_allowance = models.DecimalField(
        max_digits=15, decimal_places=2, default=0
    )
    internet_allowance = models.DecimalField(max_digits=15, decimal_places=2, default=0)
    kpi_allowance = models.DecimalField(max_digits=15, decimal_places=2, default=0)
    # Legacy single-figure salary, used only when no component is filled in.
    salary = models.DecimalField(max_digits=15, decimal_places=2, default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["user__username"]

    def __str__(self):  # pragma: no cover - trivial
        return f"Employee({self.user.username})"

    @property
    def full_name(self) -> str:
        return self.user.display_name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.ACTIVE

    @property
    def monthly_salary(self) -> Decimal:
        return compute_monthly_salary(
            self.base_salary,
            self.transport_allowance,
            self.internet_allowance,
            self.kpi_allowance,
            self.salary,
        )
