from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.core.validators import RegexValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from agency_ops.finance.categories import CATEGORY_CHOICES

MONEY = {"max_digits": 15, "decimal_places": 2}
month_validator = RegexValidator(r"^\d{4}-(0[1-9]|1[0-2])$", _("Use the YYYY-MM format."))


def receipt_upload_to(instance, filename):  # pragma: no cover - path logic trivial
    return f"finance/receipts/{filename}"


class RecurringBudget(models.Model):
    class Type(models.TextChoices):
        INCOME = "income", _("Income")
        EXPENSE = "expense", _("Expense")

    class Period(models.TextChoices):
        MONTHLY = "monthly", _("Monthly")
        QUARTERLY = "quarterly", _("Quarterly")
        YEARLY = "yearly", _("Yearly")
        CUSTOM = "custom", _("Custom")

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        PAUSED = "paused", _("Paused")
        ENDED = "ended", _("Ended")

    name = models.CharField(max_length=255)
    type = models.CharField(max_length=16, choices=Type.choices)
    amount = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal("0"))])
    period = models.CharField(
        max_length=16, choices=Period.choices, default=Period.MONTHLY
    )
    custom_days = models.PositiveIntegerField(null=True, blank=True)
    due_day = models.PositiveSmallIntegerField(default=1)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.ACTIVE
    )
    client = models.ForeignKey(
        "clients.Client", on_delete=models.SET_NULL, null=True, blank=True
    )
    project = models.ForeignKey(
        "clients.Project", on_delete=models.SET_NULL, null=True, blank=True
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
        ordering = ["due_day", "name"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.name} ({self.period})"


class Income(models.Model):
    class Type(models.TextChoices):
        RETAINER = "retainer", _("Retainer")
        PROJECT = "project", _("Project")
        EVENT = "event", _("Event")
        RECURRING = "recurring", _("Recurring")
        OTHER = "other", _("Other")
        REFUND = "refund", _("Refund")
        INTEREST = "interest", _("Interest")

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        RECEIVED = "received", _("Received")

    source = models.CharField(max_length=255)
    amount = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal("0"))])
    type = models.CharField(max_length=16, choices=Type.choices, default=Type.PROJECT)
    date = models.DateField()
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="incomes",
    )
    project = models.ForeignKey(
        "clients.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="incomes",
    )
    received_at = models.DateTimeField(null=True, blank=True)
    recurring_item = models.ForeignKey(
        RecurringBudget,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="incomes",
    )
    notes = models.TextField(blank=True)
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
        ordering = ["-date", "-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.source} {self.amount}"


class Expense(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        PAID = "paid", _("Paid")

    description = models.CharField(max_length=255)
    amount = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal("0"))])
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES)
    sub_category = models.CharField(max_length=48, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expenses",
    )
    project = models.ForeignKey(
        "clients.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expenses",
    )
    paid_at = models.DateTimeField(null=True, blank=True)
    is_recurring = models.BooleanField(default=False)
    recurring_item = models.ForeignKey(
        RecurringBudget,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="expenses",
    )
    receipt = models.FileField(upload_to=receipt_upload_to, null=True, blank=True)
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
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.description} {self.amount}"


class PayrollEntry(models.Model):
    class Status(models.TextChoices):
        DRAFT = "draft", _("Draft")
        PAID = "paid", _("Paid")

    employee = models.ForeignKey(
        "employees.Employee", on_delete=models.CASCADE, related_name="payroll_entries"
    )
    month = models.CharField(max_length=7, validators=[month_validator])
    amount = models.DecimalField(**MONEY, default=Decimal("0"))
    bonus = models.DecimalField(**MONEY, default=Decimal("0"))
    reimburse = models.DecimalField(**MONEY, default=Decimal("0"))
    late_deduction = models.DecimalField(**MONEY, default=Decimal("0"))
    cash_advance_deduction = models.DecimalField(**MONEY, default=Decimal("0"))
    other_adjustment = models.DecimalField(**MONEY, default=Decimal("0"))
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.DRAFT
    )
    pay_date = models.DateField(null=True, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-month", "employee_id"]
        unique_together = ("employee", "month")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Payroll {self.employee_id} {self.month}"

    @property
    def take_home_pay(self) -> Decimal:
        return (
            (self.amount or 0)
            + (self.bonus or 0)
            + (self.reimburse or 0)
            + (self.other_adjustment or 0)
            - (self.late_deduction or 0)
            - (self.cash_advance_deduction or 0)
        )


class Reimbursement(models.Model):
    class RequestType(models.TextChoices):
        REIMBURSEMENT = "reimbursement", _("Reimbursement")
        REQUEST = "request", _("Budget request")

    class Category(models.TextChoices):
        EVENT = "event", _("Event")
        MEETING = "meeting", _("Meeting")
        PRODUCTION = "production", _("Production")
        OPERATIONAL = "operational", _("Operational")
        TRAINING = "training", _("Training")
        EQUIPMENT = "equipment", _("Equipment")
        SOFTWARE = "software", _("Software / tools")
        TRANSPORT = "transport", _("Transport")
        OTHER = "other", _("Other")

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        APPROVED = "approved", _("Approved")
        REJECTED = "rejected", _("Rejected")
        PAID = "paid", _("Paid")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reimbursements",
    )
    request_type = models.CharField(
        max_length=16, choices=RequestType.choices, default=RequestType.REIMBURSEMENT
    )
    title = models.CharField(max_length=255, blank=True)
    category = models.CharField(max_length=16, choices=Category.choices)
    amount = models.DecimalField(**MONEY, validators=[MinValueValidator(Decimal("0"))])
    notes = models.TextField(blank=True)
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reimbursements",
    )
    project = models.ForeignKey(
        "clients.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reimbursements",
    )
    receipt = models.FileField(upload_to=receipt_upload_to, null=True, blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    rejection_reason = models.TextField(blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)
    expense = models.OneToOneField(
        Expense,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reimbursement",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.request_type} {self.user_id} {self.amount}"


REIMBURSEMENT_CATEGORIES = {
    Reimbursement.RequestType.REIMBURSEMENT: frozenset(
        {"event", "meeting", "production", "operational", "other"}
    ),
    Reimbursement.RequestType.REQUEST: frozenset(
        {"training", "equipment", "software", "transport", "event", "other"}
    ),
}
