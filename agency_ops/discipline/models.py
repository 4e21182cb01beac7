from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


def evidence_upload_to(instance, filename):  # pragma: no cover - path logic trivial
    return f"discipline/{instance.employee_id}/{filename}"


class DisciplinaryCase(models.Model):
    class ViolationType(models.TextChoices):
        LATENESS = "lateness", _("Repeated lateness")
        UNEXCUSED_ABSENCE = "unexcused_absence", _("Unexcused absence")
        SOP_BREACH = "sop_breach", _("SOP breach")
        INSUBORDINATION = "insubordination", _("Insubordination")
        COWORKER_CONFLICT = "coworker_conflict", _("Conflict with co-workers")
        ETHICS_BREACH = "ethics_breach", _("Ethics breach")
        POOR_PERFORMANCE = "poor_performance", _("Poor performance")
        ASSET_MISUSE = "asset_misuse", _("Misuse of company assets")
        OTHER = "other", _("Other")

    class Severity(models.TextChoices):
        MINOR = "minor", _("Minor")
        MODERATE = "moderate", _("Moderate")
        MAJOR = "major", _("Major")
        CRITICAL = "critical", _("Critical")

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        INVESTIGATING = "investigating", _("Investigating")
        WARNING_ISSUED = "warning_issued", _("Warning issued")
        RESOLVED = "resolved", _("Resolved")
        DISMISSED = "dismissed", _("Dismissed")

    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="disciplinary_cases",
    )
    reported_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    case_date = models.DateField()
    violation_type = models.CharField(max_length=32, choices=ViolationType.choices)
    description = models.TextField()
    severity = models.CharField(
        max_length=16, choices=Severity.choices, default=Severity.MINOR
    )
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    action_taken = models.TextField(blank=True)
    action_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)
    evidence = models.FileField(upload_to=evidence_upload_to, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-case_date", "-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Case {self.pk} ({self.employee_id})"


OPEN_STATUSES = (DisciplinaryCase.Status.PENDING, DisciplinaryCase.Status.INVESTIGATING)
REPEAT_OFFENDER_THRESHOLD = 2


def summarize_cases(cases) -> dict:
    """Counts used by the case log header.

    ``cases`` is any iterable of objects with ``status``, ``severity`` and
    ``employee_id``.
    """
    by_status = {value: 0 for value in DisciplinaryCase.Status.values}
    by_severity = {value: 0 for value in DisciplinaryCase.Severity.values}
    per_employee: dict[int, int] = {}
    total = 0
    for case in cases:
        total += 1
        by_status[case.status] = by_status.get(case.status, 0) + 1
        by_severity[case.severity] = by_severity.get(case.severity, 0) + 1
        per_employee[case.employee_id] = per_employee.get(case.employee_id, 0) + 1
    repeat = sorted(
        (
            {"employee_id": emp, "cases": count}
            for emp, count in per_employee.items()
            if count >= REPEAT_OFFENDER_THRESHOLD
        ),
        key=lambda row: (-row["cases"], row["employee_id"]),
    )
    return {
        "total": total,
        "open": sum(by_status.get(s, 0) for s in OPEN_STATUSES),
        "by_status": by_status,
        "by_severity": by_severity,
        "repeat_employees": repeat,
    }
