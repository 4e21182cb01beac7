from django.db import models

from agency_ops.attendance.calculations import is_auto_clockout
from agency_ops.attendance.calculations import work_minutes


def attendance_photo_upload_to(
    instance, filename
):  # pragma: no cover - path logic trivial
    return f"attendance/{instance.employee_id}/{instance.date:%Y-%m-%d}/{filename}"


class Attendance(models.Model):
    """One clock-in/clock-out record per employee per local date.

    Break time is tracked as a running ``break_start``/``break_end`` pair and
    accumulated into ``total_break_minutes`` when each break ends.
    """

    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="attendances",
    )
    date = models.DateField()
    clock_in = models.DateTimeField(null=True, blank=True)
    clock_out = models.DateTimeField(null=True, blank=True)
    break_start = models.DateTimeField(null=True, blank=True)
    break_end = models.DateTimeField(null=True, blank=True)
    total_break_minutes = models.PositiveIntegerField(default=0)
    notes = models.TextField(blank=True)
    photo_clock_in = models.ImageField(
        upload_to=attendance_photo_upload_to, blank=True, null=True
    )
    photo_clock_out = models.ImageField(
        upload_to=attendance_photo_upload_to, blank=True, null=True
    )
    tasks_completed = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date"]
        unique_together = (("employee", "date"),)

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"Attendance({self.employee_id}@{self.date})"

    @property
    def on_break(self) -> bool:
        return self.break_start is not None and self.break_end is None

    @property
    def work_minutes(self) -> int:
        return work_minutes(self.clock_in, self.clock_out, self.total_break_minutes)

    @property
    def is_auto_clockout(self) -> bool:
        return is_auto_clockout(self.notes)


class AutoClockoutNotification(models.Model):
    """Reminder shown to an employee whose session was closed by the midnight job."""

    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="auto_clockout_notifications",
    )
    attendance = models.ForeignKey(
        Attendance, on_delete=models.CASCADE, related_name="auto_clockout_notifications"
    )
    message = models.TextField()
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - simple repr
        return f"AutoClockoutNotification({self.employee_id}, {self.attendance_id})"
