import logging
from datetime import date

from celery import shared_task
from django.utils import timezone

from agency_ops.attendance.models import Attendance
from agency_ops.attendance.services import auto_clockout_overdue
from agency_ops.attendance.services import build_clockin_summary
from agency_ops.notifications.emails import send_notification_email

logger = logging.getLogger(__name__)


@shared_task(name="attendance.auto_clockout_midnight")
def auto_clockout_midnight(date_iso: str | None = None) -> dict:
    """Close sessions left open before ``date_iso`` (defaults to today in TIME_ZONE).

    Returns:
        {"processed": n, "results": [...]} with one entry per record.
    """
    today = date.fromisoformat(date_iso) if date_iso else timezone.localdate()
    results = auto_clockout_overdue(today)
    return {"processed": len(results), "results": results}


def render_clockin_summary(summary: dict, name: str) -> str:
    lines = [f"Hi {name.split(' ')[0] if name else 'there'},", ""]
    if summary["forgot_clockout_yesterday"]:
        lines.extend(
            [
                "Heads up: you forgot to clock out yesterday and were clocked "
                "out automatically at 23:59.",
                "",
            ]
        )
    sections = [
        ("Tasks due today", summary["tasks_due_today"]),
        ("Overdue tasks", summary["overdue_tasks"]),
    ]
    for caption, tasks in sections:
        lines.append(f"{caption} ({len(tasks)})")
        lines.extend(
            f"- {t.title} [{t.project.title}]"
            + (f" due {t.deadline:%Y-%m-%d}" if t.deadline else "")
            for t in tasks
        )
        lines.append("")
    meetings = summary["meetings_today"]
    lines.append(f"Meetings today ({len(meetings)})")
    lines.extend(
        f"- {m.start_time:%H:%M}-{m.end_time:%H:%M} {m.title}" for m in meetings
    )
    lines.append("")
    if not (summary["tasks_due_today"] or summary["overdue_tasks"] or meetings):
        lines.extend(["Nothing scheduled for today.", ""])
    lines.append("Have a productive day!")
    return "\n".join(lines)


@shared_task(name="attendance.clockin_summary_email")
def clockin_summary_email(attendance_id: int) -> str:
    """E-mail the employee their agenda right after clock-in."""
    try:
        record = Attendance.objects.select_related("employee__user").get(
            pk=attendance_id
        )
    except Attendance.DoesNotExist:
        logger.warning("clock-in summary: attendance %s not found", attendance_id)
        return "missing"
    employee = record.employee
    if not employee.email:
        logger.info("clock-in summary skipped, employee %s has no e-mail", employee.pk)
        return "skipped"
    summary = build_clockin_summary(employee, today=record.date)
    send_notification_email(
        employee.email,
        employee.full_name,
        "clockin_summary",
        related_id=record.pk,
        body=render_clockin_summary(summary, employee.full_name),
    )
    return "sent"
