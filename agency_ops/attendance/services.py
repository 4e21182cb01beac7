import logging
from datetime import datetime
from datetime import time
from datetime import timedelta

from django.conf import settings
from django.db import IntegrityError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from agency_ops.attendance.calculations import is_auto_clockout
from agency_ops.attendance.models import Attendance
from agency_ops.attendance.models import AutoClockoutNotification
from agency_ops.clients.models import FINISHED_TASK_STATUSES
from agency_ops.clients.models import Task
from agency_ops.meetings.models import Meeting

logger = logging.getLogger(__name__)


class AttendanceError(Exception):
    """A clock action that does not fit the current state of the day's record."""


def _now(now: datetime | None) -> datetime:
    return now or timezone.now()


def local_date(now: datetime | None = None):
    return timezone.localtime(_now(now)).date()


def get_today(employee, *, now: datetime | None = None) -> Attendance | None:
    return Attendance.objects.filter(employee=employee, date=local_date(now)).first()


@transaction.atomic
def clock_in(employee, *, now: datetime | None = None, notes: str = "", photo=None):
    now = _now(now)
    today = local_date(now)
    if Attendance.objects.filter(employee=employee, date=today).exists():
        msg = "Already clocked in today."
        raise AttendanceError(msg)
    try:
        with transaction.atomic():
            record = Attendance.objects.create(
                employee=employee,
                date=today,
                clock_in=now,
                notes=(notes or "").strip(),
                photo_clock_in=photo,
            )
    except IntegrityError:
        msg = "Already clocked in today."
        raise AttendanceError(msg) from None
    logger.info("clock-in employee=%s date=%s", employee.pk, today)
    return record


def _close_break(record: Attendance, now: datetime) -> None:
    if not record.on_break:
        return
    minutes = int((now - record.break_start).total_seconds() // 60)
    record.total_break_minutes += max(0, minutes)
    record.break_end = now


@transaction.atomic
def clock_out(  # noqa: PLR0913
    employee,
    *,
    now: datetime | None = None,
    notes: str = "",
    tasks_completed: list[str] | None = None,
    photo=None,
):
    now = _now(now)
    record = (
        Attendance.objects.select_for_update()
        .filter(employee=employee, date=local_date(now))
        .first()
    )
    if record is None or record.clock_in is None:
        msg = "No clock-in found for today."
        raise AttendanceError(msg)
    if record.clock_out is not None:
        msg = "Already clocked out today."
        raise AttendanceError(msg)

    _close_break(record, now)
    record.clock_out = now
    # Blank notes keep what was written at clock-in.
    if notes and notes.strip():
        record.notes = notes.strip()
    if tasks_completed is not None:
        record.tasks_completed = [t for t in tasks_completed if str(t).strip()]
    if photo is not None:
        record.photo_clock_out = photo
    record.save()
    logger.info(
        "clock-out employee=%s date=%s minutes=%s",
        employee.pk,
        record.date,
        record.work_minutes,
    )
    return record


def _open_record(employee, now: datetime) -> Attendance:
    record = (
        Attendance.objects.select_for_update()
        .filter(employee=employee, date=local_date(now))
        .first()
    )
    if record is None or record.clock_in is None:
        msg = "No clock-in found for today."
        raise AttendanceError(msg)
    if record.clock_out is not None:
        msg = "Already clocked out today."
        raise AttendanceError(msg)
    return record


@transaction.atomic
def start_break(employee, *, now: datetime | None = None) -> Attendance:
    now = _now(now)
    record = _open_record(employee, now)
    if record.on_break:
        msg = "A break is already running."
        raise AttendanceError(msg)
    record.break_start = now
    record.break_end = None
    record.save(update_fields=["break_start", "break_end", "updated_at"])
    return record


@transaction.atomic
def end_break(employee, *, now: datetime | None = None) -> Attendance:
    now = _now(now)
    record = _open_record(employee, now)
    if not record.on_break:
        msg = "No break is running."
        raise AttendanceError(msg)
    _close_break(record, now)
    record.save(update_fields=["break_end", "total_break_minutes", "updated_at"])
    return record


def _auto_clockout_message(day) -> str:
    return (
        f"You forgot to clock out on {day:%Y-%m-%d}. "
        "The system clocked you out automatically at 23:59."
    )


def auto_clockout_overdue(today=None) -> list[dict]:
    """Close every session left open on a day before ``today``.

    Each record is handled in its own transaction so that one bad row does
    not roll back the others. Returns one result dict per record.
    """
    today = today or local_date()
    tag = settings.AGENCY_AUTO_CLOCKOUT_TAG
    tz = timezone.get_current_timezone()
    pending = Attendance.objects.filter(
        date__lt=today,
        clock_in__isnull=False,
        clock_out__isnull=True,
    ).select_related("employee")

    results: list[dict] = []
    for record in list(pending):
        try:
            with transaction.atomic():
                closing = timezone.make_aware(
                    datetime.combine(record.date, time(23, 59, 59)), tz
                )
                if record.on_break:
                    _close_break(record, closing)
                record.clock_out = closing
                record.notes = f"{record.notes} {tag}".strip()
                record.save()
                AutoClockoutNotification.objects.create(
                    employee=record.employee,
                    attendance=record,
                    message=_auto_clockout_message(record.date),
                )
        except Exception as exc:  # noqa: BLE001
            logger.exception("auto clock-out failed for attendance=%s", record.pk)
            results.append({"id": record.pk, "status": "error", "error": str(exc)})
            continue
        results.append(
            {
                "id": record.pk,
                "employee_id": record.employee_id,
                "date": record.date.isoformat(),
                "status": "success",
            }
        )
    logger.info("auto clock-out processed %s record(s)", len(results))
    return results


def build_clockin_summary(employee, *, today=None) -> dict:
    """Collect what an employee should know right after clocking in."""
    today = today or local_date()
    user = employee.user
    mine = Task.objects.filter(Q(assigned_to=user) | Q(assignees=user)).distinct()
    open_tasks = mine.exclude(status__in=[*FINISHED_TASK_STATUSES, "cancelled"])
    due_today = list(open_tasks.filter(deadline=today).select_related("project"))
    overdue = list(open_tasks.filter(deadline__lt=today).select_related("project"))
    meetings = list(
        Meeting.objects.attended_by(user)
        .filter(meeting_date=today)
        .exclude(status__in=[Meeting.Status.COMPLETED, Meeting.Status.CANCELLED])
        .order_by("start_time")
    )
    yesterday = Attendance.objects.filter(
        employee=employee, date=today - timedelta(days=1)
    ).first()
    return {
        "date": today,
        "tasks_due_today": due_today,
        "overdue_tasks": overdue,
        "meetings_today": meetings,
        "forgot_clockout_yesterday": bool(
            yesterday and is_auto_clockout(yesterday.notes)
        ),
    }
