from datetime import date
from datetime import datetime
from datetime import time
from datetime import timedelta

import pytest
from django.utils import timezone

from agency_ops.attendance import services
from agency_ops.attendance.models import Attendance
from agency_ops.attendance.models import AutoClockoutNotification
from agency_ops.clients.tests.factories import TaskFactory
from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingParticipant
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def at(day: date, hour: int, minute: int = 0) -> datetime:
    return timezone.make_aware(datetime(day.year, day.month, day.day, hour, minute))  # noqa: DTZ001


DAY = date(2024, 5, 6)


def test_clock_in_once_per_day():
    employee = EmployeeFactory()
    record = services.clock_in(employee, now=at(DAY, 8, 55), notes="  wfo ")
    assert record.date == DAY
    assert record.notes == "wfo"

    with pytest.raises(services.AttendanceError, match="Already clocked in"):
        services.clock_in(employee, now=at(DAY, 9, 30))


def test_full_day_with_break():
    employee = EmployeeFactory()
    services.clock_in(employee, now=at(DAY, 9), notes="morning")
    services.start_break(employee, now=at(DAY, 12))
    with pytest.raises(services.AttendanceError, match="already running"):
        services.start_break(employee, now=at(DAY, 12, 5))
    services.end_break(employee, now=at(DAY, 12, 45))

    record = services.clock_out(
        employee,
        now=at(DAY, 17),
        notes="   ",
        tasks_completed=["Logo draft", "  "],
    )
    assert record.total_break_minutes == 45
    assert record.work_minutes == 8 * 60 - 45
    # Blank clock-out notes keep the clock-in notes.
    assert record.notes == "morning"
    assert record.tasks_completed == ["Logo draft"]


def test_clock_out_closes_running_break():
    employee = EmployeeFactory()
    services.clock_in(employee, now=at(DAY, 9))
    services.start_break(employee, now=at(DAY, 16))
    record = services.clock_out(employee, now=at(DAY, 16, 30))
    assert record.total_break_minutes == 30
    assert not record.on_break


def test_clock_out_requires_open_session():
    employee = EmployeeFactory()
    with pytest.raises(services.AttendanceError, match="No clock-in"):
        services.clock_out(employee, now=at(DAY, 17))

    services.clock_in(employee, now=at(DAY, 9))
    services.clock_out(employee, now=at(DAY, 17))
    with pytest.raises(services.AttendanceError, match="Already clocked out"):
        services.clock_out(employee, now=at(DAY, 18))
    with pytest.raises(services.AttendanceError, match="Already clocked out"):
        services.start_break(employee, now=at(DAY, 18))


def test_end_break_without_break():
    employee = EmployeeFactory()
    services.clock_in(employee, now=at(DAY, 9))
    with pytest.raises(services.AttendanceError, match="No break"):
        services.end_break(employee, now=at(DAY, 10))


def test_auto_clockout_closes_only_earlier_days(settings):
    employee = EmployeeFactory()
    yesterday = DAY - timedelta(days=1)
    stale = services.clock_in(employee, now=at(yesterday, 9), notes="late shift")
    services.start_break(employee, now=at(yesterday, 22))
    current = services.clock_in(employee, now=at(DAY, 9))

    results = services.auto_clockout_overdue(DAY)

    assert [r["id"] for r in results] == [stale.pk]
    assert results[0]["status"] == "success"
    stale.refresh_from_db()
    assert timezone.localtime(stale.clock_out).time() == time(23, 59, 59)
    assert stale.notes == f"late shift {settings.AGENCY_AUTO_CLOCKOUT_TAG}"
    assert stale.is_auto_clockout
    assert stale.total_break_minutes == 119
    current.refresh_from_db()
    assert current.clock_out is None
    assert AutoClockoutNotification.objects.filter(attendance=stale).count() == 1


def test_clockin_summary_collects_agenda():
    employee = EmployeeFactory()
    user = employee.user
    due = TaskFactory(assigned_to=user, deadline=DAY)
    late = TaskFactory(deadline=DAY - timedelta(days=3))
    late.assignees.add(user)
    TaskFactory(assigned_to=user, deadline=DAY - timedelta(days=1), status="done")
    Attendance.objects.create(
        employee=employee,
        date=DAY - timedelta(days=1),
        clock_in=at(DAY - timedelta(days=1), 9),
        clock_out=at(DAY - timedelta(days=1), 23, 59),
        notes="[AUTO CLOCK-OUT - LUPA CLOCK OUT]",
    )

    summary = services.build_clockin_summary(employee, today=DAY)

    assert summary["tasks_due_today"] == [due]
    assert summary["overdue_tasks"] == [late]
    assert summary["meetings_today"] == []
    assert summary["forgot_clockout_yesterday"] is True


def test_clockin_summary_lists_only_own_meetings():
    employee = EmployeeFactory()
    stranger = UserFactory()

    def meeting(title, organizer, start):
        return Meeting.objects.create(
            title=title,
            meeting_date=DAY,
            start_time=time(start),
            end_time=time(start + 1),
            meeting_link="https://meet.example.com/x",
            created_by=organizer,
        )

    meeting("Someone else's sync", stranger, 9)
    invited = meeting("Client review", stranger, 13)
    MeetingParticipant.objects.create(meeting=invited, user=employee.user)
    own = meeting("Weekly plan", employee.user, 10)
    cancelled = meeting("Dropped", employee.user, 15)
    cancelled.status = Meeting.Status.CANCELLED
    cancelled.save(update_fields=["status"])

    summary = services.build_clockin_summary(employee, today=DAY)

    assert summary["meetings_today"] == [own, invited]
