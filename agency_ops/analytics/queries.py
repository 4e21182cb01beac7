"""Database loaders turning model rows into the plain rows the analytics use."""

from __future__ import annotations

from typing import TYPE_CHECKING

from agency_ops.analytics.allocation import KIND_MEETING
from agency_ops.analytics.allocation import KIND_TASK
from agency_ops.analytics.allocation import Activity
from agency_ops.analytics.allocation import ClientRef
from agency_ops.analytics.allocation import StaffCost
from agency_ops.analytics.hr import AttendanceRow
from agency_ops.analytics.hr import EmployeeRow
from agency_ops.analytics.hr import MeetingRow
from agency_ops.analytics.hr import TaskRow
from agency_ops.attendance.models import Attendance
from agency_ops.clients.models import Client
from agency_ops.clients.models import Task
from agency_ops.employees.models import Employee
from agency_ops.meetings.models import Meeting

if TYPE_CHECKING:
    from datetime import date


def active_employees(role: str | None = None):
    qs = Employee.objects.filter(status=Employee.Status.ACTIVE).select_related("user")
    if role:
        qs = qs.filter(user__groups__name=role).distinct()
    return qs


def employee_rows(role: str | None = None) -> list[EmployeeRow]:
    return [
        EmployeeRow(user_id=e.user_id, name=e.full_name) for e in active_employees(role)
    ]


def attendance_rows(start: date, end: date, user_ids) -> list[AttendanceRow]:
    qs = Attendance.objects.filter(
        date__gte=start, date__lte=end, employee__user_id__in=list(user_ids)
    ).select_related("employee")
    return [
        AttendanceRow(
            user_id=a.employee.user_id,
            clock_in=a.clock_in,
            clock_out=a.clock_out,
            break_minutes=a.total_break_minutes,
            notes=a.notes,
        )
        for a in qs
    ]


def task_rows(start: date, end: date) -> list[TaskRow]:
    qs = Task.objects.filter(
        created_at__date__gte=start, created_at__date__lte=end
    ).prefetch_related("assignees")
    return [
        TaskRow(
            status=t.status,
            deadline=t.deadline,
            assignee_ids=frozenset(t.assignee_ids()),
        )
        for t in qs
    ]


def _meetings(start: date, end: date):
    return Meeting.objects.filter(
        meeting_date__gte=start, meeting_date__lte=end
    ).prefetch_related("participants")


def meeting_rows(start: date, end: date) -> list[MeetingRow]:
    rows = []
    for m in _meetings(start, end):
        ids = {p.user_id for p in m.participants.all()}
        if m.created_by_id:
            ids.add(m.created_by_id)
        rows.append(MeetingRow(participant_ids=frozenset(ids)))
    return rows


def staff_costs() -> list[StaffCost]:
    return [
        StaffCost(user_id=e.user_id, name=e.full_name, monthly_salary=e.monthly_salary)
        for e in active_employees()
    ]


def external_clients() -> list[ClientRef]:
    return [
        ClientRef(client_id=c.pk, name=c.name, company=c.company)
        for c in Client.objects.filter(client_type=Client.ClientType.CLIENT)
    ]


def client_activities(start: date, end: date) -> list[Activity]:
    """Task assignments by project client, plus internal meeting attendance."""
    activities = [
        Activity(user_id=t.assigned_to_id, client_id=t.project.client_id, kind=KIND_TASK)
        for t in Task.objects.filter(
            created_at__date__gte=start,
            created_at__date__lte=end,
            assigned_to__isnull=False,
        ).select_related("project")
    ]
    for m in _meetings(start, end).filter(client__isnull=False):
        activities.extend(
            Activity(user_id=p.user_id, client_id=m.client_id, kind=KIND_MEETING)
            for p in m.participants.all()
        )
    return activities
