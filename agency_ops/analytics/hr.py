"""HR analytics over plain rows: KPI tiles, risk panel and productivity ranking."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING

from agency_ops.attendance.calculations import is_auto_clockout
from agency_ops.attendance.calculations import work_minutes
from agency_ops.clients.models import is_finished

if TYPE_CHECKING:
    from collections.abc import Iterable
    from collections.abc import Sequence
    from datetime import date
    from datetime import datetime

AUTO_CLOCKOUT_RISK = 3
OVERDUE_RISK = 3
HIGH_HOURS = 40
LOW_ACTIVITY = 5
LOW_HOURS = 20
HIGH_ACTIVITY = 10


@dataclass(frozen=True)
class EmployeeRow:
    user_id: int
    name: str = ""


@dataclass(frozen=True)
class AttendanceRow:
    user_id: int
    clock_in: datetime | None
    clock_out: datetime | None
    break_minutes: int = 0
    notes: str = ""

    @property
    def minutes(self) -> int:
        return work_minutes(self.clock_in, self.clock_out, self.break_minutes)

    @property
    def auto(self) -> bool:
        return is_auto_clockout(self.notes)


@dataclass(frozen=True)
class TaskRow:
    status: str
    deadline: date | None = None
    assignee_ids: frozenset[int] = field(default_factory=frozenset)

    def is_overdue(self, today: date) -> bool:
        return (
            self.deadline is not None
            and not is_finished(self.status)
            and self.deadline < today
        )


@dataclass(frozen=True)
class MeetingRow:
    # Creator and internal participants.
    participant_ids: frozenset[int] = field(default_factory=frozenset)


def round1(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def round0(value: float) -> int:
    return math.floor(value + 0.5)


def _percent_change(current: float, previous: float) -> int:
    return round0((current - previous) / previous * 100)


def hr_kpis(  # noqa: PLR0913
    employees: Sequence[EmployeeRow],
    attendance: Sequence[AttendanceRow],
    tasks: Sequence[TaskRow],
    meetings: Sequence[MeetingRow],
    compare_attendance: Sequence[AttendanceRow] = (),
    *,
    today: date,
) -> dict:
    total_employees = len(employees)
    total_hours = round1(sum(a.minutes for a in attendance) / 60)
    activities = len(tasks) + len(meetings)
    auto_count = sum(1 for a in attendance if a.auto)

    compare_hours = round1(sum(a.minutes for a in compare_attendance) / 60)
    compare_auto = sum(1 for a in compare_attendance if a.auto)
    if compare_auto > 0:
        auto_change = _percent_change(auto_count, compare_auto)
    else:
        auto_change = 100 if auto_count > 0 else 0

    return {
        "total_employees": total_employees,
        "total_work_hours": total_hours,
        "avg_work_hours_per_employee": (
            round1(total_hours / total_employees) if total_employees else 0
        ),
        "total_activities": activities,
        "task_count": len(tasks),
        "meeting_count": len(meetings),
        "overdue_tasks": sum(1 for t in tasks if t.is_overdue(today)),
        "auto_clockouts": auto_count,
        "avg_productivity": (
            round1(activities / total_employees) if total_employees else 0
        ),
        "compare_work_hours": compare_hours,
        "compare_auto_clockouts": compare_auto,
        "work_hours_change": (
            _percent_change(total_hours, compare_hours) if compare_hours > 0 else 0
        ),
        "auto_clockout_change": auto_change,
    }


@dataclass
class _EmployeeTotals:
    minutes: int = 0
    days_present: int = 0
    auto_clockouts: int = 0
    finished_tasks: int = 0
    overdue: int = 0
    meetings: int = 0


def _totals(
    employees: Iterable[EmployeeRow],
    attendance: Iterable[AttendanceRow],
    tasks: Iterable[TaskRow],
    meetings: Iterable[MeetingRow],
    today: date,
) -> dict[int, _EmployeeTotals]:
    totals = {e.user_id: _EmployeeTotals() for e in employees}
    for a in attendance:
        t = totals.get(a.user_id)
        if t is None:
            continue
        t.minutes += a.minutes
        if a.clock_in is not None:
            t.days_present += 1
        if a.auto:
            t.auto_clockouts += 1
    for task in tasks:
        for uid in task.assignee_ids:
            t = totals.get(uid)
            if t is None:
                continue
            if is_finished(task.status):
                t.finished_tasks += 1
            elif task.is_overdue(today):
                t.overdue += 1
    for meeting in meetings:
        for uid in meeting.participant_ids:
            if uid in totals:
                totals[uid].meetings += 1
    return totals


def risk_panel(
    employees: Sequence[EmployeeRow],
    attendance: Iterable[AttendanceRow],
    tasks: Iterable[TaskRow],
    *,
    today: date,
) -> dict[str, list[dict]]:
    names = {e.user_id: e.name for e in employees}
    totals = _totals(employees, attendance, tasks, (), today)
    panel: dict[str, list[dict]] = {
        "high_auto_clockout": [],
        "high_hours_low_activity": [],
        "low_hours_high_activity": [],
        "high_overdue": [],
    }
    for uid, t in totals.items():
        hours = round0(t.minutes / 60)
        base = {"user_id": uid, "name": names.get(uid, "")}
        if t.auto_clockouts >= AUTO_CLOCKOUT_RISK:
            panel["high_auto_clockout"].append({**base, "count": t.auto_clockouts})
        if hours > HIGH_HOURS and t.finished_tasks < LOW_ACTIVITY:
            panel["high_hours_low_activity"].append(
                {**base, "hours": hours, "activities": t.finished_tasks}
            )
        if 0 < hours < LOW_HOURS and t.finished_tasks > HIGH_ACTIVITY:
            panel["low_hours_high_activity"].append(
                {**base, "hours": hours, "activities": t.finished_tasks}
            )
        if t.overdue >= OVERDUE_RISK:
            panel["high_overdue"].append({**base, "count": t.overdue})
    panel["high_auto_clockout"].sort(key=lambda r: -r["count"])
    panel["high_overdue"].sort(key=lambda r: -r["count"])
    return panel


def productivity_score(  # noqa: PLR0913
    activities: int,
    days_present: int,
    hours: float,
    overdue: int,
    auto_clockouts: int,
) -> float:
    score = (
        activities * 10
        + days_present * 5
        + hours * 0.5
        - overdue * 15
        - auto_clockouts * 10
    )
    return max(0.0, score)


def productivity_ranking(
    employees: Sequence[EmployeeRow],
    attendance: Iterable[AttendanceRow],
    tasks: Iterable[TaskRow],
    meetings: Iterable[MeetingRow],
    *,
    today: date,
) -> list[dict]:
    totals = _totals(employees, attendance, tasks, meetings, today)
    rows = []
    for employee in employees:
        t = totals[employee.user_id]
        hours = round1(t.minutes / 60)
        activities = t.finished_tasks + t.meetings
        rows.append(
            {
                "user_id": employee.user_id,
                "name": employee.name,
                "work_hours": hours,
                "activities": activities,
                "tasks_completed": t.finished_tasks,
                "meetings": t.meetings,
                "overdue": t.overdue,
                "days_present": t.days_present,
                "auto_clockouts": t.auto_clockouts,
                "score": productivity_score(
                    activities, t.days_present, hours, t.overdue, t.auto_clockouts
                ),
            }
        )
    rows.sort(key=lambda r: -r["score"])
    return rows
