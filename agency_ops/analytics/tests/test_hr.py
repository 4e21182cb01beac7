from datetime import date
from datetime import datetime
from datetime import timedelta

import pytest

from agency_ops.analytics import hr

TODAY = date(2024, 5, 20)
EMPLOYEES = [hr.EmployeeRow(1, "Ayu"), hr.EmployeeRow(2, "Bayu")]


def shift(user_id, hours, *, notes="", day=1, break_minutes=0):
    start = datetime(2024, 5, day, 9, 0)  # noqa: DTZ001
    return hr.AttendanceRow(
        user_id=user_id,
        clock_in=start,
        clock_out=start + timedelta(hours=hours),
        break_minutes=break_minutes,
        notes=notes,
    )


def task(status, *users, deadline=None):
    return hr.TaskRow(status=status, deadline=deadline, assignee_ids=frozenset(users))


AUTO = "[AUTO CLOCK-OUT - LUPA CLOCK OUT]"
OVERDUE = TODAY - timedelta(days=2)


@pytest.mark.parametrize(("value", "expected"), [(2.25, 2.3), (2.24, 2.2), (0, 0)])
def test_round1(value, expected):
    assert hr.round1(value) == expected


def test_hr_kpis():
    attendance = [shift(1, 8), shift(1, 4, notes=AUTO, day=2), shift(2, 6)]
    tasks = [
        task("done", 1),
        task("pending", 2, deadline=OVERDUE),
        task("pending", 2, deadline=TODAY),
    ]
    meetings = [hr.MeetingRow(frozenset({1, 2}))]

    kpis = hr.hr_kpis(
        EMPLOYEES, attendance, tasks, meetings, [shift(1, 12)], today=TODAY
    )

    assert kpis["total_employees"] == 2
    assert kpis["total_work_hours"] == 18.0
    assert kpis["avg_work_hours_per_employee"] == 9.0
    assert kpis["total_activities"] == 4
    assert kpis["overdue_tasks"] == 1
    assert kpis["auto_clockouts"] == 1
    assert kpis["avg_productivity"] == 2.0
    assert kpis["compare_work_hours"] == 12.0
    assert kpis["work_hours_change"] == 50
    # No auto clock-outs before, one now.
    assert kpis["auto_clockout_change"] == 100


def test_hr_kpis_empty_company():
    kpis = hr.hr_kpis([], [], [], [], today=TODAY)
    assert kpis["avg_work_hours_per_employee"] == 0
    assert kpis["avg_productivity"] == 0
    assert kpis["work_hours_change"] == 0
    assert kpis["auto_clockout_change"] == 0


def test_risk_panel():
    attendance = [shift(1, 1, notes=AUTO, day=d) for d in (1, 2, 3)]
    attendance += [shift(2, 10, day=d) for d in range(1, 6)]
    tasks = [task("pending", 2, deadline=OVERDUE) for _ in range(3)]
    tasks.append(task("completed", 2))

    panel = hr.risk_panel(EMPLOYEES, attendance, tasks, today=TODAY)

    assert panel["high_auto_clockout"] == [{"user_id": 1, "name": "Ayu", "count": 3}]
    assert panel["high_overdue"] == [{"user_id": 2, "name": "Bayu", "count": 3}]
    assert panel["high_hours_low_activity"] == [
        {"user_id": 2, "name": "Bayu", "hours": 50, "activities": 1}
    ]
    assert panel["low_hours_high_activity"] == []


def test_low_hours_high_activity():
    attendance = [shift(1, 5)]
    tasks = [task("done", 1) for _ in range(11)]
    panel = hr.risk_panel(EMPLOYEES[:1], attendance, tasks, today=TODAY)
    assert panel["low_hours_high_activity"] == [
        {"user_id": 1, "name": "Ayu", "hours": 5, "activities": 11}
    ]


def test_productivity_score_never_negative():
    assert hr.productivity_score(2, 3, 10, 1, 0) == 25.0
    assert hr.productivity_score(0, 0, 0, 2, 1) == 0.0


def test_productivity_ranking_orders_by_score():
    attendance = [shift(1, 8), shift(2, 8), shift(2, 8, day=2)]
    tasks = [task("done", 2), task("pending", 1, deadline=OVERDUE)]
    meetings = [hr.MeetingRow(frozenset({2}))]

    ranking = hr.productivity_ranking(
        EMPLOYEES, attendance, tasks, meetings, today=TODAY
    )

    assert [row["user_id"] for row in ranking] == [2, 1]
    bayu = ranking[0]
    assert bayu["activities"] == 2
    assert bayu["days_present"] == 2
    assert bayu["work_hours"] == 16.0
    assert bayu["score"] == 2 * 10 + 2 * 5 + 16 * 0.5
    assert ranking[1]["overdue"] == 1
