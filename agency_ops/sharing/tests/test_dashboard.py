from datetime import date
from datetime import datetime
from datetime import timedelta

from agency_ops.sharing.dashboard import client_dashboard
from agency_ops.sharing.dashboard import merge_comments
from agency_ops.sharing.dashboard import sort_tasks

TODAY = date(2024, 8, 10)


def _task(pk, status, deadline=None, project_id=1):
    return {"id": pk, "status": status, "deadline": deadline, "project_id": project_id}


def test_sort_tasks_puts_missing_deadlines_last():
    tasks = [
        _task(1, "pending"),
        _task(2, "pending", TODAY + timedelta(days=3)),
        _task(3, "completed", TODAY),
    ]
    assert [t["id"] for t in sort_tasks(tasks)] == [3, 2, 1]
    assert [t["id"] for t in sort_tasks(tasks, "status")] == [3, 1, 2]
    assert [t["id"] for t in sort_tasks(tasks, "title")] == [1, 2, 3]


def test_client_dashboard_counts():
    projects = [
        {"id": 1, "status": "in_progress", "deadline": TODAY - timedelta(days=1)},
        {"id": 2, "status": "completed", "deadline": TODAY - timedelta(days=30)},
        {"id": 3, "status": "pending", "deadline": None},
    ]
    tasks = [
        _task(10, "completed", TODAY - timedelta(days=5)),
        _task(11, "pending", TODAY - timedelta(days=1)),
        _task(12, "in_progress", TODAY + timedelta(days=3)),
        _task(13, "pending", TODAY + timedelta(days=4)),
        _task(14, "completed", TODAY + timedelta(days=1), project_id=2),
    ]

    result = client_dashboard(projects, tasks, today=TODAY)

    first, second, third = result["projects"]
    assert first["total_tasks"] == 4
    assert first["completed_tasks"] == 1
    assert first["is_delayed"] is True
    assert second["is_delayed"] is False
    assert third["total_tasks"] == 0
    assert result["analytics"] == {
        "total_projects": 3,
        "completed_projects": 1,
        "in_progress_projects": 1,
        "delayed_projects": 1,
        "total_tasks": 5,
        "completed_tasks": 2,
        "in_progress_tasks": 1,
        "pending_tasks": 2,
        "overdue_tasks": 1,
        "upcoming_deadlines": 1,
    }


def test_merge_comments_orders_by_time():
    t0 = datetime(2024, 8, 1, 9, 0)  # noqa: DTZ001
    internal = [{"id": 1, "created_at": t0 + timedelta(hours=2)}]
    public = [{"id": 2, "created_at": t0}]
    merged = merge_comments(internal, public)
    assert [(c["id"], c["type"]) for c in merged] == [(2, "public"), (1, "internal")]


def test_done_but_not_completed_still_counts_as_late():
    projects = [{"id": 1, "status": "done", "deadline": TODAY - timedelta(days=2)}]
    tasks = [
        _task(20, "done", TODAY - timedelta(days=1)),
        _task(21, "completed", TODAY - timedelta(days=1)),
    ]

    result = client_dashboard(projects, tasks, today=TODAY)

    assert result["projects"][0]["is_delayed"] is True
    assert result["analytics"]["overdue_tasks"] == 1
    assert result["analytics"]["delayed_projects"] == 1
