"""Read-only client dashboard figures built from project and task rows.

Rows are plain dicts as returned by ``QuerySet.values()``. A project or task
counts as late when its deadline has passed and it is not ``completed``.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from datetime import timedelta

UPCOMING_DAYS = 3
SORT_FIELDS = {"deadline", "status"}


def _late(row: dict, today: date) -> bool:
    deadline = row.get("deadline")
    return bool(deadline) and deadline < today and row.get("status") != "completed"


def _count(rows, status: str) -> int:
    return sum(1 for r in rows if r.get("status") == status)


def sort_tasks(tasks: list[dict], sort_by: str = "deadline") -> list[dict]:
    if sort_by == "status":
        return sorted(tasks, key=lambda t: t.get("status") or "")
    if sort_by == "deadline":
        # Tasks without a deadline go last.
        return sorted(
            tasks, key=lambda t: (t.get("deadline") is None, t.get("deadline") or date.min)
        )
    return list(tasks)


def client_dashboard(projects: list[dict], tasks: list[dict], *, today: date) -> dict:
    by_project: dict[int, list[dict]] = defaultdict(list)
    for task in tasks:
        by_project[task["project_id"]].append(task)

    enriched = [
        {
            **project,
            "total_tasks": len(by_project[project["id"]]),
            "completed_tasks": _count(by_project[project["id"]], "completed"),
            "is_delayed": _late(project, today),
        }
        for project in projects
    ]
    horizon = today + timedelta(days=UPCOMING_DAYS)
    upcoming = sum(
        1
        for t in tasks
        if t.get("deadline")
        and t.get("status") != "completed"
        and today <= t["deadline"] <= horizon
    )
    return {
        "projects": enriched,
        "tasks": tasks,
        "analytics": {
            "total_projects": len(projects),
            "completed_projects": _count(projects, "completed"),
            "in_progress_projects": _count(projects, "in_progress"),
            "delayed_projects": sum(1 for p in projects if _late(p, today)),
            "total_tasks": len(tasks),
            "completed_tasks": _count(tasks, "completed"),
            "in_progress_tasks": _count(tasks, "in_progress"),
            "pending_tasks": _count(tasks, "pending"),
            "overdue_tasks": sum(1 for t in tasks if _late(t, today)),
            "upcoming_deadlines": upcoming,
        },
    }


def merge_comments(internal: list[dict], public: list[dict]) -> list[dict]:
    """Both comment kinds in time order, each tagged with a ``type``."""
    merged = [{**c, "type": "internal"} for c in internal]
    merged.extend({**c, "type": "public"} for c in public)
    return sorted(merged, key=lambda c: c["created_at"])
