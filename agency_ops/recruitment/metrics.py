"""Recruitment dashboard numbers computed from candidate rows and status history."""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import datetime
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

FUNNEL_STAGES = (
    "applied",
    "screening_hr",
    "interview_user",
    "interview_final",
    "offering",
    "hired",
)
IN_PROCESS = ("screening_hr", "interview_user", "interview_final", "offering")
CLOSED = ("hired", "rejected")
STALE_AFTER_DAYS = 7
RANGE_DAYS = {"7d": 7, "30d": 30, "90d": 90}
TIME_TO_PROGRESS = (
    ("apply_to_screening", "applied", "screening_hr"),
    ("screening_to_interview", "screening_hr", "interview_user"),
    ("interview_to_hired", "interview_user", "hired"),
)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def range_start(range_key: str, now: datetime) -> datetime | None:
    days = RANGE_DAYS.get(range_key)
    return now - timedelta(days=days) if days else None


def filter_candidates(
    candidates: Iterable,
    *,
    since: datetime | None = None,
    position: str | None = None,
    status: str | None = None,
    hr_pic: int | None = None,
) -> list:
    rows = []
    for c in candidates:
        if since is not None and c.applied_at < since:
            continue
        if position and c.position != position:
            continue
        if status and c.status != status:
            continue
        if hr_pic is not None and c.hr_pic_id != hr_pic:
            continue
        rows.append(c)
    return rows


def pipeline_stats(candidates: Iterable) -> dict:
    rows = list(candidates)
    return {
        "total": len(rows),
        "new": sum(1 for c in rows if c.status == "applied"),
        "in_process": sum(1 for c in rows if c.status in IN_PROCESS),
        "hired": sum(1 for c in rows if c.status == "hired"),
        "rejected": sum(1 for c in rows if c.status == "rejected"),
    }


def funnel(candidates: Iterable) -> list[dict]:
    """How many candidates reached at least each stage.

    Hired candidates count for every stage; rejected ones count for none
    since their last stage is not recorded on the row.
    """
    rows = list(candidates)
    counts = []
    for idx, stage in enumerate(FUNNEL_STAGES):
        value = 0
        for c in rows:
            if c.status == "hired":
                value += 1
            elif c.status in FUNNEL_STAGES and FUNNEL_STAGES.index(c.status) >= idx:
                value += 1
        counts.append({"stage": stage, "value": value})

    first = counts[0]["value"] if counts else 0
    for idx, item in enumerate(counts):
        if idx == 0:
            item["conversion"] = 100
        elif first > 0:
            item["conversion"] = round_half_up(item["value"] / first * 100)
        else:
            item["conversion"] = 0
    return counts


def status_distribution(candidates: Iterable) -> dict[str, int]:
    counts: dict[str, int] = {}
    for c in candidates:
        counts[c.status] = counts.get(c.status, 0) + 1
    return counts


def average_days_between(history: Iterable, from_status: str, to_status: str) -> int | None:
    """Mean whole days from entering ``from_status`` to moving on to ``to_status``.

    ``history`` rows need ``candidate_id``, ``old_status``, ``new_status`` and
    ``created_at``.
    """
    by_candidate: dict = defaultdict(list)
    for row in history:
        by_candidate[row.candidate_id].append(row)

    transitions: list[int] = []
    for rows in by_candidate.values():
        entered = None
        for row in sorted(rows, key=lambda r: r.created_at):
            if row.new_status == from_status and entered is None:
                entered = row.created_at
            if (
                row.old_status == from_status
                and row.new_status == to_status
                and entered is not None
            ):
                transitions.append((row.created_at - entered).days)
                entered = None
    if not transitions:
        return None
    return round_half_up(sum(transitions) / len(transitions))


def time_to_progress(history: Iterable) -> dict[str, int | None]:
    rows = list(history)
    return {
        key: average_days_between(rows, start, end)
        for key, start, end in TIME_TO_PROGRESS
    }


def hr_pic_stats(candidates: Iterable) -> list[dict]:
    stats: dict[int, dict] = {}
    for c in candidates:
        if not c.hr_pic_id:
            continue
        entry = stats.setdefault(
            c.hr_pic_id,
            {
                "hr_pic": c.hr_pic_id,
                "name": getattr(c.hr_pic, "display_name", "") if c.hr_pic else "",
                "total": 0,
                "active": 0,
                "completed": 0,
            },
        )
        entry["total"] += 1
        if c.status in CLOSED:
            entry["completed"] += 1
        else:
            entry["active"] += 1
    return sorted(stats.values(), key=lambda e: -e["total"])


def needs_attention(candidates: Iterable, now: datetime) -> list:
    return [
        c
        for c in candidates
        if c.status not in CLOSED and (now - c.updated_at).days > STALE_AFTER_DAYS
    ]
