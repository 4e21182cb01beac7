from datetime import datetime
from datetime import timedelta
from types import SimpleNamespace

import pytest

from agency_ops.recruitment import metrics

NOW = datetime(2024, 6, 30, 12, 0)  # noqa: DTZ001


def candidate(status, *, hr_pic=None, applied_days_ago=1, updated_days_ago=0, **extra):
    pic = SimpleNamespace(pk=hr_pic, display_name=f"HR {hr_pic}") if hr_pic else None
    return SimpleNamespace(
        status=status,
        hr_pic_id=hr_pic,
        hr_pic=pic,
        applied_at=NOW - timedelta(days=applied_days_ago),
        updated_at=NOW - timedelta(days=updated_days_ago),
        position=extra.get("position", "Designer"),
    )


def history(candidate_id, old, new, day):
    return SimpleNamespace(
        candidate_id=candidate_id,
        old_status=old,
        new_status=new,
        created_at=NOW + timedelta(days=day),
    )


@pytest.mark.parametrize(
    ("value", "expected"), [(2.5, 3), (3.49, 3), (0.5, 1), (0, 0)]
)
def test_round_half_up(value, expected):
    assert metrics.round_half_up(value) == expected


def test_range_start():
    assert metrics.range_start("7d", NOW) == NOW - timedelta(days=7)
    assert metrics.range_start("all", NOW) is None


def test_filter_candidates():
    rows = [
        candidate("applied", applied_days_ago=2),
        candidate("applied", applied_days_ago=40),
        candidate("hired", hr_pic=5, position="Editor"),
    ]
    since = metrics.range_start("30d", NOW)
    assert len(metrics.filter_candidates(rows, since=since)) == 2
    assert metrics.filter_candidates(rows, position="Editor") == [rows[2]]
    assert metrics.filter_candidates(rows, hr_pic=5, status="hired") == [rows[2]]


def test_pipeline_and_funnel():
    rows = [
        candidate("applied"),
        candidate("screening_hr"),
        candidate("interview_user"),
        candidate("hired"),
        candidate("rejected"),
    ]
    assert metrics.pipeline_stats(rows) == {
        "total": 5,
        "new": 1,
        "in_process": 2,
        "hired": 1,
        "rejected": 1,
    }
    funnel = metrics.funnel(rows)
    assert [s["value"] for s in funnel] == [4, 3, 2, 1, 1, 1]
    assert [s["conversion"] for s in funnel] == [100, 75, 50, 25, 25, 25]


def test_funnel_without_candidates():
    assert all(s["conversion"] in (0, 100) for s in metrics.funnel([]))
    assert metrics.funnel([])[1]["conversion"] == 0


def test_time_to_progress_averages_per_transition():
    rows = [
        history(1, "", "applied", 0),
        history(1, "applied", "screening_hr", 3),
        history(2, "", "applied", 0),
        history(2, "applied", "screening_hr", 4),
        history(2, "screening_hr", "interview_user", 6),
    ]
    assert metrics.time_to_progress(rows) == {
        "apply_to_screening": 4,
        "screening_to_interview": 2,
        "interview_to_hired": None,
    }


def test_hr_pic_stats_and_needs_attention():
    rows = [
        candidate("applied", hr_pic=1, updated_days_ago=10),
        candidate("hired", hr_pic=1, updated_days_ago=10),
        candidate("offering", hr_pic=2, updated_days_ago=3),
        candidate("applied"),
    ]
    stats = metrics.hr_pic_stats(rows)
    assert stats[0] == {
        "hr_pic": 1,
        "name": "HR 1",
        "total": 2,
        "active": 1,
        "completed": 1,
    }
    assert stats[1]["hr_pic"] == 2
    assert metrics.needs_attention(rows, NOW) == [rows[0]]
    assert metrics.status_distribution(rows) == {"applied": 2, "hired": 1, "offering": 1}
