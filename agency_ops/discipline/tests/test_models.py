from types import SimpleNamespace

from agency_ops.discipline.models import summarize_cases


def _case(employee_id, status="pending", severity="minor"):
    return SimpleNamespace(employee_id=employee_id, status=status, severity=severity)


def test_summarize_cases_counts_and_repeat_offenders():
    cases = [
        _case(1),
        _case(1, "investigating", "major"),
        _case(1, "resolved", "major"),
        _case(2, "dismissed"),
        _case(3, "warning_issued", "critical"),
        _case(3),
    ]
    summary = summarize_cases(cases)

    assert summary["total"] == 6
    assert summary["open"] == 3
    assert summary["by_status"]["resolved"] == 1
    assert summary["by_severity"] == {
        "minor": 3,
        "moderate": 0,
        "major": 2,
        "critical": 1,
    }
    assert summary["repeat_employees"] == [
        {"employee_id": 1, "cases": 3},
        {"employee_id": 3, "cases": 2},
    ]


def test_summarize_no_cases():
    summary = summarize_cases([])
    assert summary["total"] == 0
    assert summary["open"] == 0
    assert summary["repeat_employees"] == []
    assert set(summary["by_status"]) == {
        "pending",
        "investigating",
        "warning_issued",
        "resolved",
        "dismissed",
    }
