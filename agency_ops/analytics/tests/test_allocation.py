from decimal import Decimal

import pytest

from agency_ops.analytics.allocation import KIND_MEETING
from agency_ops.analytics.allocation import KIND_TASK
from agency_ops.analytics.allocation import Activity
from agency_ops.analytics.allocation import ClientRef
from agency_ops.analytics.allocation import StaffCost
from agency_ops.analytics.allocation import allocate_resource_costs
from agency_ops.analytics.allocation import workload_band

STAFF = [
    StaffCost(1, "Ayu", Decimal("10000000")),
    StaffCost(2, "Bayu", Decimal("6000000")),
]
CLIENTS = [
    ClientRef(10, "Kopi Nusantara", "PT Kopi"),
    ClientRef(20, "Batik Lestari"),
    ClientRef(30, "Idle Client"),
]


@pytest.mark.parametrize(
    ("percentage", "band"),
    [(30, "high"), (29.99, "medium"), (15, "medium"), (14.9, "normal")],
)
def test_workload_band(percentage, band):
    assert workload_band(percentage) == band


def test_salary_split_by_activity_share():
    activities = [
        *[Activity(1, 10, KIND_TASK)] * 3,
        Activity(1, 20, KIND_MEETING),
        *[Activity(2, 10, KIND_TASK)] * 2,
        # Unknown staff and missing clients are ignored.
        Activity(99, 10, KIND_TASK),
        Activity(2, 0, KIND_TASK),
    ]

    result = allocate_resource_costs(STAFF, CLIENTS, activities)

    assert [row["client_id"] for row in result["clients"]] == [10, 20]
    kopi, batik = result["clients"]
    assert kopi["estimated_cost"] == Decimal("13500000.00")
    assert kopi["task_count"] == 5
    assert kopi["workload_percentage"] == 83.33
    assert kopi["workload_band"] == "high"
    ayu = next(e for e in kopi["employees"] if e["user_id"] == 1)
    assert ayu["percentage_for_client"] == 75.0
    assert ayu["estimated_cost"] == Decimal("7500000.00")

    assert batik["meeting_count"] == 1
    assert batik["estimated_cost"] == Decimal("2500000.00")
    assert batik["workload_band"] == "medium"

    assert result["total_cost"] == Decimal("16000000.00")
    assert result["total_activities"] == 6
    assert result["company_activities"] == 6


def test_no_activity_means_no_rows():
    result = allocate_resource_costs(STAFF, CLIENTS, [])
    assert result["clients"] == []
    assert result["total_cost"] == Decimal("0")
