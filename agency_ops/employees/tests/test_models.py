from decimal import Decimal

import pytest

from agency_ops.employees.models import compute_monthly_salary


@pytest.mark.parametrize(
    ("components", "flat", "expected"),
    [
        (("5000000", "500000", "300000", "700000"), "0", Decimal("6500000")),
        (("0", "0", "0", "0"), "4000000", Decimal("4000000")),
        (("0", "0", "0", "0"), None, Decimal("0")),
        ((None, "250000", None, None), "9000000", Decimal("250000")),
    ],
)
def test_compute_monthly_salary(components, flat, expected):
    values = [Decimal(v) if v is not None else None for v in components]
    flat_value = Decimal(flat) if flat is not None else None
    assert compute_monthly_salary(*values, flat_value) == expected
