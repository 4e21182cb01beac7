"""Income statement arithmetic.

Everything here works on plain rows (model instances or any object with the
same attributes) so the numbers can be checked without a database.
"""

from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from agency_ops.finance.categories import GROUP_ADMIN
from agency_ops.finance.categories import GROUP_COGS
from agency_ops.finance.categories import GROUP_HR
from agency_ops.finance.categories import GROUP_IT
from agency_ops.finance.categories import GROUP_MARKETING
from agency_ops.finance.categories import expense_group

if TYPE_CHECKING:
    from collections.abc import Iterable

MAIN_REVENUE_TYPES = frozenset({"retainer", "project", "event"})
ZERO = Decimal("0")


def _money(value) -> Decimal:
    return Decimal(str(value or 0))


def calculate_margin(revenue, cost) -> float:
    revenue = _money(revenue)
    if revenue <= 0:
        return 0.0
    return round(float((revenue - _money(cost)) / revenue * 100), 2)


def calculate_change(current, previous) -> float:
    current, previous = _money(current), _money(previous)
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round(float((current - previous) / previous * 100), 2)


def calculate_cash_runway(balance, monthly_expenses) -> float:
    monthly_expenses = _money(monthly_expenses)
    if monthly_expenses <= 0:
        return 0.0
    return round(float(_money(balance) / monthly_expenses), 1)


@dataclass
class IncomeStatement:
    main_revenue: Decimal = ZERO
    other_revenue: Decimal = ZERO
    total_revenue: Decimal = ZERO
    cogs: Decimal = ZERO
    gross_profit: Decimal = ZERO
    hr_expenses: Decimal = ZERO
    payroll_total: Decimal = ZERO
    marketing_expenses: Decimal = ZERO
    it_expenses: Decimal = ZERO
    admin_expenses: Decimal = ZERO
    other_expenses: Decimal = ZERO
    total_operating_expenses: Decimal = ZERO
    operating_profit: Decimal = ZERO
    net_profit: Decimal = ZERO
    gross_margin: float = 0.0
    operating_margin: float = 0.0
    net_margin: float = 0.0

    def as_dict(self) -> dict:
        return asdict(self)


# Lines compared month over month.
COMPARED_LINES = (
    "main_revenue",
    "other_revenue",
    "total_revenue",
    "cogs",
    "gross_profit",
    "hr_expenses",
    "marketing_expenses",
    "it_expenses",
    "admin_expenses",
    "other_expenses",
    "total_operating_expenses",
    "operating_profit",
    "net_profit",
)


def build_income_statement(
    incomes: Iterable,
    expenses: Iterable,
    payroll: Iterable = (),
) -> IncomeStatement:
    """Build the statement for already-filtered rows.

    ``incomes`` need ``type`` and ``amount``; ``expenses`` need
    ``category``, ``sub_category`` and ``amount``; ``payroll`` rows need
    ``amount``.
    """
    main = other = ZERO
    for row in incomes:
        if row.type in MAIN_REVENUE_TYPES:
            main += _money(row.amount)
        else:
            other += _money(row.amount)

    groups = {
        GROUP_COGS: ZERO,
        GROUP_HR: ZERO,
        GROUP_MARKETING: ZERO,
        GROUP_IT: ZERO,
        GROUP_ADMIN: ZERO,
    }
    other_expenses = ZERO
    for row in expenses:
        group = expense_group(row.category, row.sub_category)
        if group in groups:
            groups[group] += _money(row.amount)
        else:
            other_expenses += _money(row.amount)

    payroll_total = sum((_money(p.amount) for p in payroll), ZERO)
    total_revenue = main + other
    cogs = groups[GROUP_COGS]
    gross_profit = total_revenue - cogs
    hr_expenses = groups[GROUP_HR] + payroll_total
    total_opex = (
        hr_expenses
        + groups[GROUP_MARKETING]
        + groups[GROUP_IT]
        + groups[GROUP_ADMIN]
        + other_expenses
    )
    operating_profit = gross_profit - total_opex
    net_profit = operating_profit

    return IncomeStatement(
        main_revenue=main,
        other_revenue=other,
        total_revenue=total_revenue,
        cogs=cogs,
        gross_profit=gross_profit,
        hr_expenses=hr_expenses,
        payroll_total=payroll_total,
        marketing_expenses=groups[GROUP_MARKETING],
        it_expenses=groups[GROUP_IT],
        admin_expenses=groups[GROUP_ADMIN],
        other_expenses=other_expenses,
        total_operating_expenses=total_opex,
        operating_profit=operating_profit,
        net_profit=net_profit,
        gross_margin=calculate_margin(total_revenue, cogs),
        operating_margin=calculate_margin(total_revenue, total_revenue - operating_profit),
        net_margin=calculate_margin(total_revenue, total_revenue - net_profit),
    )


def compare_statements(current: IncomeStatement, previous: IncomeStatement) -> dict:
    return {
        line: calculate_change(getattr(current, line), getattr(previous, line))
        for line in COMPARED_LINES
    }
