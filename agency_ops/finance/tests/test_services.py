from datetime import date
from datetime import timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.utils import timezone

from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.finance import services
from agency_ops.finance.models import Expense
from agency_ops.finance.models import Income
from agency_ops.finance.models import PayrollEntry
from agency_ops.finance.models import RecurringBudget


def budget(**kwargs):
    fields = {
        "name": "Internet",
        "type": RecurringBudget.Type.EXPENSE,
        "amount": Decimal("750000"),
        "period": RecurringBudget.Period.MONTHLY,
        "due_day": 15,
        "start_date": date(2024, 1, 15),
        "status": RecurringBudget.Status.ACTIVE,
    }
    fields.update(kwargs)
    return RecurringBudget(**fields)


def test_month_helpers():
    assert services.month_bounds(2024, 12) == (date(2024, 12, 1), date(2025, 1, 1))
    assert services.previous_month(2024, 1) == (2023, 12)
    assert services.previous_month(2024, 7) == (2024, 6)


@pytest.mark.parametrize(
    ("fields", "today", "expected"),
    [
        ({}, date(2024, 3, 15), True),
        ({}, date(2024, 3, 14), False),
        ({"status": RecurringBudget.Status.PAUSED}, date(2024, 3, 15), False),
        ({"end_date": date(2024, 2, 28)}, date(2024, 3, 15), False),
        ({"period": RecurringBudget.Period.QUARTERLY}, date(2024, 4, 15), True),
        ({"period": RecurringBudget.Period.QUARTERLY}, date(2024, 3, 15), False),
        ({"period": RecurringBudget.Period.YEARLY}, date(2025, 1, 15), True),
        ({"period": RecurringBudget.Period.YEARLY}, date(2024, 6, 15), False),
    ],
)
def test_is_due(fields, today, expected):
    assert services.is_due(budget(**fields), today) is expected


@pytest.mark.django_db
def test_recurring_expense_is_generated_once_per_month():
    today = timezone.localdate()
    item = budget(due_day=today.day, start_date=today - timedelta(days=60))
    item.save()

    first = services.generate_recurring_entries(today)
    second = services.generate_recurring_entries(today)

    assert len(first) == 1
    assert first[0]["status"] == "success"
    assert second == []
    expense = Expense.objects.get(recurring_item=item)
    month_name = services.MONTH_NAMES[today.month - 1]
    assert expense.description == f"Internet - {month_name} {today.year}"
    assert expense.category == "operasional"
    assert expense.status == Expense.Status.PENDING
    assert expense.is_recurring


@pytest.mark.django_db
def test_recurring_income_uses_run_date():
    item = budget(type=RecurringBudget.Type.INCOME, name="Retainer ACME", due_day=10)
    item.save()

    services.generate_recurring_entries(date(2024, 3, 10))
    services.generate_recurring_entries(date(2024, 3, 10))

    row = Income.objects.get(recurring_item=item)
    assert row.date == date(2024, 3, 10)
    assert row.type == Income.Type.RECURRING
    assert row.source == "Retainer ACME"


@pytest.mark.django_db
def test_failing_recurring_item_does_not_stop_the_batch():
    today = date(2024, 3, 10)
    expense_item = budget(name="Sewa Kantor", due_day=10)
    expense_item.save()
    income_item = budget(type=RecurringBudget.Type.INCOME, name="Retainer", due_day=10)
    income_item.save()

    with mock.patch.object(
        Expense.objects, "create", side_effect=RuntimeError("db hiccup")
    ):
        results = services.generate_recurring_entries(today)

    by_item = {r["recurring_id"]: r for r in results}
    assert by_item[expense_item.pk]["status"] == "error"
    assert by_item[expense_item.pk]["error"] == "db hiccup"
    assert by_item[income_item.pk]["status"] == "success"
    assert Income.objects.filter(recurring_item=income_item).count() == 1
    assert not Expense.objects.filter(recurring_item=expense_item).exists()


@pytest.mark.django_db
def test_statement_for_month_only_counts_settled_rows():
    Income.objects.create(
        source="ACME",
        amount=Decimal("1000"),
        type="project",
        date=date(2024, 5, 3),
        status=Income.Status.RECEIVED,
    )
    Income.objects.create(
        source="Pending",
        amount=Decimal("999"),
        type="project",
        date=date(2024, 5, 4),
    )
    PayrollEntry.objects.create(
        employee=EmployeeFactory(),
        month="2024-05",
        amount=Decimal("300"),
        status=PayrollEntry.Status.PAID,
    )

    statement = services.statement_for_month(2024, 5)

    assert statement.total_revenue == Decimal("1000")
    assert statement.payroll_total == Decimal("300")
    assert statement.operating_profit == Decimal("700")
