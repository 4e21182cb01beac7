import logging
from datetime import date
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from agency_ops.finance.models import Expense
from agency_ops.finance.models import Income
from agency_ops.finance.models import PayrollEntry
from agency_ops.finance.models import RecurringBudget
from agency_ops.finance.models import Reimbursement
from agency_ops.finance.statements import build_income_statement

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)
RECURRING_EXPENSE_CATEGORY = "operasional"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First day of the month and first day of the following month."""
    start = date(year, month, 1)
    end = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return start, end


def previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def is_due(item: RecurringBudget, today: date) -> bool:
    """Whether ``item`` should produce an entry on ``today``."""
    if item.status != RecurringBudget.Status.ACTIVE:
        return False
    if item.due_day != today.day or item.start_date > today:
        return False
    if item.end_date and item.end_date < today:
        return False
    start = item.start_date
    if item.period == RecurringBudget.Period.MONTHLY:
        return True
    if item.period == RecurringBudget.Period.QUARTERLY:
        months = (today.year - start.year) * 12 + (today.month - start.month)
        return months >= 0 and months % 3 == 0
    if item.period == RecurringBudget.Period.YEARLY:
        return today.month == start.month
    if item.period == RecurringBudget.Period.CUSTOM and item.custom_days:
        days = (today - start).days
        return days >= 0 and days % item.custom_days == 0
    return False


def _already_generated(item: RecurringBudget, today: date) -> bool:
    start, end = month_bounds(today.year, today.month)
    if item.type == RecurringBudget.Type.EXPENSE:
        return Expense.objects.filter(
            recurring_item=item,
            created_at__date__gte=start,
            created_at__date__lt=end,
        ).exists()
    return Income.objects.filter(
        recurring_item=item, date__gte=start, date__lt=end
    ).exists()


def _create_entry(item: RecurringBudget, today: date):
    if item.type == RecurringBudget.Type.EXPENSE:
        return Expense.objects.create(
            description=f"{item.name} - {MONTH_NAMES[today.month - 1]} {today.year}",
            amount=item.amount,
            category=RECURRING_EXPENSE_CATEGORY,
            status=Expense.Status.PENDING,
            is_recurring=True,
            recurring_item=item,
            client=item.client,
            project=item.project,
            created_by=item.created_by,
        )
    return Income.objects.create(
        source=item.name,
        amount=item.amount,
        type=Income.Type.RECURRING,
        date=today,
        status=Income.Status.PENDING,
        recurring_item=item,
        client=item.client,
        project=item.project,
        created_by=item.created_by,
    )


def generate_recurring_entries(today: date | None = None) -> list[dict]:
    """Create this month's pending income/expense rows for due recurring items.

    Each item is written in its own transaction; a failing item is logged and
    reported with ``status: "error"`` while the rest of the batch goes on.
    """
    today = today or timezone.localdate()
    candidates = RecurringBudget.objects.filter(
        status=RecurringBudget.Status.ACTIVE,
        due_day=today.day,
        start_date__lte=today,
    )
    results: list[dict] = []
    for item in candidates:
        if not is_due(item, today):
            logger.debug("recurring %s not due on %s", item.pk, today)
            continue
        if _already_generated(item, today):
            logger.info("recurring %s already generated for %s", item.pk, today)
            continue
        try:
            with transaction.atomic():
                entry = _create_entry(item, today)
        except Exception as exc:  # noqa: BLE001
            logger.exception("recurring %s failed on %s", item.pk, today)
            results.append(
                {
                    "recurring_id": item.pk,
                    "type": item.type,
                    "status": "error",
                    "error": str(exc),
                }
            )
            continue
        results.append(
            {
                "recurring_id": item.pk,
                "type": item.type,
                "entry_id": entry.pk,
                "status": "success",
            }
        )
    logger.info("processed %s recurring item(s) for %s", len(results), today)
    return results


def mark_expense_paid(expense: Expense) -> Expense:
    expense.status = Expense.Status.PAID
    expense.paid_at = timezone.now()
    expense.save(update_fields=["status", "paid_at", "updated_at"])
    return expense


def mark_income_received(income: Income) -> Income:
    income.status = Income.Status.RECEIVED
    income.received_at = timezone.now()
    income.save(update_fields=["status", "received_at", "updated_at"])
    return income


REIMBURSE_EXPENSE_CATEGORY = "sdm_hr"
REIMBURSE_EXPENSE_SUB_CATEGORY = "reimburse_karyawan"


class ReimbursementError(ValueError):
    """Raised when a reimbursement is not in a state that allows the action."""


def _require_status(reimbursement: Reimbursement, expected: str, action: str) -> None:
    if reimbursement.status != expected:
        msg = f"Only {expected} reimbursements can be {action}."
        raise ReimbursementError(msg)


def approve_reimbursement(reimbursement: Reimbursement, approver) -> Reimbursement:
    _require_status(reimbursement, Reimbursement.Status.PENDING, "approved")
    reimbursement.status = Reimbursement.Status.APPROVED
    reimbursement.approved_by = approver
    reimbursement.approved_at = timezone.now()
    reimbursement.save(update_fields=["status", "approved_by", "approved_at", "updated_at"])
    return reimbursement


def reject_reimbursement(
    reimbursement: Reimbursement, approver, reason: str = ""
) -> Reimbursement:
    _require_status(reimbursement, Reimbursement.Status.PENDING, "rejected")
    reimbursement.status = Reimbursement.Status.REJECTED
    reimbursement.approved_by = approver
    reimbursement.approved_at = timezone.now()
    reimbursement.rejection_reason = (reason or "").strip()
    reimbursement.save(
        update_fields=[
            "status",
            "approved_by",
            "approved_at",
            "rejection_reason",
            "updated_at",
        ]
    )
    return reimbursement


@transaction.atomic
def pay_reimbursement(reimbursement: Reimbursement, payer) -> Reimbursement:
    """Mark an approved reimbursement paid and book it as a paid expense."""
    _require_status(reimbursement, Reimbursement.Status.APPROVED, "paid")
    now = timezone.now()
    label = reimbursement.title or reimbursement.get_category_display()
    reimbursement.expense = Expense.objects.create(
        description=reimbursement.notes or f"Reimbursement - {label}",
        amount=reimbursement.amount,
        category=REIMBURSE_EXPENSE_CATEGORY,
        sub_category=REIMBURSE_EXPENSE_SUB_CATEGORY,
        status=Expense.Status.PAID,
        paid_at=now,
        client_id=reimbursement.client_id,
        project_id=reimbursement.project_id,
        created_by=payer,
    )
    reimbursement.status = Reimbursement.Status.PAID
    reimbursement.paid_at = now
    reimbursement.save(update_fields=["status", "paid_at", "expense", "updated_at"])
    logger.info(
        "reimbursement %s paid as expense %s", reimbursement.pk, reimbursement.expense_id
    )
    return reimbursement


def reimbursement_summary(items, *, year: int, month: int) -> dict:
    """Per-status totals for the items created in ``year``/``month``."""
    totals = {
        "total": Decimal("0"),
        "count": 0,
        "pending": Decimal("0"),
        "approved": Decimal("0"),
        "paid": Decimal("0"),
        "paid_count": 0,
    }
    for item in items:
        created = timezone.localtime(item.created_at)
        if (created.year, created.month) != (year, month):
            continue
        totals["total"] += item.amount
        totals["count"] += 1
        if item.status == Reimbursement.Status.PAID:
            totals["paid"] += item.amount
            totals["paid_count"] += 1
        elif item.status in (Reimbursement.Status.PENDING, Reimbursement.Status.APPROVED):
            totals[item.status] += item.amount
    return totals


def statement_for_month(year: int, month: int, *, client=None, project=None):
    """Statement built from received income, paid expenses and paid payroll."""
    start, end = month_bounds(year, month)
    incomes = Income.objects.filter(
        status=Income.Status.RECEIVED, date__gte=start, date__lt=end
    )
    expenses = Expense.objects.filter(
        status=Expense.Status.PAID,
        created_at__date__gte=start,
        created_at__date__lt=end,
    )
    if client:
        incomes = incomes.filter(client_id=client)
        expenses = expenses.filter(client_id=client)
    if project:
        incomes = incomes.filter(project_id=project)
        expenses = expenses.filter(project_id=project)
    payroll = PayrollEntry.objects.filter(
        status=PayrollEntry.Status.PAID, month=f"{year:04d}-{month:02d}"
    )
    return build_income_statement(
        incomes.only("type", "amount"),
        expenses.only("category", "sub_category", "amount"),
        payroll.only("amount"),
    )
