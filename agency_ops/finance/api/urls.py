from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import ExpenseViewSet
from .views import IncomeStatementView
from .views import IncomeViewSet
from .views import PayrollEntryViewSet
from .views import RecurringBudgetViewSet
from .views import ReimbursementViewSet

router = SimpleRouter()
router.register("incomes", IncomeViewSet, basename="finance-income")
router.register("expenses", ExpenseViewSet, basename="finance-expense")
router.register("payroll", PayrollEntryViewSet, basename="finance-payroll")
router.register("recurring", RecurringBudgetViewSet, basename="finance-recurring")
router.register("reimbursements", ReimbursementViewSet, basename="finance-reimbursement")

urlpatterns = [
    path(
        "income-statement/",
        IncomeStatementView.as_view(),
        name="finance-income-statement",
    ),
    *router.urls,
]
