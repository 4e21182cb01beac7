from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from agency_ops.audit.utils import log_action
from agency_ops.finance import services
from agency_ops.finance.api.serializers import ExpenseSerializer
from agency_ops.finance.api.serializers import IncomeSerializer
from agency_ops.finance.api.serializers import IncomeStatementQuerySerializer
from agency_ops.finance.api.serializers import PayrollEntrySerializer
from agency_ops.finance.api.serializers import RecurringBudgetSerializer
from agency_ops.finance.api.serializers import ReimbursementRejectSerializer
from agency_ops.finance.api.serializers import ReimbursementSerializer
from agency_ops.finance.categories import FINANCE_CATEGORIES
from agency_ops.finance.models import Expense
from agency_ops.finance.models import Income
from agency_ops.finance.models import PayrollEntry
from agency_ops.finance.models import RecurringBudget
from agency_ops.finance.models import Reimbursement
from agency_ops.finance.statements import compare_statements
from agency_ops.users.api.permissions import FINANCE_ROLES
from agency_ops.users.api.permissions import IsFinanceStaff
from agency_ops.users.api.permissions import user_has_role


class _FinanceViewSet(viewsets.ModelViewSet):
    permission_classes = [IsAuthenticated, IsFinanceStaff]
    audit_model = ""

    def perform_create(self, serializer):
        field_names = {f.name for f in serializer.Meta.model._meta.fields}  # noqa: SLF001
        extra = {"created_by": self.request.user} if "created_by" in field_names else {}
        instance = serializer.save(**extra)
        log_action(
            "finance_created",
            request=self.request,
            model_name=self.audit_model,
            record_id=instance.pk,
            after={k: str(v) for k, v in serializer.validated_data.items()},
        )

    def perform_update(self, serializer):
        instance = serializer.save()
        log_action(
            "finance_updated",
            request=self.request,
            model_name=self.audit_model,
            record_id=instance.pk,
            after={k: str(v) for k, v in serializer.validated_data.items()},
        )

    def perform_destroy(self, instance):
        log_action(
            "finance_deleted",
            request=self.request,
            model_name=self.audit_model,
            record_id=instance.pk,
        )
        instance.delete()


@extend_schema(tags=["Finance"])
class IncomeViewSet(_FinanceViewSet):
    queryset = Income.objects.select_related("client", "project").all()
    serializer_class = IncomeSerializer
    filterset_fields = ["status", "type", "client", "project"]
    audit_model = "finance.Income"

    @action(detail=True, methods=["post"], url_path="mark-received")
    def mark_received(self, request, pk=None):
        income = services.mark_income_received(self.get_object())
        log_action(
            "income_received",
            request=request,
            model_name=self.audit_model,
            record_id=income.pk,
        )
        return Response(IncomeSerializer(income).data)


@extend_schema(tags=["Finance"])
class ExpenseViewSet(_FinanceViewSet):
    queryset = Expense.objects.select_related("client", "project").all()
    serializer_class = ExpenseSerializer
    filterset_fields = ["status", "category", "sub_category", "client", "project"]
    audit_model = "finance.Expense"

    @action(detail=True, methods=["post"], url_path="mark-paid")
    def mark_paid(self, request, pk=None):
        expense = services.mark_expense_paid(self.get_object())
        log_action(
            "expense_paid",
            request=request,
            model_name=self.audit_model,
            record_id=expense.pk,
        )
        return Response(ExpenseSerializer(expense).data)

    @action(detail=False, methods=["get"], pagination_class=None)
    def categories(self, request):
        return Response(
            [
                {
                    "value": key,
                    "label": label,
                    "sub_categories": [
                        {"value": sub, "label": sub_label}
                        for sub, sub_label in subs.items()
                    ],
                }
                for key, (label, subs) in FINANCE_CATEGORIES.items()
            ]
        )


@extend_schema(tags=["Finance"])
class PayrollEntryViewSet(_FinanceViewSet):
    queryset = PayrollEntry.objects.select_related("employee", "employee__user").all()
    serializer_class = PayrollEntrySerializer
    filterset_fields = ["status", "month", "employee"]
    audit_model = "finance.PayrollEntry"

    @action(detail=True, methods=["post"], url_path="mark-paid")
    def mark_paid(self, request, pk=None):
        entry = self.get_object()
        entry.status = PayrollEntry.Status.PAID
        entry.paid_at = timezone.now()
        entry.pay_date = entry.pay_date or timezone.localdate()
        entry.save(update_fields=["status", "paid_at", "pay_date", "updated_at"])
        log_action(
            "payroll_paid",
            request=request,
            model_name=self.audit_model,
            record_id=entry.pk,
        )
        return Response(PayrollEntrySerializer(entry).data)


@extend_schema(tags=["Finance"])
class RecurringBudgetViewSet(_FinanceViewSet):
    queryset = RecurringBudget.objects.all()
    serializer_class = RecurringBudgetSerializer
    filterset_fields = ["status", "type", "period"]
    audit_model = "finance.RecurringBudget"


@extend_schema(tags=["Finance"])
class ReimbursementViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Everyone files and follows their own claims; finance decides and pays."""

    serializer_class = ReimbursementSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["status", "request_type", "category", "user"]
    audit_model = "finance.Reimbursement"

    def _is_finance(self) -> bool:
        return user_has_role(self.request.user, *FINANCE_ROLES)

    def get_queryset(self):
        qs = Reimbursement.objects.select_related("user", "client", "project")
        if self._is_finance():
            return qs
        return qs.filter(user=self.request.user)

    def perform_create(self, serializer):
        instance = serializer.save(
            user=self.request.user, status=Reimbursement.Status.PENDING
        )
        log_action(
            "reimbursement_submitted",
            request=self.request,
            model_name=self.audit_model,
            record_id=instance.pk,
            after={
                "request_type": instance.request_type,
                "category": instance.category,
                "amount": str(instance.amount),
            },
        )

    def _transition(self, request, action_name, change):
        if not self._is_finance():
            raise PermissionDenied("Only finance can process reimbursements.")
        reimbursement = self.get_object()
        before = {"status": reimbursement.status}
        try:
            reimbursement = change(reimbursement)
        except services.ReimbursementError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        log_action(
            action_name,
            request=request,
            model_name=self.audit_model,
            record_id=reimbursement.pk,
            before=before,
            after={"status": reimbursement.status},
        )
        return Response(ReimbursementSerializer(reimbursement).data)

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        return self._transition(
            request,
            "reimbursement_approved",
            lambda item: services.approve_reimbursement(item, request.user),
        )

    @extend_schema(request=ReimbursementRejectSerializer)
    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        serializer = ReimbursementRejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reason = serializer.validated_data["rejection_reason"]
        return self._transition(
            request,
            "reimbursement_rejected",
            lambda item: services.reject_reimbursement(item, request.user, reason),
        )

    @action(detail=True, methods=["post"], url_path="mark-paid")
    def mark_paid(self, request, pk=None):
        return self._transition(
            request,
            "reimbursement_paid",
            lambda item: services.pay_reimbursement(item, request.user),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("year", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("month", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    @action(detail=False, methods=["get"], pagination_class=None)
    def summary(self, request):
        """Current-month totals per request type for the caller's own claims."""
        today = timezone.localdate()
        try:
            year = int(request.query_params.get("year", today.year))
            month = int(request.query_params.get("month", today.month))
        except ValueError:
            return Response(
                {"detail": "year and month must be integers."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        own = list(Reimbursement.objects.filter(user=request.user))
        return Response(
            {
                request_type: services.reimbursement_summary(
                    [r for r in own if r.request_type == request_type],
                    year=year,
                    month=month,
                )
                for request_type in Reimbursement.RequestType.values
            }
        )


class IncomeStatementView(APIView):
    permission_classes = [IsAuthenticated, IsFinanceStaff]

    @extend_schema(
        tags=["Finance"],
        parameters=[
            OpenApiParameter("year", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("month", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("client", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("project", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter(
                "compare",
                OpenApiTypes.BOOL,
                OpenApiParameter.QUERY,
                description="Include the previous month and the change table",
            ),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        today = timezone.localdate()
        data = {"year": today.year, "month": today.month, **request.query_params.dict()}
        query = IncomeStatementQuerySerializer(data=data)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        year, month = params["year"], params["month"]
        scope = {"client": params.get("client"), "project": params.get("project")}

        current = services.statement_for_month(year, month, **scope)
        payload = {
            "period": f"{year:04d}-{month:02d}",
            "statement": current.as_dict(),
        }
        if params["compare"]:
            prev_year, prev_month = services.previous_month(year, month)
            previous = services.statement_for_month(prev_year, prev_month, **scope)
            payload["previous_period"] = f"{prev_year:04d}-{prev_month:02d}"
            payload["previous"] = previous.as_dict()
            payload["changes"] = compare_statements(current, previous)
        return Response(payload)
