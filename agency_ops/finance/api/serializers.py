from rest_framework import serializers

from agency_ops.finance import categories
from agency_ops.finance.models import Expense
from agency_ops.finance.models import Income
from agency_ops.finance.models import PayrollEntry
from agency_ops.finance.models import RecurringBudget
from agency_ops.finance.models import REIMBURSEMENT_CATEGORIES
from agency_ops.finance.models import Reimbursement


class IncomeSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)
    account_code = serializers.SerializerMethodField()

    class Meta:
        model = Income
        fields = [
            "id",
            "source",
            "amount",
            "type",
            "date",
            "status",
            "client",
            "client_name",
            "project",
            "received_at",
            "recurring_item",
            "notes",
            "account_code",
            "created_at",
        ]
        read_only_fields = ["received_at", "recurring_item", "created_at"]

    def get_account_code(self, obj) -> str:
        return categories.income_account(obj.type)


class ExpenseSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)
    account_code = serializers.SerializerMethodField()
    group = serializers.SerializerMethodField()

    class Meta:
        model = Expense
        fields = [
            "id",
            "description",
            "amount",
            "category",
            "sub_category",
            "status",
            "client",
            "client_name",
            "project",
            "paid_at",
            "is_recurring",
            "recurring_item",
            "receipt",
            "account_code",
            "group",
            "created_at",
        ]
        read_only_fields = ["paid_at", "is_recurring", "recurring_item", "created_at"]

    def get_account_code(self, obj) -> str:
        return categories.expense_account(obj.category, obj.sub_category)

    def get_group(self, obj) -> str:
        return categories.expense_group(obj.category, obj.sub_category)

    def validate(self, attrs):
        category = attrs.get("category", getattr(self.instance, "category", ""))
        sub_category = attrs.get(
            "sub_category", getattr(self.instance, "sub_category", "")
        )
        if not categories.is_valid_sub_category(category, sub_category):
            raise serializers.ValidationError(
                {"sub_category": f"'{sub_category}' is not part of '{category}'."}
            )
        return attrs


class PayrollEntrySerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    take_home_pay = serializers.DecimalField(
        max_digits=15, decimal_places=2, read_only=True
    )

    class Meta:
        model = PayrollEntry
        fields = [
            "id",
            "employee",
            "employee_name",
            "month",
            "amount",
            "bonus",
            "reimburse",
            "late_deduction",
            "cash_advance_deduction",
            "other_adjustment",
            "take_home_pay",
            "status",
            "pay_date",
            "paid_at",
            "notes",
        ]
        read_only_fields = ["paid_at"]


class RecurringBudgetSerializer(serializers.ModelSerializer):
    class Meta:
        model = RecurringBudget
        fields = [
            "id",
            "name",
            "type",
            "amount",
            "period",
            "custom_days",
            "due_day",
            "start_date",
            "end_date",
            "status",
            "client",
            "project",
            "created_at",
        ]
        read_only_fields = ["created_at"]

    def validate_due_day(self, value):
        if not 1 <= value <= 31:  # noqa: PLR2004
            msg = "Due day must be between 1 and 31."
            raise serializers.ValidationError(msg)
        return value

    def validate(self, attrs):
        period = attrs.get("period", getattr(self.instance, "period", None))
        custom_days = attrs.get("custom_days", getattr(self.instance, "custom_days", None))
        if period == RecurringBudget.Period.CUSTOM and not custom_days:
            raise serializers.ValidationError(
                {"custom_days": "Required for a custom period."}
            )
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and end < start:
            raise serializers.ValidationError(
                {"end_date": "End date must be on or after the start date."}
            )
        return attrs


class IncomeStatementQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    month = serializers.IntegerField(min_value=1, max_value=12)
    client = serializers.IntegerField(required=False)
    project = serializers.IntegerField(required=False)
    compare = serializers.BooleanField(required=False, default=False)


class ReimbursementSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.display_name", read_only=True)
    client_name = serializers.CharField(source="client.name", read_only=True, default=None)
    project_title = serializers.CharField(
        source="project.title", read_only=True, default=None
    )

    class Meta:
        model = Reimbursement
        fields = [
            "id",
            "user",
            "user_name",
            "request_type",
            "title",
            "category",
            "amount",
            "notes",
            "client",
            "client_name",
            "project",
            "project_title",
            "receipt",
            "status",
            "approved_by",
            "approved_at",
            "rejection_reason",
            "paid_at",
            "expense",
            "created_at",
        ]
        read_only_fields = [
            "user",
            "status",
            "approved_by",
            "approved_at",
            "rejection_reason",
            "paid_at",
            "expense",
            "created_at",
        ]

    def validate_amount(self, value):
        if value <= 0:
            msg = "Amount must be greater than zero."
            raise serializers.ValidationError(msg)
        return value

    def validate(self, attrs):
        request_type = attrs.get("request_type", Reimbursement.RequestType.REIMBURSEMENT)
        if attrs["category"] not in REIMBURSEMENT_CATEGORIES[request_type]:
            raise serializers.ValidationError(
                {"category": f"'{attrs['category']}' is not a {request_type} category."}
            )
        title = attrs.get("title", "").strip()
        if request_type == Reimbursement.RequestType.REQUEST and not title:
            raise serializers.ValidationError({"title": "A request needs a title."})
        attrs["title"] = title
        return attrs


class ReimbursementRejectSerializer(serializers.Serializer):
    rejection_reason = serializers.CharField(allow_blank=True, required=False, default="")
