from rest_framework import serializers

from agency_ops.employees.models import Employee


class EmployeeSerializer(serializers.ModelSerializer):
    """Directory view: no salary figures."""

    full_name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)

    class Meta:
        model = Employee
        fields = [
            "id",
            "user",
            "full_name",
            "email",
            "position",
            "phone",
            "status",
            "join_date",
            "photo",
        ]
        read_only_fields = ["photo"]


class EmployeeHRSerializer(EmployeeSerializer):
    monthly_salary = serializers.DecimalField(
        max_digits=15, decimal_places=2, read_only=True
    )

    class Meta(EmployeeSerializer.Meta):
        fields = [
            *EmployeeSerializer.Meta.fields,
            "contract_start",
            "contract_end",
            "base_salary",
            "transport_allowance",
            "internet_allowance",
            "kpi_allowance",
            "salary",
            "monthly_salary",
        ]

    def validate(self, attrs):
        start = attrs.get("contract_start", getattr(self.instance, "contract_start", None))
        end = attrs.get("contract_end", getattr(self.instance, "contract_end", None))
        if start and end and end < start:
            raise serializers.ValidationError(
                {"contract_end": "Contract end must not be before contract start."}
            )
        return attrs
