from rest_framework import serializers

from agency_ops.discipline.models import DisciplinaryCase

UPDATABLE_FIELDS = ("status", "action_taken", "action_date", "notes")


class DisciplinaryCaseSerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source="employee.full_name", read_only=True)
    reported_by_name = serializers.CharField(
        source="reported_by.display_name", read_only=True
    )

    class Meta:
        model = DisciplinaryCase
        fields = [
            "id",
            "employee",
            "employee_name",
            "reported_by",
            "reported_by_name",
            "case_date",
            "violation_type",
            "description",
            "severity",
            "status",
            "action_taken",
            "action_date",
            "notes",
            "evidence",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["reported_by", "status", "created_at", "updated_at"]
        extra_kwargs = {"case_date": {"required": False}}

    def validate_description(self, value):
        if not value.strip():
            msg = "Description is required."
            raise serializers.ValidationError(msg)
        return value.strip()


class DisciplinaryCaseUpdateSerializer(serializers.ModelSerializer):
    """Once filed, a case only moves through its follow-up fields."""

    class Meta:
        model = DisciplinaryCase
        fields = list(UPDATABLE_FIELDS)

    def validate(self, attrs):
        unknown = set(self.initial_data) - set(UPDATABLE_FIELDS)
        if unknown:
            msg = f"Read-only fields: {', '.join(sorted(unknown))}"
            raise serializers.ValidationError(msg)
        return attrs
