from rest_framework import serializers

from agency_ops.recruitment.models import Candidate
from agency_ops.recruitment.models import CandidateAssessment
from agency_ops.recruitment.models import CandidateStatusHistory


class CandidateSerializer(serializers.ModelSerializer):
    hr_pic_name = serializers.CharField(source="hr_pic.display_name", read_only=True)

    class Meta:
        model = Candidate
        fields = [
            "id",
            "full_name",
            "email",
            "phone",
            "position",
            "division",
            "location",
            "cv",
            "portfolio_url",
            "status",
            "hr_pic",
            "hr_pic_name",
            "applied_at",
            "created_by",
            "updated_at",
        ]
        # Status moves only through change-status so history stays complete.
        read_only_fields = ["status", "created_by", "updated_at"]


class CandidateStatusHistorySerializer(serializers.ModelSerializer):
    changed_by_name = serializers.CharField(
        source="changed_by.display_name", read_only=True
    )

    class Meta:
        model = CandidateStatusHistory
        fields = [
            "id",
            "candidate",
            "old_status",
            "new_status",
            "changed_by",
            "changed_by_name",
            "notes",
            "created_at",
        ]
        read_only_fields = fields


class ChangeStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Candidate.Status.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class CandidateAssessmentSerializer(serializers.ModelSerializer):
    assessor_name = serializers.CharField(source="assessor.display_name", read_only=True)

    class Meta:
        model = CandidateAssessment
        fields = [
            "id",
            "candidate",
            "assessor",
            "assessor_name",
            "assessment_type",
            "rating",
            "notes",
            "created_at",
        ]
        read_only_fields = ["assessor", "created_at"]
