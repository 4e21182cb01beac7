from django.contrib.auth import get_user_model
from rest_framework import serializers

from agency_ops.meetings import services
from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingExternalParticipant
from agency_ops.meetings.models import MeetingParticipant

User = get_user_model()


class MeetingParticipantSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source="user.display_name", read_only=True)

    class Meta:
        model = MeetingParticipant
        fields = ["id", "user", "name", "status", "rejection_reason", "responded_at"]
        read_only_fields = fields


class MeetingExternalParticipantSerializer(serializers.ModelSerializer):
    class Meta:
        model = MeetingExternalParticipant
        fields = ["id", "name", "email", "company"]
        extra_kwargs = {"name": {"allow_blank": True}}


class MeetingSerializer(serializers.ModelSerializer):
    participants = MeetingParticipantSerializer(many=True, read_only=True)
    external_participants = MeetingExternalParticipantSerializer(
        many=True, required=False
    )
    participant_ids = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_active=True),
        many=True,
        write_only=True,
        required=False,
    )
    client_name = serializers.CharField(source="client.name", read_only=True)
    project_title = serializers.CharField(source="project.title", read_only=True)
    created_by_name = serializers.CharField(
        source="created_by.display_name", read_only=True
    )
    display_status = serializers.SerializerMethodField()

    class Meta:
        model = Meeting
        fields = [
            "id",
            "title",
            "type",
            "meeting_date",
            "start_time",
            "end_time",
            "mode",
            "meeting_link",
            "location",
            "client",
            "client_name",
            "project",
            "project_title",
            "notes",
            "status",
            "display_status",
            "is_confidential",
            "original_date",
            "reschedule_reason",
            "rescheduled_at",
            "participants",
            "participant_ids",
            "external_participants",
            "created_by",
            "created_by_name",
            "share_token",
            "created_at",
        ]
        read_only_fields = [
            "original_date",
            "reschedule_reason",
            "rescheduled_at",
            "created_by",
            "share_token",
            "created_at",
        ]

    def get_display_status(self, obj) -> str:
        return services.display_status(obj)

    def validate(self, attrs):
        instance = self.instance

        def pick(name):
            if name in attrs:
                return attrs[name]
            return getattr(instance, name, None) if instance else None

        try:
            services.validate_schedule(
                mode=pick("mode") or Meeting.Mode.ONLINE,
                meeting_link=pick("meeting_link"),
                location=pick("location"),
                start_time=pick("start_time"),
                end_time=pick("end_time"),
            )
        except services.MeetingError as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return attrs

    def create(self, validated_data):
        participants = validated_data.pop("participant_ids", [])
        guests = validated_data.pop("external_participants", [])
        return services.create_meeting(
            created_by=self.context["request"].user,
            participants=participants,
            external_participants=guests,
            **validated_data,
        )

    def update(self, instance, validated_data):
        # Invitees are managed at creation; dates move through reschedule.
        validated_data.pop("participant_ids", None)
        validated_data.pop("external_participants", None)
        for name in ("meeting_date", "start_time", "end_time"):
            validated_data.pop(name, None)
        return super().update(instance, validated_data)


class RespondSerializer(serializers.Serializer):
    accept = serializers.BooleanField()
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class RescheduleSerializer(serializers.Serializer):
    meeting_date = serializers.DateField()
    start_time = serializers.TimeField()
    end_time = serializers.TimeField()
    reason = serializers.CharField()
