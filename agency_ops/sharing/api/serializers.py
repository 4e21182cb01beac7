from rest_framework import serializers

from agency_ops.clients.models import Project
from agency_ops.clients.models import Task
from agency_ops.meetings.models import Meeting


class SharedMeetingSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True, default=None)
    project_name = serializers.CharField(
        source="project.title", read_only=True, default=None
    )
    participants = serializers.SerializerMethodField()
    external_participants = serializers.SerializerMethodField()

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
            "notes",
            "status",
            "client_name",
            "project_name",
            "participants",
            "external_participants",
        ]

    def get_participants(self, obj) -> list[dict]:
        return [
            {"name": p.user.display_name, "status": p.status}
            for p in obj.participants.all()
        ]

    def get_external_participants(self, obj) -> list[dict]:
        return [
            {"name": p.name, "company": p.company}
            for p in obj.external_participants.all()
        ]


class SharedTaskSerializer(serializers.ModelSerializer):
    project_title = serializers.CharField(source="project.title", read_only=True)
    client_name = serializers.CharField(source="project.client.name", read_only=True)
    assignee_name = serializers.CharField(
        source="assigned_to.display_name", read_only=True, default=None
    )

    class Meta:
        model = Task
        fields = [
            "id",
            "title",
            "description",
            "status",
            "priority",
            "deadline",
            "project_title",
            "client_name",
            "assignee_name",
            "created_at",
        ]


class SharedProjectTaskSerializer(serializers.ModelSerializer):
    assignee_name = serializers.CharField(
        source="assigned_to.display_name", read_only=True, default=None
    )

    class Meta:
        model = Task
        fields = ["id", "title", "status", "priority", "deadline", "assignee_name"]


class SharedProjectSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)
    lead_name = serializers.CharField(
        source="lead.display_name", read_only=True, default=None
    )

    class Meta:
        model = Project
        fields = [
            "id",
            "title",
            "description",
            "type",
            "status",
            "deadline",
            "client_name",
            "lead_name",
            "created_at",
        ]


class PublicCommentSerializer(serializers.Serializer):
    # May also come from the query string.
    token = serializers.CharField(required=False)
    name = serializers.CharField(max_length=150)
    content = serializers.CharField()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            msg = "Name is required."
            raise serializers.ValidationError(msg)
        return value

    def validate_content(self, value):
        value = value.strip()
        if not value:
            msg = "Comment cannot be empty."
            raise serializers.ValidationError(msg)
        return value
