from rest_framework import serializers

from agency_ops.clients.models import Client
from agency_ops.clients.models import Project
from agency_ops.clients.models import Task
from agency_ops.clients.models import TaskComment


class ClientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "company",
            "email",
            "phone",
            "status",
            "client_type",
            "dashboard_slug",
            "created_at",
        ]
        read_only_fields = ["dashboard_slug", "created_at"]


class DashboardSlugSerializer(serializers.Serializer):
    dashboard_slug = serializers.SlugField(max_length=100, allow_null=True)

    def validate_dashboard_slug(self, value):
        if value is None:
            return value
        clash = Client.objects.filter(dashboard_slug=value)
        instance = self.context.get("client")
        if instance is not None:
            clash = clash.exclude(pk=instance.pk)
        if clash.exists():
            msg = "This slug is already used by another client."
            raise serializers.ValidationError(msg)
        return value


class ProjectSerializer(serializers.ModelSerializer):
    client_name = serializers.CharField(source="client.name", read_only=True)

    class Meta:
        model = Project
        fields = [
            "id",
            "client",
            "client_name",
            "title",
            "description",
            "type",
            "status",
            "deadline",
            "lead",
            "share_token",
            "created_at",
        ]
        read_only_fields = ["share_token", "created_at"]


class TaskSerializer(serializers.ModelSerializer):
    project_title = serializers.CharField(source="project.title", read_only=True)

    class Meta:
        model = Task
        fields = [
            "id",
            "project",
            "project_title",
            "title",
            "description",
            "status",
            "priority",
            "deadline",
            "assigned_to",
            "assignees",
            "share_token",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["share_token", "created_at", "updated_at"]


class TaskCommentSerializer(serializers.ModelSerializer):
    author_name = serializers.CharField(source="display_name", read_only=True)

    class Meta:
        model = TaskComment
        fields = ["id", "task", "author", "author_name", "content", "is_public", "created_at"]
        read_only_fields = ["task", "author", "is_public", "created_at"]
