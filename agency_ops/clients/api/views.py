from django.db.models import Q
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import SAFE_METHODS
from rest_framework.permissions import BasePermission
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from agency_ops.audit.utils import log_action
from agency_ops.clients.api.serializers import ClientSerializer
from agency_ops.clients.api.serializers import DashboardSlugSerializer
from agency_ops.clients.api.serializers import ProjectSerializer
from agency_ops.clients.api.serializers import TaskCommentSerializer
from agency_ops.clients.api.serializers import TaskSerializer
from agency_ops.clients.models import Client
from agency_ops.clients.models import Project
from agency_ops.clients.models import Task
from agency_ops.clients.models import TaskComment
from agency_ops.users.api.permissions import PROJECT_ROLES
from agency_ops.users.api.permissions import IsProjectCanWrite
from agency_ops.users.api.permissions import user_has_role


class IsProjectStaffOrAssignee(BasePermission):
    """Project roles may do anything; assignees may update their own tasks."""

    def has_permission(self, request, view) -> bool:
        if not getattr(request.user, "is_authenticated", False):
            return False
        if request.method in SAFE_METHODS or view.action in {
            "update",
            "partial_update",
            "comments",
        }:
            return True
        return user_has_role(request.user, *PROJECT_ROLES)

    def has_object_permission(self, request, view, obj) -> bool:
        if request.method in SAFE_METHODS or view.action == "comments":
            return True
        if user_has_role(request.user, *PROJECT_ROLES):
            return True
        return request.user.pk in obj.assignee_ids()


def _share_response(instance, request, model_name: str):
    """POST issues (or rotates) the share token, DELETE revokes it."""
    if request.method == "DELETE":
        instance.revoke_share_token()
        log_action(
            "share_token_revoked",
            request=request,
            model_name=model_name,
            record_id=instance.pk,
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
    token = instance.issue_share_token()
    log_action(
        "share_token_issued",
        request=request,
        model_name=model_name,
        record_id=instance.pk,
    )
    return Response({"share_token": token}, status=status.HTTP_200_OK)


@extend_schema(tags=["Clients"])
class ClientViewSet(viewsets.ModelViewSet):
    queryset = Client.objects.all()
    serializer_class = ClientSerializer
    permission_classes = [IsAuthenticated, IsProjectCanWrite]
    filterset_fields = ["status", "client_type"]

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    @action(detail=True, methods=["post"], url_path="dashboard-slug")
    def dashboard_slug(self, request, pk=None):
        client = self.get_object()
        serializer = DashboardSlugSerializer(
            data=request.data, context={"client": client}
        )
        serializer.is_valid(raise_exception=True)
        client.dashboard_slug = serializer.validated_data["dashboard_slug"]
        client.save(update_fields=["dashboard_slug", "updated_at"])
        log_action(
            "client_dashboard_slug_set",
            request=request,
            model_name="clients.Client",
            record_id=client.pk,
            after={"dashboard_slug": client.dashboard_slug},
        )
        return Response(ClientSerializer(client).data)


@extend_schema(tags=["Projects"])
class ProjectViewSet(viewsets.ModelViewSet):
    queryset = Project.objects.select_related("client").all()
    serializer_class = ProjectSerializer
    permission_classes = [IsAuthenticated, IsProjectCanWrite]
    filterset_fields = ["client", "status", "lead"]

    @action(detail=True, methods=["post", "delete"])
    def share(self, request, pk=None):
        return _share_response(self.get_object(), request, "clients.Project")


@extend_schema(tags=["Tasks"])
class TaskViewSet(viewsets.ModelViewSet):
    queryset = (
        Task.objects.select_related("project", "project__client", "assigned_to")
        .prefetch_related("assignees")
        .all()
    )
    serializer_class = TaskSerializer
    permission_classes = [IsAuthenticated, IsProjectStaffOrAssignee]
    filterset_fields = ["project", "status", "priority", "assigned_to"]

    def get_queryset(self):
        qs = super().get_queryset()
        if self.request.query_params.get("mine") in {"1", "true"}:
            user = self.request.user
            qs = qs.filter(Q(assigned_to=user) | Q(assignees=user)).distinct()
        return qs

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    @action(detail=True, methods=["post", "delete"])
    def share(self, request, pk=None):
        return _share_response(self.get_object(), request, "clients.Task")

    @action(detail=True, methods=["get", "post"])
    def comments(self, request, pk=None):
        task = self.get_object()
        if request.method == "GET":
            rows = TaskComment.objects.filter(task=task).select_related("author")
            return Response(TaskCommentSerializer(rows, many=True).data)
        serializer = TaskCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        comment = serializer.save(task=task, author=request.user, is_public=False)
        return Response(
            TaskCommentSerializer(comment).data, status=status.HTTP_201_CREATED
        )
