"""Unauthenticated endpoints that resolve share tokens and dashboard slugs.

Errors use an ``{"error": ...}`` body: 400 when the token or slug is missing,
404 when nothing public matches it.
"""

import logging

from django.utils import timezone
from django.utils.dateparse import parse_date
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from agency_ops.clients.models import Client
from agency_ops.clients.models import Project
from agency_ops.clients.models import Task
from agency_ops.clients.models import TaskComment
from agency_ops.meetings.models import Meeting
from agency_ops.reports.api.serializers import MonthlyAdsReportSerializer
from agency_ops.reports.api.serializers import MonthlyOrganicReportSerializer
from agency_ops.reports.api.serializers import PlatformAccountSerializer
from agency_ops.reports.models import MonthlyAdsReport
from agency_ops.reports.models import MonthlyOrganicReport
from agency_ops.sharing.api.serializers import PublicCommentSerializer
from agency_ops.sharing.api.serializers import SharedMeetingSerializer
from agency_ops.sharing.api.serializers import SharedProjectSerializer
from agency_ops.sharing.api.serializers import SharedProjectTaskSerializer
from agency_ops.sharing.api.serializers import SharedTaskSerializer
from agency_ops.sharing.dashboard import SORT_FIELDS
from agency_ops.sharing.dashboard import client_dashboard
from agency_ops.sharing.dashboard import merge_comments
from agency_ops.sharing.dashboard import sort_tasks

logger = logging.getLogger(__name__)

TOKEN_PARAM = OpenApiParameter("token", OpenApiTypes.STR, OpenApiParameter.QUERY)
SLUG_PARAM = OpenApiParameter("slug", OpenApiTypes.STR, OpenApiParameter.QUERY)


def _error(message: str, code: int) -> Response:
    return Response({"error": message}, status=code)


class _PublicView(APIView):
    authentication_classes: list = []
    permission_classes = [AllowAny]

    def param(self, name: str) -> str:
        value = self.request.query_params.get(name)
        if not value and self.request.method == "POST":
            value = self.request.data.get(name)
        return (value or "").strip()


class _TokenView(_PublicView):
    """GET or POST ``token`` resolved against ``queryset``."""

    queryset = None
    not_found = "Not found"

    def get_object(self, token: str):
        return self.queryset.filter(share_token=token).first()

    def render(self, instance) -> dict:
        raise NotImplementedError

    def get(self, request):
        token = self.param("token")
        if not token:
            return _error("Token is required", status.HTTP_400_BAD_REQUEST)
        instance = self.get_object(token)
        if instance is None:
            logger.info("share token not found for %s", type(self).__name__)
            return _error(self.not_found, status.HTTP_404_NOT_FOUND)
        return Response(self.render(instance))

    def post(self, request):
        return self.get(request)


@extend_schema(tags=["Shared"], parameters=[TOKEN_PARAM], responses=OpenApiTypes.OBJECT)
class SharedMeetingView(_TokenView):
    queryset = Meeting.objects.filter(is_confidential=False).select_related(
        "client", "project"
    ).prefetch_related("participants__user", "external_participants")
    not_found = "Meeting not found"

    def render(self, instance):
        return {"meeting": SharedMeetingSerializer(instance).data}


def _comment_row(comment: TaskComment) -> dict:
    return {
        "id": comment.pk,
        "name": comment.display_name,
        "content": comment.content,
        "created_at": comment.created_at,
    }


@extend_schema(tags=["Shared"], parameters=[TOKEN_PARAM], responses=OpenApiTypes.OBJECT)
class SharedTaskView(_TokenView):
    queryset = Task.objects.select_related("project__client", "assigned_to")
    not_found = "Task not found"

    def render(self, instance):
        comments = list(instance.comments.select_related("author"))
        merged = merge_comments(
            [_comment_row(c) for c in comments if not c.is_public],
            [_comment_row(c) for c in comments if c.is_public],
        )
        return {"task": SharedTaskSerializer(instance).data, "comments": merged}


@extend_schema(tags=["Shared"], parameters=[TOKEN_PARAM], responses=OpenApiTypes.OBJECT)
class SharedProjectView(_TokenView):
    queryset = Project.objects.select_related("client", "lead")
    not_found = "Project not found"

    def render(self, instance):
        tasks = list(
            instance.tasks.select_related("assigned_to").prefetch_related("assignees")
        )
        team = {u.display_name for t in tasks for u in t.assignees.all()}
        team.update(t.assigned_to.display_name for t in tasks if t.assigned_to_id)
        if instance.lead_id:
            team.add(instance.lead.display_name)
        return {
            "project": SharedProjectSerializer(instance).data,
            "tasks": SharedProjectTaskSerializer(tasks, many=True).data,
            "team": sorted(team),
        }


class SharedTaskCommentView(_PublicView):
    @extend_schema(
        tags=["Shared"],
        request=PublicCommentSerializer,
        responses=OpenApiTypes.OBJECT,
    )
    def post(self, request):
        token = self.param("token")
        if not token:
            return _error("Token is required", status.HTTP_400_BAD_REQUEST)
        serializer = PublicCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        task = Task.objects.filter(share_token=token).first()
        if task is None:
            return _error("Task not found", status.HTTP_404_NOT_FOUND)
        comment = TaskComment.objects.create(
            task=task,
            commenter_name=data["name"],
            content=data["content"],
            is_public=True,
        )
        return Response(
            {"comment": {**_comment_row(comment), "type": "public"}},
            status=status.HTTP_201_CREATED,
        )


def _client_by_slug(slug: str):
    return Client.objects.filter(dashboard_slug=slug).first()


class SharedClientDashboardView(_PublicView):
    @extend_schema(
        tags=["Shared"],
        parameters=[
            SLUG_PARAM,
            OpenApiParameter("startDate", OpenApiTypes.DATE, OpenApiParameter.QUERY),
            OpenApiParameter("endDate", OpenApiTypes.DATE, OpenApiParameter.QUERY),
            OpenApiParameter("status", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter(
                "sortBy", OpenApiTypes.STR, OpenApiParameter.QUERY, enum=sorted(SORT_FIELDS)
            ),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        slug = self.param("slug")
        if not slug:
            return _error("Slug is required", status.HTTP_400_BAD_REQUEST)
        client = _client_by_slug(slug)
        if client is None:
            return _error("Client not found", status.HTTP_404_NOT_FOUND)

        params = request.query_params
        bounds = {}
        for key, lookup in (("startDate", "deadline__gte"), ("endDate", "deadline__lte")):
            if params.get(key):
                try:
                    parsed = parse_date(params[key])
                except ValueError:
                    parsed = None
                if parsed is None:
                    return _error(f"{key} must be YYYY-MM-DD", status.HTTP_400_BAD_REQUEST)
                bounds[lookup] = parsed
        projects = list(
            client.projects.order_by("-created_at").values(
                "id", "title", "status", "deadline", "created_at"
            )
        )
        tasks = Task.objects.filter(project__client=client, **bounds)
        if params.get("status") and params["status"] != "all":
            tasks = tasks.filter(status=params["status"])
        rows = list(
            tasks.values(
                "id", "title", "status", "deadline", "priority", "project_id", "created_at"
            )
        )
        payload = client_dashboard(
            projects,
            sort_tasks(rows, params.get("sortBy") or "deadline"),
            today=timezone.localdate(),
        )
        return Response(
            {"client": {"name": client.name, "company": client.company}, **payload}
        )


class SharedClientReportsView(_PublicView):
    @extend_schema(
        tags=["Shared"],
        parameters=[
            SLUG_PARAM,
            OpenApiParameter("year", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        slug = self.param("slug")
        if not slug:
            return _error("Slug is required", status.HTTP_400_BAD_REQUEST)
        client = _client_by_slug(slug)
        if client is None:
            return _error("Client not found", status.HTTP_404_NOT_FOUND)
        try:
            year = int(request.query_params.get("year") or timezone.localdate().year)
        except ValueError:
            return _error("Year must be a number", status.HTTP_400_BAD_REQUEST)

        organic = MonthlyOrganicReport.objects.filter(
            platform_account__client=client, report_year=year
        ).select_related("platform_account").order_by("report_month", "platform_account_id")
        ads = MonthlyAdsReport.objects.filter(
            client=client, report_year=year
        ).select_related("client").order_by("report_month", "platform")
        return Response(
            {
                "client": {"name": client.name, "company": client.company},
                "year": year,
                "accounts": PlatformAccountSerializer(
                    client.platform_accounts.select_related("client"), many=True
                ).data,
                "organic_reports": MonthlyOrganicReportSerializer(organic, many=True).data,
                "ads_reports": MonthlyAdsReportSerializer(ads, many=True).data,
            }
        )
