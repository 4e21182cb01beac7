from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from agency_ops.audit.utils import log_action
from agency_ops.reports import services
from agency_ops.reports.api.serializers import MonthlyAdsReportSerializer
from agency_ops.reports.api.serializers import MonthlyOrganicReportSerializer
from agency_ops.reports.api.serializers import PlatformAccountSerializer
from agency_ops.reports.models import MonthlyAdsReport
from agency_ops.reports.models import MonthlyOrganicReport
from agency_ops.reports.models import PlatformAccount
from agency_ops.users.api.permissions import IsReportCanWrite
from agency_ops.users.api.permissions import IsReportStaff
from agency_ops.users.api.permissions import IsSuperAdmin


def _locked(exc: services.ReportLockedError) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)


class _AuditedMixin:
    """Writes an audit row for every create, update and delete."""

    audit_label = "report"

    def _model_name(self) -> str:
        return f"reports.{self.queryset.model.__name__}"

    def _snapshot(self, instance) -> dict:
        return dict(self.get_serializer(instance).data)

    def perform_create(self, serializer):
        instance = serializer.save(created_by=self.request.user)
        log_action(
            f"{self.audit_label}_created",
            request=self.request,
            model_name=self._model_name(),
            record_id=instance.pk,
            after=self._snapshot(instance),
        )

    def perform_update(self, serializer):
        before = self._snapshot(serializer.instance)
        instance = serializer.save()
        log_action(
            f"{self.audit_label}_updated",
            request=self.request,
            model_name=self._model_name(),
            record_id=instance.pk,
            before=before,
            after=self._snapshot(instance),
        )

    def perform_destroy(self, instance):
        log_action(
            f"{self.audit_label}_deleted",
            request=self.request,
            model_name=self._model_name(),
            record_id=instance.pk,
            before=self._snapshot(instance),
        )
        instance.delete()


@extend_schema(tags=["Reports"])
class PlatformAccountViewSet(_AuditedMixin, viewsets.ModelViewSet):
    audit_label = "platform_account"
    queryset = PlatformAccount.objects.select_related("client").all()
    serializer_class = PlatformAccountSerializer
    permission_classes = [IsAuthenticated, IsReportCanWrite]
    filterset_fields = ["client", "platform", "status"]


class _LockableReportViewSet(_AuditedMixin, viewsets.ModelViewSet):
    permission_classes = [IsAuthenticated, IsReportCanWrite]

    def get_permissions(self):
        if self.action == "unlock":
            return [IsAuthenticated(), IsSuperAdmin()]
        if self.action == "lock":
            return [IsAuthenticated(), IsReportStaff()]
        return super().get_permissions()

    def update(self, request, *args, **kwargs):
        try:
            services.ensure_unlocked(self.get_object())
        except services.ReportLockedError as exc:
            return _locked(exc)
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        try:
            services.ensure_unlocked(self.get_object())
        except services.ReportLockedError as exc:
            return _locked(exc)
        return super().destroy(request, *args, **kwargs)

    @action(detail=True, methods=["post"])
    def lock(self, request, pk=None):
        report = services.lock_report(self.get_object(), user=request.user, request=request)
        return Response(self.get_serializer(report).data)

    @action(detail=True, methods=["post"])
    def unlock(self, request, pk=None):
        report = services.unlock_report(
            self.get_object(), user=request.user, request=request
        )
        return Response(self.get_serializer(report).data)


@extend_schema(tags=["Reports"])
class MonthlyOrganicReportViewSet(_LockableReportViewSet):
    queryset = MonthlyOrganicReport.objects.select_related(
        "platform_account", "platform_account__client"
    ).all()
    serializer_class = MonthlyOrganicReportSerializer
    filterset_fields = [
        "platform_account",
        "platform_account__client",
        "report_month",
        "report_year",
    ]


@extend_schema(tags=["Reports"])
class MonthlyAdsReportViewSet(_LockableReportViewSet):
    queryset = MonthlyAdsReport.objects.select_related("client").all()
    serializer_class = MonthlyAdsReportSerializer
    filterset_fields = ["client", "platform", "report_month", "report_year", "objective"]


class ReportAnalyticsView(APIView):
    permission_classes = [IsAuthenticated, IsReportStaff]

    @extend_schema(
        tags=["Reports"],
        parameters=[
            OpenApiParameter("year", OpenApiTypes.INT, OpenApiParameter.QUERY),
            OpenApiParameter("client", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        year = request.query_params.get("year") or str(timezone.localdate().year)
        client = request.query_params.get("client")
        if not year.isdigit() or (client and not client.isdigit()):
            return Response(
                {"detail": "year and client must be numeric"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        organic = MonthlyOrganicReport.objects.filter(
            report_year=int(year)
        ).select_related("platform_account")
        ads = MonthlyAdsReport.objects.filter(report_year=int(year)).select_related(
            "client"
        )
        if client:
            organic = organic.filter(platform_account__client_id=int(client))
            ads = ads.filter(client_id=int(client))
        return Response({"year": int(year), **services.summarize(organic, ads)})
