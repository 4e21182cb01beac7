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
from agency_ops.recruitment import metrics
from agency_ops.recruitment import services
from agency_ops.recruitment.api.serializers import CandidateAssessmentSerializer
from agency_ops.recruitment.api.serializers import CandidateSerializer
from agency_ops.recruitment.api.serializers import CandidateStatusHistorySerializer
from agency_ops.recruitment.api.serializers import ChangeStatusSerializer
from agency_ops.recruitment.models import Candidate
from agency_ops.recruitment.models import CandidateAssessment
from agency_ops.recruitment.models import CandidateStatusHistory
from agency_ops.users.api.permissions import IsHRStaff


@extend_schema(tags=["Recruitment"])
class CandidateViewSet(viewsets.ModelViewSet):
    queryset = Candidate.objects.select_related("hr_pic").all()
    serializer_class = CandidateSerializer
    permission_classes = [IsAuthenticated, IsHRStaff]
    filterset_fields = ["status", "position", "hr_pic", "division"]

    def perform_create(self, serializer):
        candidate = services.create_candidate(
            created_by=self.request.user, **serializer.validated_data
        )
        serializer.instance = candidate
        log_action(
            "candidate_created",
            request=self.request,
            model_name="recruitment.Candidate",
            record_id=candidate.pk,
        )

    def perform_destroy(self, instance):
        log_action(
            "candidate_deleted",
            request=self.request,
            model_name="recruitment.Candidate",
            record_id=instance.pk,
            before={"full_name": instance.full_name, "status": instance.status},
        )
        instance.delete()

    @extend_schema(request=ChangeStatusSerializer, responses=CandidateSerializer)
    @action(detail=True, methods=["post"], url_path="change-status")
    def change_status(self, request, pk=None):
        candidate = self.get_object()
        ser = ChangeStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        services.change_status(
            candidate,
            ser.validated_data["status"],
            by=request.user,
            notes=ser.validated_data["notes"],
            request=request,
        )
        return Response(CandidateSerializer(candidate).data)

    @action(detail=True, methods=["get"], pagination_class=None)
    def history(self, request, pk=None):
        rows = CandidateStatusHistory.objects.filter(
            candidate=self.get_object()
        ).select_related("changed_by")
        return Response(CandidateStatusHistorySerializer(rows, many=True).data)


@extend_schema(tags=["Recruitment"])
class CandidateAssessmentViewSet(viewsets.ModelViewSet):
    queryset = CandidateAssessment.objects.select_related("assessor").all()
    serializer_class = CandidateAssessmentSerializer
    permission_classes = [IsAuthenticated, IsHRStaff]
    filterset_fields = ["candidate", "assessment_type"]

    def perform_create(self, serializer):
        serializer.save(assessor=self.request.user)


class RecruitmentDashboardView(APIView):
    permission_classes = [IsAuthenticated, IsHRStaff]

    @extend_schema(
        tags=["Recruitment"],
        parameters=[
            OpenApiParameter(
                "range",
                OpenApiTypes.STR,
                OpenApiParameter.QUERY,
                enum=["7d", "30d", "90d", "all"],
            ),
            OpenApiParameter("position", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("status", OpenApiTypes.STR, OpenApiParameter.QUERY),
            OpenApiParameter("hr_pic", OpenApiTypes.INT, OpenApiParameter.QUERY),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        params = request.query_params
        range_key = params.get("range") or "30d"
        if range_key not in {*metrics.RANGE_DAYS, "all"}:
            return Response(
                {"detail": "range must be one of 7d, 30d, 90d, all"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        hr_pic = params.get("hr_pic")
        now = timezone.now()
        candidates = metrics.filter_candidates(
            Candidate.objects.select_related("hr_pic"),
            since=metrics.range_start(range_key, now),
            position=params.get("position") or None,
            status=params.get("status") or None,
            hr_pic=int(hr_pic) if hr_pic and hr_pic.isdigit() else None,
        )
        history = CandidateStatusHistory.objects.only(
            "candidate_id", "old_status", "new_status", "created_at"
        )
        stale = metrics.needs_attention(candidates, now)
        return Response(
            {
                "range": range_key,
                "stats": metrics.pipeline_stats(candidates),
                "funnel": metrics.funnel(candidates),
                "status_distribution": metrics.status_distribution(candidates),
                "time_to_progress": metrics.time_to_progress(history),
                "hr_pic_stats": metrics.hr_pic_stats(candidates),
                "needs_attention": CandidateSerializer(stale, many=True).data,
                "positions": sorted(
                    set(Candidate.objects.values_list("position", flat=True))
                ),
            }
        )
