from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from agency_ops.audit.utils import log_action
from agency_ops.discipline.api.serializers import DisciplinaryCaseSerializer
from agency_ops.discipline.api.serializers import DisciplinaryCaseUpdateSerializer
from agency_ops.discipline.models import DisciplinaryCase
from agency_ops.discipline.models import summarize_cases
from agency_ops.users.api.permissions import IsHRStaff

MODEL_NAME = "discipline.DisciplinaryCase"


@extend_schema(tags=["Discipline"])
class DisciplinaryCaseViewSet(viewsets.ModelViewSet):
    queryset = DisciplinaryCase.objects.select_related(
        "employee", "employee__user", "reported_by"
    ).all()
    permission_classes = [IsAuthenticated, IsHRStaff]
    filterset_fields = ["employee", "status", "severity", "violation_type"]

    def get_serializer_class(self):
        if self.action in {"update", "partial_update"}:
            return DisciplinaryCaseUpdateSerializer
        return DisciplinaryCaseSerializer

    def perform_create(self, serializer):
        instance = serializer.save(
            reported_by=self.request.user,
            status=DisciplinaryCase.Status.PENDING,
            case_date=serializer.validated_data.get("case_date")
            or timezone.localdate(),
        )
        log_action(
            "discipline_case_created",
            request=self.request,
            model_name=MODEL_NAME,
            record_id=instance.pk,
            after={
                "employee": instance.employee_id,
                "violation_type": instance.violation_type,
                "severity": instance.severity,
            },
        )

    def perform_update(self, serializer):
        before = {f: str(getattr(serializer.instance, f)) for f in serializer.validated_data}
        instance = serializer.save()
        log_action(
            "discipline_case_updated",
            request=self.request,
            model_name=MODEL_NAME,
            record_id=instance.pk,
            before=before,
            after={k: str(v) for k, v in serializer.validated_data.items()},
        )

    def perform_destroy(self, instance):
        log_action(
            "discipline_case_deleted",
            request=self.request,
            model_name=MODEL_NAME,
            record_id=instance.pk,
            before={"employee": instance.employee_id, "status": instance.status},
        )
        instance.delete()

    @action(detail=False, methods=["get"])
    def summary(self, request):
        cases = (
            self.filter_queryset(self.get_queryset())
            .select_related(None)
            .only("status", "severity", "employee")
        )
        return Response(summarize_cases(cases))
