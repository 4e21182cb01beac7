from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from agency_ops.audit.utils import log_action
from agency_ops.leaves import services
from agency_ops.leaves.api.serializers import LeaveRejectSerializer
from agency_ops.leaves.api.serializers import LeaveRequestSerializer
from agency_ops.leaves.models import LeaveRequest
from agency_ops.users.api.permissions import HR_ROLES
from agency_ops.users.api.permissions import user_has_role

MODEL_NAME = "leaves.LeaveRequest"


@extend_schema(tags=["Leaves"])
class LeaveRequestViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    GenericViewSet,
):
    """Own leave requests for everyone; HR sees and decides all of them."""

    serializer_class = LeaveRequestSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["status", "leave_type", "employee"]

    def _is_hr(self) -> bool:
        return user_has_role(self.request.user, *HR_ROLES)

    def get_queryset(self):
        qs = LeaveRequest.objects.select_related(
            "employee", "employee__user", "approved_by"
        )
        if self._is_hr():
            return qs
        return qs.filter(employee__user=self.request.user)

    def create(self, request, *args, **kwargs):
        if getattr(request.user, "employee", None) is None:
            return Response(
                {"detail": "No employee profile is linked to this account."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().create(request, *args, **kwargs)

    def perform_create(self, serializer):
        instance = serializer.save(
            employee=self.request.user.employee,
            status=LeaveRequest.Status.PENDING,
        )
        log_action(
            "leave_requested",
            request=self.request,
            model_name=MODEL_NAME,
            record_id=instance.pk,
            after={
                "leave_type": instance.leave_type,
                "start_date": str(instance.start_date),
                "end_date": str(instance.end_date),
            },
        )

    def _decide(self, request, decision):
        if not self._is_hr():
            raise PermissionDenied("Only HR can decide leave requests.")
        leave = self.get_object()
        before = {"status": leave.status}
        try:
            leave = decision(leave)
        except services.LeaveError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        log_action(
            f"leave_{leave.status}",
            request=request,
            model_name=MODEL_NAME,
            record_id=leave.pk,
            before=before,
            after={"status": leave.status, "rejection_reason": leave.rejection_reason},
        )
        return Response(LeaveRequestSerializer(leave).data)

    @action(detail=True, methods=["post"])
    def approve(self, request, pk=None):
        return self._decide(
            request, lambda leave: services.approve_leave(leave, request.user)
        )

    @extend_schema(request=LeaveRejectSerializer)
    @action(detail=True, methods=["post"])
    def reject(self, request, pk=None):
        serializer = LeaveRejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reason = serializer.validated_data["rejection_reason"]
        return self._decide(
            request, lambda leave: services.reject_leave(leave, request.user, reason)
        )

    @action(detail=False, methods=["get"], url_path="on-leave-today", pagination_class=None)
    def on_leave_today(self, request):
        leaves = self.get_queryset().covering(timezone.localdate())
        return Response(LeaveRequestSerializer(leaves, many=True).data)
