from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import SAFE_METHODS
from rest_framework.permissions import BasePermission
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from agency_ops.audit.utils import log_action
from agency_ops.meetings import services
from agency_ops.meetings.api.filters import MeetingFilter
from agency_ops.meetings.api.serializers import MeetingSerializer
from agency_ops.meetings.api.serializers import RescheduleSerializer
from agency_ops.meetings.api.serializers import RespondSerializer
from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingParticipant
from agency_ops.users.api.permissions import is_super_admin


class IsMeetingOrganizer(BasePermission):
    """Anyone may read and respond; the creator or a super admin manages."""

    def has_object_permission(self, request, view, obj) -> bool:
        if request.method in SAFE_METHODS or view.action == "respond":
            return True
        return obj.created_by_id == request.user.pk or is_super_admin(request.user)


@extend_schema(tags=["Meetings"])
class MeetingViewSet(viewsets.ModelViewSet):
    serializer_class = MeetingSerializer
    permission_classes = [IsAuthenticated, IsMeetingOrganizer]
    filterset_class = MeetingFilter

    def get_queryset(self):
        return (
            Meeting.objects.for_user(self.request.user)
            .select_related("client", "project", "created_by")
            .prefetch_related("participants__user", "external_participants")
        )

    def perform_destroy(self, instance):
        log_action(
            "meeting_deleted",
            request=self.request,
            model_name="meetings.Meeting",
            record_id=instance.pk,
            before={"title": instance.title, "date": str(instance.meeting_date)},
        )
        instance.delete()

    @extend_schema(request=RespondSerializer, responses=MeetingSerializer)
    @action(detail=True, methods=["post"])
    def respond(self, request, pk=None):
        meeting = self.get_object()
        participant = MeetingParticipant.objects.filter(
            meeting=meeting, user=request.user
        ).first()
        if participant is None:
            return Response(
                {"detail": "You are not invited to this meeting."},
                status=status.HTTP_403_FORBIDDEN,
            )
        ser = RespondSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            services.respond(
                participant,
                accept=ser.validated_data["accept"],
                reason=ser.validated_data["reason"],
            )
        except services.MeetingError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(MeetingSerializer(meeting).data)

    @extend_schema(request=RescheduleSerializer, responses=MeetingSerializer)
    @action(detail=True, methods=["post"])
    def reschedule(self, request, pk=None):
        meeting = self.get_object()
        ser = RescheduleSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data
        try:
            services.reschedule(
                meeting,
                new_date=data["meeting_date"],
                start_time=data["start_time"],
                end_time=data["end_time"],
                reason=data["reason"],
            )
        except services.MeetingError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        log_action(
            "meeting_rescheduled",
            request=request,
            model_name="meetings.Meeting",
            record_id=meeting.pk,
            before={"date": str(meeting.original_date)},
            after={"date": str(meeting.meeting_date), "reason": meeting.reschedule_reason},
        )
        return Response(MeetingSerializer(meeting).data)

    @action(detail=True, methods=["post", "delete"])
    def share(self, request, pk=None):
        meeting = self.get_object()
        if request.method == "DELETE":
            meeting.revoke_share_token()
            log_action(
                "share_token_revoked",
                request=request,
                model_name="meetings.Meeting",
                record_id=meeting.pk,
            )
            return Response(status=status.HTTP_204_NO_CONTENT)
        if meeting.is_confidential:
            return Response(
                {"detail": "Confidential meetings cannot be shared."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        token = meeting.issue_share_token()
        log_action(
            "share_token_issued",
            request=request,
            model_name="meetings.Meeting",
            record_id=meeting.pk,
        )
        return Response({"share_token": token})
