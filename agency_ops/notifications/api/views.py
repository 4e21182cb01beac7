from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet
from rest_framework.viewsets import ReadOnlyModelViewSet

from agency_ops.notifications.emails import send_test_email
from agency_ops.notifications.models import EmailLog
from agency_ops.notifications.models import Notification
from agency_ops.notifications.services import notify
from agency_ops.users.api.permissions import IsHRStaff
from agency_ops.users.api.permissions import IsSuperAdmin

from .serializers import EmailLogSerializer
from .serializers import NotificationCreateSerializer
from .serializers import NotificationSerializer

logger = logging.getLogger(__name__)
User = get_user_model()


@extend_schema(tags=["Notifications"])
class NotificationViewSet(
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    GenericViewSet,
):
    """Notifications for the authenticated user.

    - list: shows request.user's notifications (``?unread=1`` for unread only)
    - create: broadcast to users or a role (HR / super admin)
    - destroy: deletes a notification (recipient only)
    - mark_read / mark_all_read
    - test_email: super admin checks e-mail delivery
    """

    permission_classes = [IsAuthenticated]
    serializer_class = NotificationSerializer

    def get_queryset(self):
        qs = Notification.objects.filter(recipient=self.request.user)
        if self.request.query_params.get("unread") in {"1", "true"}:
            qs = qs.filter(is_read=False)
        return qs

    def get_permissions(self):
        if self.action == "create":
            return [IsAuthenticated(), IsHRStaff()]
        if self.action == "test_email":
            return [IsAuthenticated(), IsSuperAdmin()]
        return [p() for p in self.permission_classes]

    def create(self, request, *args, **kwargs):
        serializer = NotificationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if "role" in data:
            recipients = User.objects.filter(groups__name=data["role"], is_active=True)
        else:
            recipients = User.objects.filter(
                pk__in=data["recipient_ids"], is_active=True
            )
        created = notify(
            recipients.distinct(),
            title=data["title"],
            message=data["message"],
            notification_type=data["notification_type"],
            related_link=data.get("related_link", ""),
        )
        if not created:
            return Response(
                {"detail": "No recipients resolved from payload."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        out = NotificationSerializer(created, many=True).data
        return Response(out, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], url_path="mark-read")
    def mark_read(self, request, pk=None):
        notification = self.get_object()
        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=["is_read"])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["post"], url_path="mark-all-read")
    def mark_all_read(self, request):
        self.get_queryset().filter(is_read=False).update(is_read=True)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["post"], url_path="test-email")
    def test_email(self, request):
        try:
            log = send_test_email()
        except Exception as exc:  # noqa: BLE001
            logger.warning("test e-mail failed: %s", exc)
            return Response(
                {"success": False, "error": str(exc)},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response({"success": True, "email_log": log.pk})


@extend_schema(tags=["Notifications"])
class EmailLogViewSet(ReadOnlyModelViewSet):
    queryset = EmailLog.objects.all()
    serializer_class = EmailLogSerializer
    permission_classes = [IsAuthenticated, IsSuperAdmin]
    filterset_fields = ["status", "notification_type"]
