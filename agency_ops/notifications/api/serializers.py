from __future__ import annotations

from typing import Any

from rest_framework import serializers

from agency_ops.notifications.models import EmailLog
from agency_ops.notifications.models import Notification
from agency_ops.users.api.permissions import ALL_ROLES


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Notification
        fields = (
            "id",
            "recipient",
            "title",
            "message",
            "notification_type",
            "is_read",
            "created_at",
            "related_link",
        )
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    """Broadcast form: exactly one of ``recipient_ids`` or ``role``."""

    title = serializers.CharField(max_length=255)
    message = serializers.CharField()
    notification_type = serializers.ChoiceField(
        choices=Notification.Type.choices,
        required=False,
        default=Notification.Type.OTHER,
    )
    related_link = serializers.CharField(required=False, allow_blank=True, default="")
    recipient_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1), required=False, allow_empty=True
    )
    role = serializers.ChoiceField(choices=[(r, r) for r in ALL_ROLES], required=False)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        if not attrs.get("recipient_ids"):
            attrs.pop("recipient_ids", None)
        targets = ["recipient_ids" in attrs, "role" in attrs]
        if sum(targets) != 1:
            msg = "Provide exactly one of recipient_ids, role."
            raise serializers.ValidationError(msg)
        return attrs


class EmailLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = EmailLog
        fields = (
            "id",
            "recipient_email",
            "recipient_name",
            "subject",
            "notification_type",
            "related_id",
            "status",
            "error_message",
            "sent_at",
            "created_at",
        )
        read_only_fields = fields
