from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from agency_ops.audit.models import AuditLog

User = get_user_model()


class AuditActorSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(source="display_name", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "full_name"]


class AuditLogSerializer(serializers.ModelSerializer):
    actor = AuditActorSerializer(allow_null=True)
    changed_fields = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = AuditLog
        fields = [
            "id",
            "action",
            "message",
            "model_name",
            "record_id",
            "before",
            "after",
            "changed_fields",
            "ip_address",
            "created_at",
            "actor",
        ]
