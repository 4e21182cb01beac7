from __future__ import annotations

from typing import TYPE_CHECKING

from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from agency_ops.audit.api.serializers import AuditLogSerializer
from agency_ops.audit.models import AuditLog
from agency_ops.users.api.permissions import ROLE_DIRECTOR
from agency_ops.users.api.permissions import ROLE_HR
from agency_ops.users.api.permissions import ROLE_SUPER_ADMIN
from agency_ops.users.api.permissions import user_has_role

if TYPE_CHECKING:
    from django.db.models import QuerySet


class RecentAuditView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Audit"],
        parameters=[
            OpenApiParameter("limit", OpenApiTypes.INT, description="1-50, default 5"),
            OpenApiParameter("model_name", OpenApiTypes.STR),
            OpenApiParameter("record_id", OpenApiTypes.INT),
        ],
    )
    def get(self, request):
        if not user_has_role(request.user, ROLE_SUPER_ADMIN, ROLE_HR, ROLE_DIRECTOR):
            return Response({"detail": "Forbidden"}, status=403)

        try:
            limit = int(request.query_params.get("limit", "5"))
        except (TypeError, ValueError):
            limit = 5
        limit = max(1, min(limit, 50))

        qs: QuerySet[AuditLog] = AuditLog.objects.select_related("actor").all()
        model_name = request.query_params.get("model_name")
        if model_name:
            qs = qs.filter(model_name=model_name)
        record_id = request.query_params.get("record_id")
        if record_id and record_id.isdigit():
            qs = qs.filter(record_id=int(record_id))

        rows = list(qs[:limit])
        data = AuditLogSerializer(rows, many=True).data
        return Response({"results": data, "limit": limit})
