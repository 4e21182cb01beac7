from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.mixins import ListModelMixin
from rest_framework.mixins import RetrieveModelMixin
from rest_framework.mixins import UpdateModelMixin
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from agency_ops.audit.utils import log_action
from agency_ops.users.api.permissions import is_super_admin
from agency_ops.users.models import User

from .serializers import UserSerializer


@extend_schema_view(
    list=extend_schema(tags=["Users"]),
    retrieve=extend_schema(tags=["Users"]),
    partial_update=extend_schema(tags=["Users"]),
    update=extend_schema(tags=["Users"]),
)
class UserViewSet(RetrieveModelMixin, ListModelMixin, UpdateModelMixin, GenericViewSet):
    """Directory of active users, used when picking assignees and participants."""

    serializer_class = UserSerializer
    queryset = User.objects.filter(is_active=True).order_by("username")
    lookup_field = "username"
    pagination_class = None

    def get_queryset(self, *args, **kwargs):  # type: ignore[override]
        qs = super().get_queryset()
        if self.action in {"update", "partial_update"} and not is_super_admin(
            self.request.user
        ):
            return qs.filter(pk=self.request.user.pk)
        return qs

    @action(detail=False)
    def me(self, request):
        serializer = UserSerializer(request.user, context={"request": request})
        return Response(status=status.HTTP_200_OK, data=serializer.data)

    def perform_update(self, serializer):  # type: ignore[override]
        instance = serializer.save()
        log_action(
            "user_updated",
            actor=self.request.user,
            message=f"username={instance.username}",
            model_name="users.User",
            record_id=instance.pk,
        )
