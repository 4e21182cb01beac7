from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from agency_ops.audit.utils import log_action
from agency_ops.employees.api.filters import EmployeeFilter
from agency_ops.employees.api.serializers import EmployeeHRSerializer
from agency_ops.employees.api.serializers import EmployeeSerializer
from agency_ops.employees.models import Employee
from agency_ops.users.api.permissions import FINANCE_ROLES
from agency_ops.users.api.permissions import HR_ROLES
from agency_ops.users.api.permissions import IsHRCanWrite
from agency_ops.users.api.permissions import user_has_role


@extend_schema_view(
    list=extend_schema(tags=["Employees"]),
    retrieve=extend_schema(tags=["Employees"]),
    create=extend_schema(tags=["Employees"]),
    update=extend_schema(tags=["Employees"]),
    partial_update=extend_schema(tags=["Employees"]),
    destroy=extend_schema(tags=["Employees"]),
)
class EmployeeViewSet(viewsets.ModelViewSet):
    """Everyone can browse the directory; HR maintains it."""

    queryset = Employee.objects.select_related("user").all()
    permission_classes = [IsAuthenticated, IsHRCanWrite]
    filterset_class = EmployeeFilter

    def get_serializer_class(self):
        if user_has_role(self.request.user, *HR_ROLES, *FINANCE_ROLES):
            return EmployeeHRSerializer
        return EmployeeSerializer

    def perform_create(self, serializer):
        instance = serializer.save()
        log_action(
            "employee_created",
            request=self.request,
            model_name="employees.Employee",
            record_id=instance.pk,
        )

    def perform_update(self, serializer):
        instance = serializer.save()
        log_action(
            "employee_updated",
            request=self.request,
            model_name="employees.Employee",
            record_id=instance.pk,
            after={k: str(v) for k, v in serializer.validated_data.items()},
        )
