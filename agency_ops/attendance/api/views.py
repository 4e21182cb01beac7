import logging

from django.db import transaction
from django.utils.dateparse import parse_date
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import extend_schema_view
from rest_framework import mixins
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from agency_ops.attendance import services
from agency_ops.attendance.api.serializers import AttendanceSerializer
from agency_ops.attendance.api.serializers import AutoClockoutNotificationSerializer
from agency_ops.attendance.api.serializers import ClockInSerializer
from agency_ops.attendance.api.serializers import ClockOutSerializer
from agency_ops.attendance.models import Attendance
from agency_ops.attendance.models import AutoClockoutNotification
from agency_ops.attendance.tasks import clockin_summary_email
from agency_ops.users.api.permissions import HR_ROLES
from agency_ops.users.api.permissions import user_has_role

logger = logging.getLogger(__name__)


def _employee_or_error(request):
    employee = getattr(request.user, "employee", None)
    if employee is None:
        return None, Response(
            {"detail": "No employee profile is linked to this account."},
            status=status.HTTP_400_BAD_REQUEST,
        )
    return employee, None


def _conflict(exc: services.AttendanceError) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)


@extend_schema_view(
    list=extend_schema(
        tags=["Attendance"],
        parameters=[
            OpenApiParameter(
                name="employee",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Filter by employee ID (HR only)",
            ),
            OpenApiParameter(
                name="start_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Filter records from this date (inclusive)",
            ),
            OpenApiParameter(
                name="end_date",
                type=OpenApiTypes.DATE,
                location=OpenApiParameter.QUERY,
                description="Filter records up to this date (inclusive)",
            ),
        ],
    ),
    retrieve=extend_schema(tags=["Attendance"]),
)
class AttendanceViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    GenericViewSet,
):
    """Own attendance for everyone; HR sees every employee's records."""

    queryset = Attendance.objects.select_related("employee", "employee__user").all()
    serializer_class = AttendanceSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        qs = super().get_queryset()
        params = self.request.query_params
        if user_has_role(self.request.user, *HR_ROLES):
            employee = params.get("employee")
            if employee and employee.isdigit():
                qs = qs.filter(employee_id=int(employee))
        else:
            qs = qs.filter(employee__user=self.request.user)
        start = parse_date(params.get("start_date") or "")
        end = parse_date(params.get("end_date") or "")
        if start:
            qs = qs.filter(date__gte=start)
        if end:
            qs = qs.filter(date__lte=end)
        return qs

    @extend_schema(tags=["Attendance"], responses=AttendanceSerializer)
    @action(detail=False, methods=["get"])
    def today(self, request):
        employee, error = _employee_or_error(request)
        if error:
            return error
        record = services.get_today(employee)
        if record is None:
            return Response({"detail": "Not clocked in yet."}, status=404)
        return Response(AttendanceSerializer(record).data)

    @extend_schema(tags=["Attendance"], request=ClockInSerializer)
    @action(detail=False, methods=["post"], url_path="clock-in")
    def clock_in(self, request):
        employee, error = _employee_or_error(request)
        if error:
            return error
        ser = ClockInSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            record = services.clock_in(
                employee,
                notes=ser.validated_data.get("notes", ""),
                photo=ser.validated_data.get("photo"),
            )
        except services.AttendanceError as exc:
            return _conflict(exc)
        transaction.on_commit(lambda: clockin_summary_email.delay(record.pk))
        return Response(AttendanceSerializer(record).data, status=201)

    @extend_schema(tags=["Attendance"], request=ClockOutSerializer)
    @action(detail=False, methods=["post"], url_path="clock-out")
    def clock_out(self, request):
        employee, error = _employee_or_error(request)
        if error:
            return error
        ser = ClockOutSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            record = services.clock_out(
                employee,
                notes=ser.validated_data.get("notes", ""),
                tasks_completed=ser.validated_data.get("tasks_completed"),
                photo=ser.validated_data.get("photo"),
            )
        except services.AttendanceError as exc:
            return _conflict(exc)
        return Response(AttendanceSerializer(record).data)

    @extend_schema(tags=["Attendance"], request=None)
    @action(detail=False, methods=["post"], url_path="break-start")
    def break_start(self, request):
        employee, error = _employee_or_error(request)
        if error:
            return error
        try:
            record = services.start_break(employee)
        except services.AttendanceError as exc:
            return _conflict(exc)
        return Response(AttendanceSerializer(record).data)

    @extend_schema(tags=["Attendance"], request=None)
    @action(detail=False, methods=["post"], url_path="break-end")
    def break_end(self, request):
        employee, error = _employee_or_error(request)
        if error:
            return error
        try:
            record = services.end_break(employee)
        except services.AttendanceError as exc:
            return _conflict(exc)
        return Response(AttendanceSerializer(record).data)


@extend_schema(tags=["Attendance"])
class AutoClockoutNotificationViewSet(mixins.ListModelMixin, GenericViewSet):
    serializer_class = AutoClockoutNotificationSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return AutoClockoutNotification.objects.filter(
            employee__user=self.request.user
        ).select_related("attendance")

    @action(detail=True, methods=["post"], url_path="mark-read")
    def mark_read(self, request, pk=None):
        row = self.get_object()
        if not row.is_read:
            row.is_read = True
            row.save(update_fields=["is_read"])
        return Response(status=status.HTTP_204_NO_CONTENT)
