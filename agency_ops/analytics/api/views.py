from datetime import date
from datetime import timedelta

from django.utils import timezone
from django.utils.dateparse import parse_date
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from agency_ops.analytics import hr
from agency_ops.analytics import queries
from agency_ops.analytics.allocation import allocate_resource_costs
from agency_ops.users.api.permissions import IsHRStaff
from agency_ops.users.api.permissions import IsSuperAdmin


def current_month(today: date) -> tuple[date, date]:
    start = today.replace(day=1)
    next_month = (start + timedelta(days=32)).replace(day=1)
    return start, next_month - timedelta(days=1)


def previous_month(today: date) -> tuple[date, date]:
    end = today.replace(day=1) - timedelta(days=1)
    return end.replace(day=1), end


class _PeriodError(ValueError):
    pass


def _period(params, start_key: str, end_key: str, default: tuple[date, date]):
    raw_start, raw_end = params.get(start_key), params.get(end_key)
    try:
        start = parse_date(raw_start) if raw_start else default[0]
        end = parse_date(raw_end) if raw_end else default[1]
    except ValueError:
        start = end = None
    if start is None or end is None:
        msg = f"{start_key} and {end_key} must be dates (YYYY-MM-DD)"
        raise _PeriodError(msg)
    if end < start:
        msg = f"{end_key} must be on or after {start_key}"
        raise _PeriodError(msg)
    return start, end


def _date_params(*names):
    return [
        OpenApiParameter(name, OpenApiTypes.DATE, OpenApiParameter.QUERY)
        for name in names
    ]


class HRAnalyticsView(APIView):
    permission_classes = [IsAuthenticated, IsHRStaff]

    @extend_schema(
        tags=["HR Analytics"],
        parameters=[
            *_date_params("start", "end", "compare_start", "compare_end"),
            OpenApiParameter("role", OpenApiTypes.STR, OpenApiParameter.QUERY),
        ],
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        today = timezone.localdate()
        params = request.query_params
        try:
            start, end = _period(params, "start", "end", current_month(today))
            compare = _period(
                params, "compare_start", "compare_end", previous_month(start)
            )
        except _PeriodError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        employees = queries.employee_rows(params.get("role") or None)
        user_ids = [e.user_id for e in employees]
        attendance = queries.attendance_rows(start, end, user_ids)
        compare_attendance = queries.attendance_rows(*compare, user_ids)
        tasks = queries.task_rows(start, end)
        meetings = queries.meeting_rows(start, end)
        return Response(
            {
                "period": {"start": start, "end": end},
                "compare_period": {"start": compare[0], "end": compare[1]},
                "kpis": hr.hr_kpis(
                    employees,
                    attendance,
                    tasks,
                    meetings,
                    compare_attendance,
                    today=today,
                ),
                "risks": hr.risk_panel(employees, attendance, tasks, today=today),
                "ranking": hr.productivity_ranking(
                    employees, attendance, tasks, meetings, today=today
                ),
            }
        )


class CEODashboardView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdmin]

    @extend_schema(
        tags=["CEO Dashboard"],
        parameters=_date_params("start", "end"),
        responses=OpenApiTypes.OBJECT,
    )
    def get(self, request):
        try:
            start, end = _period(
                request.query_params,
                "start",
                "end",
                current_month(timezone.localdate()),
            )
        except _PeriodError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        allocation = allocate_resource_costs(
            queries.staff_costs(),
            queries.external_clients(),
            queries.client_activities(start, end),
        )
        return Response({"period": {"start": start, "end": end}, **allocation})
