from django.conf import settings
from django.urls import include
from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from agency_ops.analytics.api.views import CEODashboardView
from agency_ops.analytics.api.views import HRAnalyticsView
from agency_ops.attendance.api.views import AttendanceViewSet
from agency_ops.attendance.api.views import AutoClockoutNotificationViewSet
from agency_ops.clients.api.views import ClientViewSet
from agency_ops.clients.api.views import ProjectViewSet
from agency_ops.clients.api.views import TaskViewSet
from agency_ops.discipline.api.views import DisciplinaryCaseViewSet
from agency_ops.employees.api.views import EmployeeViewSet
from agency_ops.leaves.api.views import LeaveRequestViewSet
from agency_ops.meetings.api.views import MeetingViewSet
from agency_ops.notifications.api.views import EmailLogViewSet
from agency_ops.notifications.api.views import NotificationViewSet
from agency_ops.users.api.views import UserViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("users", UserViewSet)
router.register("employees", EmployeeViewSet, basename="employees")
router.register("clients", ClientViewSet, basename="clients")
router.register("projects", ProjectViewSet, basename="projects")
router.register("tasks", TaskViewSet, basename="tasks")
router.register("attendance", AttendanceViewSet, basename="attendance")
router.register(
    "attendance-notifications",
    AutoClockoutNotificationViewSet,
    basename="attendance-notifications",
)
router.register("meetings", MeetingViewSet, basename="meetings")
router.register("discipline", DisciplinaryCaseViewSet, basename="discipline")
router.register("leave-requests", LeaveRequestViewSet, basename="leave-requests")
router.register("notifications", NotificationViewSet, basename="notifications")
router.register("email-logs", EmailLogViewSet, basename="email-logs")


app_name = "api"
# Module routers are included without a namespace so their names read
# "api_v1:finance-income-list" next to the top-level ones.
urlpatterns = [
    path(
        "audit/",
        include(("agency_ops.audit.api.urls", "audit"), namespace="audit"),
    ),
    path("finance/", include("agency_ops.finance.api.urls")),
    path("recruitment/", include("agency_ops.recruitment.api.urls")),
    path("reports/", include("agency_ops.reports.api.urls")),
    path("shared/", include("agency_ops.sharing.api.urls")),
    path("hr-analytics/", HRAnalyticsView.as_view(), name="hr-analytics"),
    path("ceo-dashboard/", CEODashboardView.as_view(), name="ceo-dashboard"),
    *router.urls,
]
