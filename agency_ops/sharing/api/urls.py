from django.urls import path

from agency_ops.sharing.api import views

urlpatterns = [
    path("meeting/", views.SharedMeetingView.as_view(), name="shared-meeting"),
    path("task/", views.SharedTaskView.as_view(), name="shared-task"),
    path(
        "task/comments/",
        views.SharedTaskCommentView.as_view(),
        name="shared-task-comments",
    ),
    path("project/", views.SharedProjectView.as_view(), name="shared-project"),
    path(
        "client-dashboard/",
        views.SharedClientDashboardView.as_view(),
        name="shared-client-dashboard",
    ),
    path(
        "client-reports/",
        views.SharedClientReportsView.as_view(),
        name="shared-client-reports",
    ),
]
