from django.urls import path

from agency_ops.audit.api.views import RecentAuditView

app_name = "audit"

urlpatterns = [
    path("recent/", RecentAuditView.as_view(), name="recent"),
]
