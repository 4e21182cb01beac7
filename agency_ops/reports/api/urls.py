from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import MonthlyAdsReportViewSet
from .views import MonthlyOrganicReportViewSet
from .views import PlatformAccountViewSet
from .views import ReportAnalyticsView

router = SimpleRouter()
router.register("accounts", PlatformAccountViewSet, basename="report-account")
router.register("organic", MonthlyOrganicReportViewSet, basename="report-organic")
router.register("ads", MonthlyAdsReportViewSet, basename="report-ads")

urlpatterns = [
    path("analytics/", ReportAnalyticsView.as_view(), name="report-analytics"),
    *router.urls,
]
