from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import CandidateAssessmentViewSet
from .views import CandidateViewSet
from .views import RecruitmentDashboardView

router = SimpleRouter()
router.register("candidates", CandidateViewSet, basename="recruitment-candidate")
router.register("assessments", CandidateAssessmentViewSet, basename="recruitment-assessment")

urlpatterns = [
    path("dashboard/", RecruitmentDashboardView.as_view(), name="recruitment-dashboard"),
    *router.urls,
]
