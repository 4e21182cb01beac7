from django.conf import settings
from django.core.validators import MaxValueValidator
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


def candidate_cv_upload_to(instance, filename):  # pragma: no cover - path logic trivial
    return f"recruitment/cv/{filename}"


class Candidate(models.Model):
    class Status(models.TextChoices):
        APPLIED = "applied", _("Applied")
        SCREENING_HR = "screening_hr", _("Screening HR")
        INTERVIEW_USER = "interview_user", _("Interview User")
        INTERVIEW_FINAL = "interview_final", _("Interview Final")
        OFFERING = "offering", _("Offering")
        HIRED = "hired", _("Hired")
        REJECTED = "rejected", _("Rejected")

    full_name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50, blank=True)
    position = models.CharField(max_length=150)
    division = models.CharField(max_length=150, blank=True)
    location = models.CharField(max_length=150, blank=True)
    cv = models.FileField(upload_to=candidate_cv_upload_to, null=True, blank=True)
    portfolio_url = models.URLField(blank=True)
    status = models.CharField(
        max_length=24, choices=Status.choices, default=Status.APPLIED
    )
    hr_pic = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="recruitment_candidates",
    )
    applied_at = models.DateTimeField(default=timezone.now)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-applied_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.full_name} ({self.position})"


class CandidateStatusHistory(models.Model):
    candidate = models.ForeignKey(
        Candidate, on_delete=models.CASCADE, related_name="status_history"
    )
    old_status = models.CharField(max_length=24, blank=True)
    new_status = models.CharField(max_length=24)
    changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["created_at"]
        verbose_name_plural = "candidate status history"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.candidate_id}: {self.old_status} -> {self.new_status}"


class CandidateAssessment(models.Model):
    class AssessmentType(models.TextChoices):
        SCREENING = "screening", _("Screening")
        INTERVIEW_USER = "interview_user", _("Interview User")
        INTERVIEW_FINAL = "interview_final", _("Interview Final")
        TEST = "test", _("Test")
        OTHER = "other", _("Other")

    candidate = models.ForeignKey(
        Candidate, on_delete=models.CASCADE, related_name="assessments"
    )
    assessor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    assessment_type = models.CharField(
        max_length=24, choices=AssessmentType.choices, default=AssessmentType.SCREENING
    )
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.candidate_id} {self.assessment_type} {self.rating}"
