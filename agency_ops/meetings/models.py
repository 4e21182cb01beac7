from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

from agency_ops.sharing.models import Shareable
from agency_ops.users.api.permissions import is_super_admin


class MeetingQuerySet(models.QuerySet):
    def for_user(self, user):
        """Meetings the user may see; confidential ones need a personal link."""
        if is_super_admin(user):
            return self
        return self.filter(
            Q(is_confidential=False)
            | Q(created_by=user)
            | Q(participants__user=user)
        ).distinct()

    def attended_by(self, user):
        """Meetings the user organises or is invited to."""
        return self.filter(Q(created_by=user) | Q(participants__user=user)).distinct()


class Meeting(Shareable):
    class MeetingType(models.TextChoices):
        INTERNAL = "internal", _("Internal")
        EXTERNAL = "external", _("External")

    class Mode(models.TextChoices):
        ONLINE = "online", _("Online")
        OFFLINE = "offline", _("Offline")

    class Status(models.TextChoices):
        SCHEDULED = "scheduled", _("Scheduled")
        COMPLETED = "completed", _("Completed")
        CANCELLED = "cancelled", _("Cancelled")

    title = models.CharField(max_length=255)
    type = models.CharField(
        max_length=16, choices=MeetingType.choices, default=MeetingType.INTERNAL
    )
    meeting_date = models.DateField()
    start_time = models.TimeField()
    end_time = models.TimeField()
    mode = models.CharField(max_length=16, choices=Mode.choices, default=Mode.ONLINE)
    meeting_link = models.URLField(blank=True)
    location = models.CharField(max_length=255, blank=True)
    client = models.ForeignKey(
        "clients.Client",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="meetings",
    )
    project = models.ForeignKey(
        "clients.Project",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="meetings",
    )
    notes = models.TextField(blank=True)
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.SCHEDULED
    )
    is_confidential = models.BooleanField(default=False)
    original_date = models.DateField(null=True, blank=True)
    reschedule_reason = models.TextField(blank=True)
    rescheduled_at = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_meetings",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = MeetingQuerySet.as_manager()

    class Meta:
        ordering = ["-meeting_date", "-start_time"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.title} ({self.meeting_date})"


class MeetingParticipant(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        ACCEPTED = "accepted", _("Accepted")
        REJECTED = "rejected", _("Rejected")

    meeting = models.ForeignKey(
        Meeting, on_delete=models.CASCADE, related_name="participants"
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="meeting_participations",
    )
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    rejection_reason = models.TextField(blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("meeting", "user")
        ordering = ["created_at"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.user_id} @ {self.meeting_id}"


class MeetingExternalParticipant(models.Model):
    meeting = models.ForeignKey(
        Meeting, on_delete=models.CASCADE, related_name="external_participants"
    )
    name = models.CharField(max_length=150)
    email = models.EmailField(blank=True)
    company = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name
