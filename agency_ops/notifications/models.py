from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Notification(models.Model):
    """In-app notification shown in the recipient's bell menu."""

    class Type(models.TextChoices):
        TASK_ASSIGNMENT = "task_assignment", _("Task assignment")
        TASK_UPDATED = "task_updated", _("Task updated")
        TASK_COMPLETED = "task_completed", _("Task completed")
        TASK_OVERDUE = "task_overdue", _("Task overdue")
        PROJECT_ASSIGNMENT = "project_assignment", _("Project assignment")
        MEETING_INVITATION = "meeting_invitation", _("Meeting invitation")
        MEETING_REMINDER = "meeting_reminder", _("Meeting reminder")
        MEETING_RESPONSE = "meeting_response", _("Meeting response")
        MEETING_RESCHEDULED = "meeting_rescheduled", _("Meeting rescheduled")
        OTHER = "other", _("Other")

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="notifications"
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    notification_type = models.CharField(
        max_length=50, choices=Type.choices, default=Type.OTHER
    )
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    related_link = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):  # pragma: no cover - trivial
        return f"{self.title} - {self.recipient}"


class EmailLog(models.Model):
    """One row per attempted outgoing e-mail, successful or not."""

    class Status(models.TextChoices):
        SENT = "sent", _("Sent")
        FAILED = "failed", _("Failed")

    recipient_email = models.CharField(max_length=254)
    recipient_name = models.CharField(max_length=255, blank=True)
    subject = models.CharField(max_length=255)
    body = models.TextField(blank=True)
    notification_type = models.CharField(max_length=50, default="general")
    related_id = models.CharField(max_length=64, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices)
    error_message = models.TextField(blank=True)
    sent_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):  # pragma: no cover - trivial
        return f"EmailLog({self.recipient_email}, {self.status})"
