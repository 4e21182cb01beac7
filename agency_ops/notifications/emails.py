"""Plain-text notification e-mails, recorded in ``EmailLog``.

Every send goes through :func:`send_notification_email` so that both
successful and failed deliveries leave a trace.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.mail import send_mail
from django.utils import timezone

from agency_ops.notifications.models import EmailLog

logger = logging.getLogger(__name__)

SUBJECTS = {
    "task_assignment": "Hi {first_name}, you have a new task",
    "task_updated": "Hi {first_name}, one of your tasks was updated",
    "task_completed": "Hi {first_name}, a task was completed",
    "task_overdue": "Hi {first_name}, a task of yours is overdue",
    "project_assignment": "Hi {first_name}, you joined a new project",
    "meeting_invitation": "Hi {first_name}, you are invited to a meeting",
    "meeting_reminder": "Hi {first_name}, meeting reminder",
    "meeting_rescheduled": "Hi {first_name}, a meeting was rescheduled",
    "clockin_summary": "Hi {first_name}, here is your work for today",
}
DEFAULT_SUBJECT = "Hi {first_name}, there is an update for you"

LABELS = {
    "task_assignment": "Task",
    "task_updated": "Task",
    "task_completed": "Task",
    "task_overdue": "Task",
    "project_assignment": "Project",
    "meeting_invitation": "Meeting",
    "meeting_reminder": "Meeting",
    "meeting_rescheduled": "Meeting",
}

# Optional keys of ``data`` rendered as "Label: value" lines, in this order.
DETAIL_FIELDS = (
    ("title", "Title"),
    ("project_name", "Project"),
    ("client_name", "Client"),
    ("deadline", "Deadline"),
    ("meeting_date", "Date"),
    ("meeting_time", "Time"),
    ("location", "Location"),
    ("meeting_link", "Link"),
    ("description", "Details"),
)


def first_name(name: str | None) -> str:
    name = (name or "").strip()
    return name.split(" ")[0] if name else "there"


def build_subject(notification_type: str, recipient_name: str) -> str:
    template = SUBJECTS.get(notification_type, DEFAULT_SUBJECT)
    return template.format(first_name=first_name(recipient_name))


def build_body(
    recipient_name: str,
    notification_type: str,
    data: dict[str, Any] | None,
) -> str:
    data = data or {}
    label = LABELS.get(notification_type, "Notification")
    lines = [f"Hi {first_name(recipient_name)},", ""]
    if data.get("message"):
        lines.extend([str(data["message"]), ""])
    details = [
        f"{caption}: {data[key]}" for key, caption in DETAIL_FIELDS if data.get(key)
    ]
    if details:
        lines.append(f"{label} details")
        lines.extend(details)
        lines.append("")
    link = data.get("link")
    if link:
        lines.extend([f"Open: {settings.AGENCY_APP_URL.rstrip('/')}{link}", ""])
    lines.append("This is an automatic message from Agency Ops.")
    return "\n".join(lines)


def send_notification_email(  # noqa: PLR0913
    recipient_email: str,
    recipient_name: str = "",
    notification_type: str = "general",
    data: dict[str, Any] | None = None,
    *,
    related_id: str | int | None = None,
    subject: str | None = None,
    body: str | None = None,
) -> EmailLog:
    """Send one e-mail and log it.

    ``subject``/``body`` override the templates built from the notification
    type. Delivery errors are logged as a failed ``EmailLog`` and re-raised.
    """
    if not recipient_email:
        msg = "Recipient email is required for notifications"
        raise ValueError(msg)
    subject = subject or build_subject(notification_type, recipient_name)
    body = body if body is not None else build_body(
        recipient_name, notification_type, data
    )
    related = "" if related_id is None else str(related_id)
    try:
        send_mail(
            subject,
            body,
            settings.DEFAULT_FROM_EMAIL,
            [recipient_email],
            fail_silently=False,
        )
    except Exception as exc:
        logger.exception("email to %s failed (%s)", recipient_email, notification_type)
        EmailLog.objects.create(
            recipient_email=recipient_email,
            recipient_name=recipient_name,
            subject=subject,
            body=body,
            notification_type=notification_type,
            related_id=related,
            status=EmailLog.Status.FAILED,
            error_message=str(exc),
        )
        raise
    logger.info("email sent to %s (%s)", recipient_email, notification_type)
    return EmailLog.objects.create(
        recipient_email=recipient_email,
        recipient_name=recipient_name,
        subject=subject,
        body=body,
        notification_type=notification_type,
        related_id=related,
        status=EmailLog.Status.SENT,
        sent_at=timezone.now(),
    )


def send_test_email() -> EmailLog:
    recipient = settings.DEFAULT_FROM_EMAIL
    return send_notification_email(
        recipient,
        "Admin (Test)",
        "test",
        subject="Agency Ops - test e-mail delivered",
        body=(
            "E-mail delivery is configured correctly.\n\n"
            f"Sender: {recipient}\n"
            f"Sent at: {timezone.localtime():%Y-%m-%d %H:%M:%S %Z}\n"
        ),
    )
