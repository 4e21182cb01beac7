from celery import shared_task

from agency_ops.notifications.emails import send_notification_email


@shared_task(name="notifications.send_email")
def send_email_task(
    recipient_email: str,
    recipient_name: str,
    notification_type: str,
    data: dict | None = None,
    related_id: str | None = None,
) -> int:
    """Celery wrapper around send_notification_email; returns the EmailLog id."""
    log = send_notification_email(
        recipient_email,
        recipient_name,
        notification_type,
        data,
        related_id=related_id,
    )
    return log.pk
