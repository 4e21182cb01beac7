from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import transaction

from agency_ops.notifications.models import Notification
from agency_ops.notifications.tasks import send_email_task

if TYPE_CHECKING:
    from collections.abc import Iterable


def notify(
    recipients: Iterable,
    *,
    title: str,
    message: str,
    notification_type: str = Notification.Type.OTHER,
    related_link: str = "",
) -> list[Notification]:
    """Create one in-app notification per distinct recipient."""
    seen: set[int] = set()
    created: list[Notification] = []
    with transaction.atomic():
        for user in recipients:
            if user is None or user.pk in seen:
                continue
            seen.add(user.pk)
            created.append(
                Notification.objects.create(
                    recipient=user,
                    title=title,
                    message=message,
                    notification_type=notification_type,
                    related_link=related_link,
                )
            )
    return created


def queue_email(
    user,
    notification_type: str,
    data: dict,
    *,
    related_id=None,
) -> bool:
    """Queue a notification e-mail once the current transaction commits.

    Returns False when the user has no e-mail address.
    """
    email = getattr(user, "email", "")
    if not email:
        return False
    name = getattr(user, "display_name", "") or getattr(user, "username", "")
    transaction.on_commit(
        lambda: send_email_task.delay(
            email,
            name,
            notification_type,
            data,
            None if related_id is None else str(related_id),
        )
    )
    return True
