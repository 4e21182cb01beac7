from __future__ import annotations

import logging

from django.contrib.auth import get_user_model

from .models import AuditLog

logger = logging.getLogger(__name__)


def client_ip(request) -> str:
    """Best-effort client IP: first X-Forwarded-For hop, then REMOTE_ADDR."""
    meta = getattr(request, "META", None) or {}
    xff = meta.get("HTTP_X_FORWARDED_FOR")
    if xff:
        return str(xff).split(",")[0].strip()
    return str(meta.get("REMOTE_ADDR") or "").strip()


def log_action(  # noqa: PLR0913
    action: str,
    *,
    actor: object | None = None,
    message: str = "",
    model_name: str = "",
    record_id: int | None = None,
    before: dict | list | None = None,
    after: dict | list | None = None,
    ip_address: str = "",
    request=None,
) -> AuditLog:
    if request is not None:
        actor = actor or getattr(request, "user", None)
        ip_address = ip_address or client_ip(request)
    user_model = get_user_model()
    actor_user = actor if isinstance(actor, user_model) else None
    entry = AuditLog.objects.create(
        action=action,
        actor=actor_user,
        message=message,
        model_name=model_name,
        record_id=record_id,
        before=before,
        after=after,
        ip_address=ip_address,
    )
    logger.info(
        "audit %s by %s on %s#%s",
        action,
        getattr(actor_user, "pk", "system"),
        model_name or "-",
        record_id if record_id is not None else "-",
    )
    return entry
