from __future__ import annotations

from typing import Any

import redis
from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone


def check_db() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def check_redis() -> dict[str, Any]:
    """Ping the broker used by the scheduled attendance and finance jobs."""
    url = getattr(settings, "CELERY_BROKER_URL", None) or getattr(
        settings, "REDIS_URL", None
    )
    if not url:
        return {"ok": False, "error": "REDIS_URL not configured"}
    try:
        client = redis.Redis.from_url(
            url,
            socket_timeout=0.5,
            socket_connect_timeout=0.5,
        )
        client.ping()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


CHECKS = {
    "db": check_db,
    "redis": check_redis,
}


def health(request):
    components = {name: check() for name, check in CHECKS.items()}
    oks = [c.get("ok", False) for c in components.values()]

    if all(oks):
        overall = "ok"
    elif any(oks):
        overall = "degraded"
    else:
        overall = "down"

    return JsonResponse(
        {
            "status": overall,
            "components": components,
            # Attendance dates are derived from this clock.
            "local_time": timezone.localtime().isoformat(),
        },
        status=200 if overall == "ok" else 503,
    )
