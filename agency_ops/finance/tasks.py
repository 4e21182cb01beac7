from datetime import date

from celery import shared_task
from django.utils import timezone

from agency_ops.finance.services import generate_recurring_entries


@shared_task(name="finance.generate_recurring_entries")
def generate_recurring_entries_task(date_iso: str | None = None) -> dict:
    today = date.fromisoformat(date_iso) if date_iso else timezone.localdate()
    results = generate_recurring_entries(today)
    generated = [r for r in results if r["status"] == "success"]
    return {
        "date": today.isoformat(),
        "generated": len(generated),
        "failed": len(results) - len(generated),
        "entries": results,
    }
