"""Report rules: metric validation, derived ads costs, locking and the analytics summary."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP
from decimal import Decimal
from numbers import Number
from typing import TYPE_CHECKING

from django.db import transaction
from django.utils import timezone

from agency_ops.audit.utils import log_action
from agency_ops.reports.constants import FOLLOWER_METRIC
from agency_ops.reports.constants import PLATFORM_METRICS
from agency_ops.reports.constants import TOP_CLIENTS

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class ReportLockedError(Exception):
    """The report is locked and cannot be changed."""


def validate_metrics(platform: str, metrics: dict) -> dict:
    allowed = PLATFORM_METRICS.get(platform)
    if allowed is None:
        msg = f"Unknown platform: {platform}"
        raise ValueError(msg)
    unknown = sorted(set(metrics) - set(allowed))
    if unknown:
        msg = f"Metrics not tracked for {platform}: {', '.join(unknown)}"
        raise ValueError(msg)
    cleaned = {}
    for key, value in metrics.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool) or not isinstance(value, Number | str):
            msg = f"Metric {key} must be a number"
            raise ValueError(msg)
        try:
            number = float(value)
        except ValueError:
            msg = f"Metric {key} must be a number"
            raise ValueError(msg) from None
        if number < 0:
            msg = f"Metric {key} cannot be negative"
            raise ValueError(msg)
        cleaned[key] = int(number) if number.is_integer() else number
    return cleaned


def _ratio(spend: Decimal, divisor, scale: int = 1) -> Decimal:
    if not divisor:
        return Decimal("0.00")
    return (spend / Decimal(divisor) * scale).quantize(CENTS, rounding=ROUND_HALF_UP)


def ads_metrics(  # noqa: PLR0913
    total_spend,
    impressions,
    clicks,
    results,
    *,
    cpm=None,
    cpc=None,
    cost_per_result=None,
) -> dict[str, Decimal]:
    """Cost ratios, keeping any value that was entered explicitly."""
    spend = Decimal(str(total_spend or 0))
    return {
        "cpm": Decimal(str(cpm)) if cpm is not None else _ratio(spend, impressions, 1000),
        "cpc": Decimal(str(cpc)) if cpc is not None else _ratio(spend, clicks),
        "cost_per_result": (
            Decimal(str(cost_per_result))
            if cost_per_result is not None
            else _ratio(spend, results)
        ),
    }


def ensure_unlocked(report) -> None:
    if report.is_locked:
        msg = "This report is locked. Unlock it before making changes."
        raise ReportLockedError(msg)


@transaction.atomic
def lock_report(report, *, user, request=None):
    report.is_locked = True
    report.locked_at = timezone.now()
    report.locked_by = user
    report.save(update_fields=["is_locked", "locked_at", "locked_by", "updated_at"])
    log_action(
        "report_locked",
        actor=user,
        request=request,
        model_name=f"reports.{type(report).__name__}",
        record_id=report.pk,
    )
    return report


@transaction.atomic
def unlock_report(report, *, user, request=None):
    report.is_locked = False
    report.locked_at = None
    report.locked_by = None
    report.save(update_fields=["is_locked", "locked_at", "locked_by", "updated_at"])
    log_action(
        "report_unlocked",
        actor=user,
        request=request,
        model_name=f"reports.{type(report).__name__}",
        record_id=report.pk,
    )
    return report


def total_followers(organic: Iterable) -> int | float:
    """Sum over accounts of the highest follower count reported for each."""
    best: dict = {}
    for report in organic:
        account = report.platform_account
        key = FOLLOWER_METRIC.get(account.platform)
        value = (report.metrics or {}).get(key) if key else None
        if not value:
            continue
        best[account.pk] = max(best.get(account.pk, 0), value)
    return sum(best.values())


def summarize(organic: Iterable, ads: Iterable) -> dict:
    """Analytics totals for a set of organic and ads reports.

    Ads rows need ``client`` loaded for the per-client ranking.
    """
    organic = list(organic)
    ads = list(ads)
    zero = Decimal("0")
    monthly = dict.fromkeys(range(1, 13), zero)
    by_platform: dict[str, Decimal] = {}
    by_client: dict[int, dict] = {}
    for r in ads:
        spend = Decimal(str(r.total_spend or 0))
        monthly[r.report_month] = monthly.get(r.report_month, zero) + spend
        by_platform[r.platform] = by_platform.get(r.platform, zero) + spend
        entry = by_client.setdefault(
            r.client_id,
            {"client": r.client_id, "name": r.client.name, "spend": zero},
        )
        entry["spend"] += spend

    return {
        "total_spend": sum((Decimal(str(r.total_spend or 0)) for r in ads), zero),
        "total_impressions": sum(r.impressions for r in ads),
        "total_clicks": sum(r.clicks for r in ads),
        "total_results": sum(r.results for r in ads),
        "total_followers": total_followers(organic),
        "organic_reports": len(organic),
        "ads_reports": len(ads),
        "monthly_spend": [{"month": m, "spend": monthly[m]} for m in range(1, 13)],
        "spend_by_platform": [
            {"platform": p, "spend": s} for p, s in by_platform.items()
        ],
        "spend_by_client": sorted(
            by_client.values(), key=lambda e: e["spend"], reverse=True
        )[:TOP_CLIENTS],
    }
