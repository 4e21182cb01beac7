from decimal import Decimal
from types import SimpleNamespace

import pytest

from agency_ops.reports import services


def test_validate_metrics_cleans_values():
    cleaned = services.validate_metrics(
        "instagram",
        {
            "ig_reach": "1200",
            "ig_followers": 530.0,
            "ig_impressions": "",
            "ig_profile_visits": 12.5,
        },
    )
    assert cleaned == {"ig_reach": 1200, "ig_followers": 530, "ig_profile_visits": 12.5}


@pytest.mark.parametrize(
    ("platform", "metrics", "message"),
    [
        ("myspace", {}, "Unknown platform"),
        ("instagram", {"fb_reach": 1}, "not tracked"),
        ("instagram", {"ig_reach": -1}, "negative"),
        ("instagram", {"ig_reach": "lots"}, "must be a number"),
        ("instagram", {"ig_reach": True}, "must be a number"),
        ("instagram", {"ig_reach": [1]}, "must be a number"),
    ],
)
def test_validate_metrics_rejects(platform, metrics, message):
    with pytest.raises(ValueError, match=message):
        services.validate_metrics(platform, metrics)


def test_ads_metrics_derives_missing_ratios():
    derived = services.ads_metrics(1_000_000, 200_000, 500, 20, cpc=Decimal("1500"))
    assert derived == {
        "cpm": Decimal("5000.00"),
        "cpc": Decimal("1500"),
        "cost_per_result": Decimal("50000.00"),
    }


def test_ads_metrics_zero_divisors():
    derived = services.ads_metrics(250_000, 0, 0, 0)
    assert set(derived.values()) == {Decimal("0.00")}


def _organic(account_pk, platform, metrics):
    account = SimpleNamespace(pk=account_pk, platform=platform)
    return SimpleNamespace(platform_account=account, metrics=metrics)


def _ads(client_id, name, platform, month, spend, impressions=0, clicks=0, results=0):
    return SimpleNamespace(
        client_id=client_id,
        client=SimpleNamespace(name=name),
        platform=platform,
        report_month=month,
        total_spend=Decimal(spend),
        impressions=impressions,
        clicks=clicks,
        results=results,
    )


def test_total_followers_uses_peak_per_account():
    organic = [
        _organic(1, "instagram", {"ig_followers": 100}),
        _organic(1, "instagram", {"ig_followers": 140}),
        _organic(2, "youtube", {"yt_subscribers": 60}),
        _organic(3, "google_business", {"gb_phone_calls": 9}),
        _organic(4, "tiktok", {}),
    ]
    assert services.total_followers(organic) == 200


def test_summarize_totals():
    ads = [
        _ads(1, "Kopi Nusantara", "meta", 1, "300", impressions=1000, clicks=10),
        _ads(1, "Kopi Nusantara", "google_ads", 2, "200", results=4),
        _ads(2, "Batik Lestari", "meta", 2, "100"),
    ]
    summary = services.summarize([_organic(1, "instagram", {"ig_followers": 10})], ads)

    assert summary["total_spend"] == Decimal("600")
    assert summary["total_impressions"] == 1000
    assert summary["total_clicks"] == 10
    assert summary["total_results"] == 4
    assert summary["total_followers"] == 10
    assert summary["ads_reports"] == 3
    assert summary["monthly_spend"][1] == {"month": 2, "spend": Decimal("300")}
    assert summary["spend_by_platform"] == [
        {"platform": "meta", "spend": Decimal("400")},
        {"platform": "google_ads", "spend": Decimal("200")},
    ]
    assert [row["name"] for row in summary["spend_by_client"]] == [
        "Kopi Nusantara",
        "Batik Lestari",
    ]
