import pytest
from django.urls import reverse
from rest_framework import status

from agency_ops.audit.models import AuditLog
from agency_ops.clients.tests.factories import ClientFactory
from agency_ops.reports.models import MonthlyAdsReport
from agency_ops.reports.models import PlatformAccount
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


@pytest.fixture
def socmed():
    return UserFactory(roles=["socmed_admin"])


def test_ads_report_derives_costs(api_client, socmed):
    client = ClientFactory()
    api_client.force_authenticate(socmed)
    res = api_client.post(
        reverse("api_v1:report-ads-list"),
        {
            "client": client.pk,
            "platform": "meta",
            "report_month": 3,
            "report_year": 2024,
            "total_spend": "500000",
            "impressions": 100000,
            "clicks": 250,
            "results": 10,
        },
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert res.data["cpm"] == "5000.00"
    assert res.data["cpc"] == "2000.00"
    assert res.data["cost_per_result"] == "50000.00"
    assert res.data["created_by"] == socmed.pk


def test_organic_metrics_are_validated(api_client, socmed):
    account = PlatformAccount.objects.create(
        client=ClientFactory(), platform="tiktok", account_name="@brand"
    )
    api_client.force_authenticate(socmed)
    res = api_client.post(
        reverse("api_v1:report-organic-list"),
        {
            "platform_account": account.pk,
            "report_month": 1,
            "report_year": 2024,
            "metrics": {"ig_reach": 10},
        },
        format="json",
    )
    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert "metrics" in res.data


def test_locked_report_rejects_changes(api_client, socmed):
    report = MonthlyAdsReport.objects.create(
        client=ClientFactory(), platform="meta", report_month=5, report_year=2024
    )
    api_client.force_authenticate(socmed)

    lock = api_client.post(reverse("api_v1:report-ads-lock", kwargs={"pk": report.pk}))
    assert lock.status_code == status.HTTP_200_OK
    assert lock.data["is_locked"] is True

    detail = reverse("api_v1:report-ads-detail", kwargs={"pk": report.pk})
    res = api_client.patch(detail, {"clicks": 5}, format="json")
    assert res.status_code == status.HTTP_409_CONFLICT
    assert api_client.delete(detail).status_code == status.HTTP_409_CONFLICT

    unlock_url = reverse("api_v1:report-ads-unlock", kwargs={"pk": report.pk})
    assert api_client.post(unlock_url).status_code == status.HTTP_403_FORBIDDEN

    api_client.force_authenticate(UserFactory(roles=["super_admin"]))
    assert api_client.post(unlock_url).status_code == status.HTTP_200_OK
    report.refresh_from_db()
    assert not report.is_locked
    assert list(
        AuditLog.objects.filter(record_id=report.pk)
        .order_by("created_at")
        .values_list("action", flat=True)
    ) == ["report_locked", "report_unlocked"]


def test_reports_readable_by_everyone_but_writable_by_report_roles(api_client, user):
    api_client.force_authenticate(user)
    assert api_client.get(reverse("api_v1:report-ads-list")).status_code == 200
    res = api_client.post(
        reverse("api_v1:report-account-list"),
        {"client": ClientFactory().pk, "platform": "instagram", "account_name": "x"},
        format="json",
    )
    assert res.status_code == status.HTTP_403_FORBIDDEN


def test_analytics_summary(api_client, socmed):
    client = ClientFactory(name="Kopi Nusantara")
    MonthlyAdsReport.objects.create(
        client=client,
        platform="meta",
        report_month=2,
        report_year=2024,
        total_spend="1000",
    )
    api_client.force_authenticate(socmed)
    res = api_client.get(reverse("api_v1:report-analytics"), {"year": 2024})
    assert res.status_code == status.HTTP_200_OK
    assert res.data["year"] == 2024
    assert res.data["spend_by_client"][0]["name"] == "Kopi Nusantara"

    bad = api_client.get(reverse("api_v1:report-analytics"), {"year": "last"})
    assert bad.status_code == status.HTTP_400_BAD_REQUEST


def test_report_writes_are_audited(api_client, socmed):
    api_client.force_authenticate(socmed)
    created = api_client.post(
        reverse("api_v1:report-ads-list"),
        {
            "client": ClientFactory().pk,
            "platform": "meta",
            "report_month": 6,
            "report_year": 2024,
            "total_spend": "300000",
            "clicks": 100,
        },
        format="json",
    )
    assert created.status_code == status.HTTP_201_CREATED, created.data
    report_id = created.data["id"]
    detail = reverse("api_v1:report-ads-detail", kwargs={"pk": report_id})

    assert api_client.patch(detail, {"clicks": 150}, format="json").status_code == 200
    assert api_client.delete(detail).status_code == status.HTTP_204_NO_CONTENT

    rows = AuditLog.objects.filter(
        model_name="reports.MonthlyAdsReport", record_id=report_id
    )
    by_action = {row.action: row for row in rows}
    assert set(by_action) == {"report_created", "report_updated", "report_deleted"}
    assert by_action["report_created"].actor == socmed
    assert by_action["report_created"].after["clicks"] == 100
    updated = by_action["report_updated"]
    assert (updated.before["clicks"], updated.after["clicks"]) == (100, 150)
    assert "clicks" in updated.changed_fields
    assert by_action["report_deleted"].before["total_spend"] == "300000.00"


def test_platform_account_creation_is_audited(api_client, socmed):
    api_client.force_authenticate(socmed)
    res = api_client.post(
        reverse("api_v1:report-account-list"),
        {"client": ClientFactory().pk, "platform": "instagram", "account_name": "@kopi"},
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    row = AuditLog.objects.get(action="platform_account_created")
    assert row.model_name == "reports.PlatformAccount"
    assert row.after["account_name"] == "@kopi"
