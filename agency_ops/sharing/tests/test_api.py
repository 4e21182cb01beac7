from datetime import time

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from agency_ops.clients.models import TaskComment
from agency_ops.clients.tests.factories import ClientFactory
from agency_ops.clients.tests.factories import ProjectFactory
from agency_ops.clients.tests.factories import TaskFactory
from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingParticipant
from agency_ops.reports.models import MonthlyAdsReport
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def _meeting(**kwargs):
    fields = {
        "title": "Shoot planning",
        "meeting_date": timezone.localdate(),
        "start_time": time(9),
        "end_time": time(10),
        "meeting_link": "https://meet.example.com/shoot",
    }
    fields.update(kwargs)
    return Meeting.objects.create(**fields)


@pytest.mark.parametrize(
    "name",
    ["api_v1:shared-meeting", "api_v1:shared-task", "api_v1:shared-project"],
)
def test_token_required(api_client, name):
    res = api_client.get(reverse(name))
    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert res.data == {"error": "Token is required"}

    missing = api_client.get(reverse(name), {"token": "nope"})
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert "error" in missing.data


def test_shared_meeting(api_client):
    meeting = _meeting()
    MeetingParticipant.objects.create(
        meeting=meeting, user=UserFactory(name="Dewi Lestari"), status="accepted"
    )
    meeting.external_participants.create(name="Tom", company="ACME")
    token = meeting.issue_share_token()

    res = api_client.post(reverse("api_v1:shared-meeting"), {"token": token})
    assert res.status_code == status.HTTP_200_OK
    data = res.data["meeting"]
    assert data["participants"] == [{"name": "Dewi Lestari", "status": "accepted"}]
    assert data["external_participants"] == [{"name": "Tom", "company": "ACME"}]
    assert data["client_name"] is None


def test_confidential_meeting_is_never_shared(api_client):
    meeting = _meeting(is_confidential=True)
    meeting.share_token = "leaked-token"
    meeting.save()
    res = api_client.get(reverse("api_v1:shared-meeting"), {"token": "leaked-token"})
    assert res.status_code == status.HTTP_404_NOT_FOUND


def test_public_comment_flow(api_client):
    staff = UserFactory(name="Rina Putri")
    task = TaskFactory()
    TaskComment.objects.create(task=task, author=staff, content="Draft ready")
    token = task.issue_share_token()

    bad = api_client.post(
        reverse("api_v1:shared-task-comments"),
        {"token": token, "name": "  ", "content": "Looks good"},
        format="json",
    )
    assert bad.status_code == status.HTTP_400_BAD_REQUEST

    res = api_client.post(
        reverse("api_v1:shared-task-comments"),
        {"token": token, "name": " Pak Budi ", "content": "Looks good"},
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert res.data["comment"]["name"] == "Pak Budi"
    assert res.data["comment"]["type"] == "public"

    shared = api_client.get(reverse("api_v1:shared-task"), {"token": token})
    assert [(c["name"], c["type"]) for c in shared.data["comments"]] == [
        ("Rina Putri", "internal"),
        ("Pak Budi", "public"),
    ]


def test_comment_on_unknown_task(api_client):
    res = api_client.post(
        reverse("api_v1:shared-task-comments"),
        {"token": "missing", "name": "A", "content": "B"},
        format="json",
    )
    assert res.status_code == status.HTTP_404_NOT_FOUND
    assert res.data == {"error": "Task not found"}


def test_comment_token_from_query_string(api_client):
    task = TaskFactory()
    token = task.issue_share_token()
    url = reverse("api_v1:shared-task-comments")

    res = api_client.post(
        f"{url}?token={token}", {"name": "Dewi", "content": "Approved"}, format="json"
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert TaskComment.objects.get(task=task).is_public

    missing = api_client.post(
        f"{url}?token=unknown", {"name": "Dewi", "content": "Approved"}, format="json"
    )
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.data == {"error": "Task not found"}

    no_token = api_client.post(url, {"name": "Dewi", "content": "Hi"}, format="json")
    assert no_token.status_code == status.HTTP_400_BAD_REQUEST
    assert no_token.data == {"error": "Token is required"}


def test_shared_project_team(api_client):
    lead = UserFactory(name="Zaki")
    project = ProjectFactory(lead=lead)
    task = TaskFactory(project=project, assigned_to=UserFactory(name="Ani"))
    task.assignees.add(UserFactory(name="Made"))
    token = project.issue_share_token()

    res = api_client.get(reverse("api_v1:shared-project"), {"token": token})
    assert res.status_code == status.HTTP_200_OK
    assert res.data["team"] == ["Ani", "Made", "Zaki"]
    assert len(res.data["tasks"]) == 1


def test_client_dashboard(api_client):
    client = ClientFactory(dashboard_slug="kopi-nusantara", name="Kopi Nusantara")
    project = ProjectFactory(client=client)
    TaskFactory(project=project, status="completed", deadline="2024-03-05")
    TaskFactory(project=project, status="pending", deadline="2024-03-01")
    TaskFactory(project=project, status="pending", deadline="2024-04-20")
    TaskFactory(status="pending")

    res = api_client.get(
        reverse("api_v1:shared-client-dashboard"),
        {
            "slug": "kopi-nusantara",
            "startDate": "2024-03-01",
            "endDate": "2024-03-31",
            "status": "all",
        },
    )
    assert res.status_code == status.HTTP_200_OK
    assert res.data["client"]["name"] == "Kopi Nusantara"
    assert [t["status"] for t in res.data["tasks"]] == ["pending", "completed"]
    assert res.data["analytics"]["total_tasks"] == 2
    assert res.data["analytics"]["overdue_tasks"] == 1
    assert res.data["projects"][0]["total_tasks"] == 2

    bad = api_client.get(
        reverse("api_v1:shared-client-dashboard"),
        {"slug": "kopi-nusantara", "startDate": "2024-13-01"},
    )
    assert bad.status_code == status.HTTP_400_BAD_REQUEST

    missing = api_client.get(reverse("api_v1:shared-client-dashboard"), {"slug": "x"})
    assert missing.status_code == status.HTTP_404_NOT_FOUND


def test_client_reports_by_year(api_client):
    client = ClientFactory(dashboard_slug="batik")
    for month in (5, 2):
        MonthlyAdsReport.objects.create(
            client=client, platform="meta", report_month=month, report_year=2024
        )
    MonthlyAdsReport.objects.create(
        client=client, platform="meta", report_month=1, report_year=2023
    )

    res = api_client.get(
        reverse("api_v1:shared-client-reports"), {"slug": "batik", "year": "2024"}
    )
    assert res.status_code == status.HTTP_200_OK
    assert [r["report_month"] for r in res.data["ads_reports"]] == [2, 5]

    bad = api_client.get(
        reverse("api_v1:shared-client-reports"), {"slug": "batik", "year": "soon"}
    )
    assert bad.status_code == status.HTTP_400_BAD_REQUEST
