import pytest
from django.core import mail
from django.urls import reverse
from rest_framework import status

from agency_ops.audit.models import AuditLog
from agency_ops.meetings.models import Meeting
from agency_ops.notifications.models import EmailLog
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def _payload(**overrides):
    data = {
        "title": "Brand review",
        "meeting_date": "2030-01-15",
        "start_time": "10:00",
        "end_time": "11:00",
        "mode": "online",
        "meeting_link": "https://meet.example.com/brand",
    }
    data.update(overrides)
    return data


def test_create_meeting_sends_invitations(api_client, django_capture_on_commit_callbacks):
    organizer = UserFactory()
    guest = UserFactory(email="guest@example.com")
    api_client.force_authenticate(organizer)

    with django_capture_on_commit_callbacks(execute=True):
        res = api_client.post(
            reverse("api_v1:meetings-list"),
            _payload(participant_ids=[guest.pk]),
            format="json",
        )

    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert res.data["created_by"] == organizer.pk
    assert [p["user"] for p in res.data["participants"]] == [guest.pk]
    assert len(mail.outbox) == 1
    assert mail.outbox[0].to == ["guest@example.com"]
    assert EmailLog.objects.filter(
        recipient_email="guest@example.com", status=EmailLog.Status.SENT
    ).exists()


def test_online_meeting_needs_link(api_client, user):
    api_client.force_authenticate(user)
    res = api_client.post(
        reverse("api_v1:meetings-list"), _payload(meeting_link=""), format="json"
    )
    assert res.status_code == status.HTTP_400_BAD_REQUEST


def test_confidential_meeting_hidden_from_outsiders(api_client):
    organizer = UserFactory()
    api_client.force_authenticate(organizer)
    res = api_client.post(
        reverse("api_v1:meetings-list"),
        _payload(is_confidential=True),
        format="json",
    )
    meeting_id = res.data["id"]

    api_client.force_authenticate(UserFactory())
    listed = api_client.get(reverse("api_v1:meetings-list"))
    assert meeting_id not in {row["id"] for row in listed.data}

    api_client.force_authenticate(organizer)
    share = api_client.post(
        reverse("api_v1:meetings-share", kwargs={"pk": meeting_id})
    )
    assert share.status_code == status.HTTP_400_BAD_REQUEST


def test_only_organizer_can_reschedule(api_client):
    organizer = UserFactory()
    guest = UserFactory()
    api_client.force_authenticate(organizer)
    meeting_id = api_client.post(
        reverse("api_v1:meetings-list"),
        _payload(participant_ids=[guest.pk]),
        format="json",
    ).data["id"]
    url = reverse("api_v1:meetings-reschedule", kwargs={"pk": meeting_id})
    body = {
        "meeting_date": "2030-01-20",
        "start_time": "13:00",
        "end_time": "14:00",
        "reason": "Client holiday",
    }

    api_client.force_authenticate(guest)
    assert api_client.post(url, body, format="json").status_code == 403

    api_client.force_authenticate(organizer)
    res = api_client.post(url, body, format="json")
    assert res.status_code == status.HTTP_200_OK
    assert res.data["original_date"] == "2030-01-15"
    assert res.data["meeting_date"] == "2030-01-20"
    assert AuditLog.objects.filter(
        action="meeting_rescheduled", record_id=meeting_id
    ).exists()


def test_respond_requires_invitation(api_client):
    organizer = UserFactory()
    api_client.force_authenticate(organizer)
    meeting_id = api_client.post(
        reverse("api_v1:meetings-list"), _payload(), format="json"
    ).data["id"]

    api_client.force_authenticate(UserFactory())
    res = api_client.post(
        reverse("api_v1:meetings-respond", kwargs={"pk": meeting_id}),
        {"accept": True},
        format="json",
    )
    assert res.status_code == status.HTTP_403_FORBIDDEN
    assert Meeting.objects.get(pk=meeting_id).participants.count() == 0


def test_organizer_shares_and_revokes_link(api_client):
    organizer = UserFactory()
    api_client.force_authenticate(organizer)
    meeting_id = api_client.post(
        reverse("api_v1:meetings-list"), _payload(), format="json"
    ).data["id"]
    url = reverse("api_v1:meetings-share", kwargs={"pk": meeting_id})

    token = api_client.post(url).data["share_token"]
    assert Meeting.objects.get(pk=meeting_id).share_token == token

    api_client.force_authenticate(UserFactory())
    assert api_client.delete(url).status_code == status.HTTP_403_FORBIDDEN

    api_client.force_authenticate(organizer)
    assert api_client.delete(url).status_code == status.HTTP_204_NO_CONTENT
    assert Meeting.objects.get(pk=meeting_id).share_token is None
    shared = api_client.get(reverse("api_v1:shared-meeting"), {"token": token})
    assert shared.status_code == status.HTTP_404_NOT_FOUND
