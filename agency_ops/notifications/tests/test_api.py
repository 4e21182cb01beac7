import pytest
from django.core import mail
from django.urls import reverse
from rest_framework import status

from agency_ops.notifications.models import Notification
from agency_ops.notifications.services import notify
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def test_notify_skips_duplicates_and_none(user):
    created = notify([user, None, user], title="Hello", message="World")
    assert len(created) == 1
    assert created[0].notification_type == Notification.Type.OTHER


def test_broadcast_to_role(api_client):
    designer = UserFactory(roles=["graphic_designer"])
    UserFactory(roles=["copywriter"])
    api_client.force_authenticate(UserFactory(roles=["hr"]))

    res = api_client.post(
        reverse("api_v1:notifications-list"),
        {"title": "Town hall", "message": "Friday 4pm", "role": "graphic_designer"},
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert [row["recipient"] for row in res.data] == [designer.pk]


def test_broadcast_needs_exactly_one_target(api_client):
    api_client.force_authenticate(UserFactory(roles=["hr"]))
    res = api_client.post(
        reverse("api_v1:notifications-list"),
        {"title": "x", "message": "y", "role": "hr", "recipient_ids": [1]},
        format="json",
    )
    assert res.status_code == status.HTTP_400_BAD_REQUEST


def test_broadcast_forbidden_for_regular_staff(api_client, user):
    api_client.force_authenticate(user)
    res = api_client.post(
        reverse("api_v1:notifications-list"),
        {"title": "x", "message": "y", "role": "hr"},
        format="json",
    )
    assert res.status_code == status.HTTP_403_FORBIDDEN


def test_mark_all_read_only_touches_own(api_client, user):
    other = UserFactory()
    notify([user, other], title="Hi", message="There")
    api_client.force_authenticate(user)

    res = api_client.post(reverse("api_v1:notifications-mark-all-read"))
    assert res.status_code == status.HTTP_204_NO_CONTENT
    assert not Notification.objects.filter(recipient=user, is_read=False).exists()
    assert Notification.objects.filter(recipient=other, is_read=False).exists()

    unread = api_client.get(reverse("api_v1:notifications-list"), {"unread": "1"})
    assert unread.data == []


def test_test_email_for_super_admin(api_client):
    api_client.force_authenticate(UserFactory(roles=["super_admin"]))
    res = api_client.post(reverse("api_v1:notifications-test-email"))
    assert res.status_code == status.HTTP_200_OK
    assert res.data["success"] is True
    assert len(mail.outbox) == 1
