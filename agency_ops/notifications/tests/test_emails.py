from unittest import mock

import pytest
from django.core import mail

from agency_ops.notifications import emails
from agency_ops.notifications.models import EmailLog


@pytest.mark.parametrize(
    ("name", "expected"),
    [("Rina Putri", "Rina"), ("  ", "there"), (None, "there")],
)
def test_first_name(name, expected):
    assert emails.first_name(name) == expected


def test_subject_falls_back_to_default():
    assert emails.build_subject("task_assignment", "Rina Putri") == (
        "Hi Rina, you have a new task"
    )
    assert emails.build_subject("unknown", "") == (
        "Hi there, there is an update for you"
    )


def test_body_lists_known_details_and_link(settings):
    settings.AGENCY_APP_URL = "https://app.example.com/"
    body = emails.build_body(
        "Rina Putri",
        "meeting_invitation",
        {
            "message": "You are invited.",
            "title": "Kickoff",
            "meeting_date": "2024-07-01",
            "location": "",
            "link": "/meetings",
        },
    )
    assert body.startswith("Hi Rina,\n\nYou are invited.\n")
    assert "Meeting details\nTitle: Kickoff\nDate: 2024-07-01\n" in body
    assert "Location" not in body
    assert "Open: https://app.example.com/meetings" in body


@pytest.mark.django_db
def test_send_records_sent_log():
    log = emails.send_notification_email(
        "rina@example.com", "Rina", "task_assignment", {"title": "Logo"}, related_id=7
    )
    assert log.status == EmailLog.Status.SENT
    assert log.related_id == "7"
    assert log.sent_at is not None
    assert mail.outbox[0].subject == "Hi Rina, you have a new task"


@pytest.mark.django_db
def test_send_failure_is_logged_and_raised():
    with (
        mock.patch(
            "agency_ops.notifications.emails.send_mail",
            side_effect=ConnectionError("smtp down"),
        ),
        pytest.raises(ConnectionError),
    ):
        emails.send_notification_email("rina@example.com", "Rina")
    log = EmailLog.objects.get()
    assert log.status == EmailLog.Status.FAILED
    assert log.error_message == "smtp down"


def test_send_requires_recipient():
    with pytest.raises(ValueError, match="Recipient"):
        emails.send_notification_email("")
