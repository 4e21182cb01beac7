from datetime import date
from datetime import time
from datetime import timedelta

import pytest

from agency_ops.meetings import services
from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingParticipant
from agency_ops.notifications.models import Notification
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db

DAY = date(2024, 7, 1)


def _create(organizer, **overrides):
    fields = {
        "title": "Kickoff",
        "meeting_date": DAY,
        "start_time": time(10),
        "end_time": time(11),
        "mode": Meeting.Mode.ONLINE,
        "meeting_link": "https://meet.example.com/kickoff",
        "location": "Room 2",
    }
    fields.update(overrides)
    return services.create_meeting(created_by=organizer, **fields)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"mode": "online", "meeting_link": " "}, "meeting link"),
        ({"mode": "offline", "location": ""}, "location"),
        ({"start_time": time(11), "end_time": time(10)}, "End time"),
    ],
)
def test_validate_schedule_rejects(kwargs, message):
    params = {
        "mode": "online",
        "meeting_link": "https://meet.example.com",
        "location": "HQ",
        "start_time": time(10),
        "end_time": time(11),
    }
    params.update(kwargs)
    with pytest.raises(services.MeetingError, match=message):
        services.validate_schedule(**params)


def test_create_meeting_invites_participants():
    organizer = UserFactory()
    guest = UserFactory()
    meeting = services.create_meeting(
        created_by=organizer,
        participants=[guest, guest, None],
        external_participants=[{"name": " Dana ", "company": "ACME"}, {"name": ""}],
        title="Kickoff",
        meeting_date=DAY,
        start_time=time(10),
        end_time=time(11),
        mode=Meeting.Mode.ONLINE,
        meeting_link="https://meet.example.com/kickoff",
        location="Room 2",
    )
    assert meeting.location == ""
    assert list(meeting.participants.values_list("user", flat=True)) == [guest.pk]
    assert list(meeting.external_participants.values_list("name", flat=True)) == [
        "Dana"
    ]
    invite = Notification.objects.get(recipient=guest)
    assert invite.notification_type == Notification.Type.MEETING_INVITATION


def test_offline_meeting_drops_link():
    meeting = _create(UserFactory(), mode=Meeting.Mode.OFFLINE)
    assert meeting.meeting_link == ""
    assert meeting.location == "Room 2"


def test_decline_needs_reason_and_notifies_organizer():
    organizer = UserFactory()
    guest = UserFactory()
    meeting = _create(organizer)
    participant = MeetingParticipant.objects.create(meeting=meeting, user=guest)

    with pytest.raises(services.MeetingError, match="reason"):
        services.respond(participant, accept=False, reason="  ")

    services.respond(participant, accept=False, reason="Out sick")
    participant.refresh_from_db()
    assert participant.status == MeetingParticipant.Status.REJECTED
    assert participant.rejection_reason == "Out sick"
    assert Notification.objects.filter(
        recipient=organizer, notification_type=Notification.Type.MEETING_RESPONSE
    ).exists()


def test_reschedule_resets_responses_and_keeps_first_date():
    organizer = UserFactory()
    guest = UserFactory()
    meeting = _create(organizer, participants=[guest])
    participant = meeting.participants.get()
    services.respond(participant, accept=True)

    services.reschedule(
        meeting,
        new_date=DAY + timedelta(days=2),
        start_time=time(14),
        end_time=time(15),
        reason="Client asked",
    )
    services.reschedule(
        meeting,
        new_date=DAY + timedelta(days=4),
        start_time=time(14),
        end_time=time(15),
        reason="Again",
    )
    meeting.refresh_from_db()
    participant.refresh_from_db()
    assert meeting.original_date == DAY
    assert meeting.meeting_date == DAY + timedelta(days=4)
    assert participant.status == MeetingParticipant.Status.PENDING
    assert participant.responded_at is None


def test_reschedule_requires_reason():
    meeting = _create(UserFactory())
    with pytest.raises(services.MeetingError, match="reason"):
        services.reschedule(
            meeting,
            new_date=DAY,
            start_time=time(10),
            end_time=time(11),
            reason="",
        )


@pytest.mark.parametrize(
    ("meeting_date", "status", "expected"),
    [
        (DAY, "scheduled", "today"),
        (DAY + timedelta(days=1), "scheduled", "scheduled"),
        (DAY - timedelta(days=1), "scheduled", "past"),
        (DAY - timedelta(days=1), "completed", "completed"),
        (DAY, "cancelled", "cancelled"),
    ],
)
def test_display_status(meeting_date, status, expected):
    meeting = Meeting(meeting_date=meeting_date, status=status)
    assert services.display_status(meeting, today=DAY) == expected
