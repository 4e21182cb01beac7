"""Meeting scheduling rules: creation, invitations, responses, rescheduling."""

import logging
from datetime import date

from django.db import transaction
from django.utils import timezone

from agency_ops.meetings.models import Meeting
from agency_ops.meetings.models import MeetingExternalParticipant
from agency_ops.meetings.models import MeetingParticipant
from agency_ops.notifications.models import Notification
from agency_ops.notifications.services import notify
from agency_ops.notifications.services import queue_email

logger = logging.getLogger(__name__)


class MeetingError(ValueError):
    """Raised when meeting data or a participant response is not acceptable."""


def validate_schedule(*, mode, meeting_link, location, start_time, end_time):
    if mode == Meeting.Mode.ONLINE and not (meeting_link or "").strip():
        msg = "An online meeting needs a meeting link."
        raise MeetingError(msg)
    if mode == Meeting.Mode.OFFLINE and not (location or "").strip():
        msg = "An offline meeting needs a location."
        raise MeetingError(msg)
    if start_time and end_time and end_time <= start_time:
        msg = "End time must be after start time."
        raise MeetingError(msg)


def _email_data(meeting: Meeting, message: str) -> dict:
    return {
        "title": meeting.title,
        "message": message,
        "meeting_date": meeting.meeting_date.isoformat(),
        "meeting_time": (
            f"{meeting.start_time:%H:%M} - {meeting.end_time:%H:%M}"
        ),
        "location": meeting.location,
        "meeting_link": meeting.meeting_link,
        "client_name": meeting.client.name if meeting.client_id else "",
        "project_name": meeting.project.title if meeting.project_id else "",
        "link": "/meetings",
    }


def _invite(meeting: Meeting, users, *, notification_type, title, message) -> None:
    notify(
        users,
        title=title,
        message=message,
        notification_type=notification_type,
        related_link="/meetings",
    )
    data = _email_data(meeting, message)
    for user in users:
        queue_email(user, notification_type, data, related_id=meeting.pk)


@transaction.atomic
def create_meeting(*, created_by, participants=(), external_participants=(), **fields):
    """Create a meeting with its invitees.

    Only the field matching ``mode`` is kept: online meetings drop the
    location and offline ones drop the link.
    """
    validate_schedule(
        mode=fields.get("mode", Meeting.Mode.ONLINE),
        meeting_link=fields.get("meeting_link", ""),
        location=fields.get("location", ""),
        start_time=fields.get("start_time"),
        end_time=fields.get("end_time"),
    )
    if fields.get("mode", Meeting.Mode.ONLINE) == Meeting.Mode.ONLINE:
        fields["location"] = ""
    else:
        fields["meeting_link"] = ""

    meeting = Meeting.objects.create(created_by=created_by, **fields)
    users = []
    for user in participants:
        if user is None or any(u.pk == user.pk for u in users):
            continue
        MeetingParticipant.objects.create(meeting=meeting, user=user)
        users.append(user)
    for guest in external_participants:
        name = (guest.get("name") or "").strip()
        if not name:
            continue
        MeetingExternalParticipant.objects.create(
            meeting=meeting,
            name=name,
            email=guest.get("email") or "",
            company=guest.get("company") or "",
        )

    if users:
        _invite(
            meeting,
            users,
            notification_type=Notification.Type.MEETING_INVITATION,
            title="Meeting invitation",
            message=f"You are invited to '{meeting.title}' on {meeting.meeting_date}.",
        )
    logger.info("meeting %s created with %s participant(s)", meeting.pk, len(users))
    return meeting


@transaction.atomic
def respond(participant: MeetingParticipant, *, accept: bool, reason: str = ""):
    reason = (reason or "").strip()
    if not accept and not reason:
        msg = "A reason is required to decline a meeting."
        raise MeetingError(msg)
    participant.status = (
        MeetingParticipant.Status.ACCEPTED if accept else MeetingParticipant.Status.REJECTED
    )
    participant.rejection_reason = "" if accept else reason
    participant.responded_at = timezone.now()
    participant.save(update_fields=["status", "rejection_reason", "responded_at"])

    meeting = participant.meeting
    if meeting.created_by_id and meeting.created_by_id != participant.user_id:
        verb = "accepted" if accept else "declined"
        notify(
            [meeting.created_by],
            title="Meeting response",
            message=f"{participant.user.display_name} {verb} '{meeting.title}'.",
            notification_type=Notification.Type.MEETING_RESPONSE,
            related_link="/meetings",
        )
    return participant


@transaction.atomic
def reschedule(  # noqa: PLR0913
    meeting: Meeting,
    *,
    new_date: date,
    start_time,
    end_time,
    reason: str,
):
    """Move a meeting; every internal participant has to answer again."""
    reason = (reason or "").strip()
    if not reason:
        msg = "A reason is required to reschedule a meeting."
        raise MeetingError(msg)
    validate_schedule(
        mode=meeting.mode,
        meeting_link=meeting.meeting_link,
        location=meeting.location,
        start_time=start_time,
        end_time=end_time,
    )
    if meeting.original_date is None:
        meeting.original_date = meeting.meeting_date
    meeting.meeting_date = new_date
    meeting.start_time = start_time
    meeting.end_time = end_time
    meeting.reschedule_reason = reason
    meeting.rescheduled_at = timezone.now()
    meeting.save()

    meeting.participants.update(
        status=MeetingParticipant.Status.PENDING,
        rejection_reason="",
        responded_at=None,
    )
    users = [p.user for p in meeting.participants.select_related("user")]
    if users:
        _invite(
            meeting,
            users,
            notification_type=Notification.Type.MEETING_RESCHEDULED,
            title="Meeting rescheduled",
            message=(
                f"'{meeting.title}' moved to {new_date}. Reason: {reason}"
            ),
        )
    return meeting


def display_status(meeting: Meeting, today: date | None = None) -> str:
    today = today or timezone.localdate()
    if meeting.status in (Meeting.Status.CANCELLED, Meeting.Status.COMPLETED):
        return meeting.status
    if meeting.meeting_date == today:
        return "today"
    if meeting.meeting_date > today:
        return "scheduled"
    return "past"
