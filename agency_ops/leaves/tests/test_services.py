from datetime import date
from datetime import datetime
from datetime import timezone as dt_timezone

import pytest
from django.core.exceptions import ValidationError

from agency_ops.leaves.models import LeaveRequest
from agency_ops.leaves.services import LeaveError
from agency_ops.leaves.services import approve_leave
from agency_ops.leaves.services import reject_leave
from agency_ops.leaves.tests.factories import LeaveRequestFactory
from agency_ops.notifications.models import Notification
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db

NOW = datetime(2024, 6, 20, 9, 0, tzinfo=dt_timezone.utc)


def test_end_before_start_is_invalid():
    leave = LeaveRequestFactory.build(
        start_date=date(2024, 7, 3), end_date=date(2024, 7, 1)
    )
    with pytest.raises(ValidationError):
        leave.clean()


def test_days_counts_both_ends():
    assert LeaveRequestFactory.build().days == 3


def test_approve_records_decision_and_notifies():
    hr = UserFactory(roles=["hr"])
    leave = LeaveRequestFactory()

    approve_leave(leave, hr, now=NOW)

    leave.refresh_from_db()
    assert leave.status == LeaveRequest.Status.APPROVED
    assert leave.approved_by == hr
    assert leave.approved_at == NOW
    note = Notification.objects.get(recipient=leave.employee.user)
    assert "approved" in note.message


def test_reject_requires_reason():
    leave = LeaveRequestFactory()
    with pytest.raises(LeaveError):
        reject_leave(leave, UserFactory(roles=["hr"]), "   ")
    leave.refresh_from_db()
    assert leave.status == LeaveRequest.Status.PENDING


def test_reject_keeps_reason_and_decider():
    hr = UserFactory(roles=["hr"])
    leave = LeaveRequestFactory()

    reject_leave(leave, hr, "  Deadline week  ", now=NOW)

    leave.refresh_from_db()
    assert leave.status == LeaveRequest.Status.REJECTED
    assert leave.rejection_reason == "Deadline week"
    assert leave.approved_by == hr
    assert leave.approved_at == NOW


def test_decided_request_cannot_be_decided_again():
    hr = UserFactory(roles=["hr"])
    leave = LeaveRequestFactory(status=LeaveRequest.Status.APPROVED)
    with pytest.raises(LeaveError):
        reject_leave(leave, hr, "Changed my mind")
    with pytest.raises(LeaveError):
        approve_leave(leave, hr)


def test_covering_only_returns_approved_requests_for_the_day():
    inside = LeaveRequestFactory(status=LeaveRequest.Status.APPROVED)
    LeaveRequestFactory(status=LeaveRequest.Status.PENDING)
    LeaveRequestFactory(
        status=LeaveRequest.Status.APPROVED,
        start_date=date(2024, 7, 10),
        end_date=date(2024, 7, 10),
    )
    assert list(LeaveRequest.objects.covering(date(2024, 7, 2))) == [inside]
