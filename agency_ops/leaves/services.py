"""Leave request decisions."""

import logging

from django.db import transaction
from django.utils import timezone

from agency_ops.leaves.models import LeaveRequest
from agency_ops.notifications.services import notify

logger = logging.getLogger(__name__)


class LeaveError(ValueError):
    """Raised when a leave request cannot take the requested decision."""


def _decide(leave: LeaveRequest, approver, status: str, *, now=None, reason=""):
    if leave.status != LeaveRequest.Status.PENDING:
        msg = "Only pending requests can be approved or rejected."
        raise LeaveError(msg)
    leave.status = status
    leave.approved_by = approver
    leave.approved_at = now or timezone.now()
    leave.rejection_reason = reason
    leave.save(
        update_fields=[
            "status",
            "approved_by",
            "approved_at",
            "rejection_reason",
            "updated_at",
        ]
    )
    logger.info("Leave request %s %s by user %s", leave.pk, status, approver.pk)
    return leave


@transaction.atomic
def approve_leave(leave: LeaveRequest, approver, *, now=None) -> LeaveRequest:
    leave = _decide(leave, approver, LeaveRequest.Status.APPROVED, now=now)
    notify(
        [leave.employee.user],
        title="Leave request approved",
        message=(
            f"Your {leave.get_leave_type_display().lower()} request for "
            f"{leave.start_date:%d %b %Y} - {leave.end_date:%d %b %Y} was approved."
        ),
        related_link="/leave",
    )
    return leave


@transaction.atomic
def reject_leave(leave: LeaveRequest, approver, reason: str, *, now=None) -> LeaveRequest:
    reason = (reason or "").strip()
    if not reason:
        msg = "A rejection reason is required."
        raise LeaveError(msg)
    leave = _decide(leave, approver, LeaveRequest.Status.REJECTED, now=now, reason=reason)
    notify(
        [leave.employee.user],
        title="Leave request rejected",
        message=(
            f"Your {leave.get_leave_type_display().lower()} request for "
            f"{leave.start_date:%d %b %Y} was rejected: {reason}"
        ),
        related_link="/leave",
    )
    return leave
