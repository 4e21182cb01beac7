import logging

from django.db import transaction

from agency_ops.audit.utils import log_action
from agency_ops.recruitment.models import Candidate
from agency_ops.recruitment.models import CandidateStatusHistory

logger = logging.getLogger(__name__)


@transaction.atomic
def change_status(
    candidate: Candidate,
    new_status: str,
    *,
    by=None,
    notes: str = "",
    request=None,
) -> CandidateStatusHistory | None:
    """Move a candidate to ``new_status``; returns None when nothing changed."""
    if new_status not in Candidate.Status.values:
        msg = f"Unknown candidate status: {new_status}"
        raise ValueError(msg)
    old_status = candidate.status
    if old_status == new_status:
        return None
    candidate.status = new_status
    candidate.save(update_fields=["status", "updated_at"])
    entry = CandidateStatusHistory.objects.create(
        candidate=candidate,
        old_status=old_status,
        new_status=new_status,
        changed_by=by,
        notes=(notes or "").strip(),
    )
    log_action(
        "candidate_status_changed",
        actor=by,
        request=request,
        model_name="recruitment.Candidate",
        record_id=candidate.pk,
        before={"status": old_status},
        after={"status": new_status},
    )
    logger.info("candidate %s: %s -> %s", candidate.pk, old_status, new_status)
    return entry


@transaction.atomic
def create_candidate(*, created_by=None, **fields) -> Candidate:
    """Create a candidate and the initial ``applied`` history entry."""
    candidate = Candidate.objects.create(created_by=created_by, **fields)
    CandidateStatusHistory.objects.create(
        candidate=candidate,
        old_status="",
        new_status=candidate.status,
        changed_by=created_by,
        created_at=candidate.applied_at,
    )
    return candidate
