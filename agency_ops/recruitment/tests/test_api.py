import pytest
from django.urls import reverse
from rest_framework import status

from agency_ops.audit.models import AuditLog
from agency_ops.recruitment import services
from agency_ops.recruitment.models import Candidate
from agency_ops.recruitment.models import CandidateStatusHistory
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


@pytest.fixture
def hr_user():
    return UserFactory(roles=["hr"])


def test_change_status_records_history(hr_user):
    candidate = services.create_candidate(
        created_by=hr_user, full_name="Sari", email="sari@example.com", position="Editor"
    )
    assert services.change_status(candidate, "applied", by=hr_user) is None

    entry = services.change_status(candidate, "screening_hr", by=hr_user, notes=" ok ")
    assert entry.old_status == "applied"
    assert entry.notes == "ok"
    assert list(
        candidate.status_history.values_list("new_status", flat=True)
    ) == ["applied", "screening_hr"]
    assert AuditLog.objects.filter(action="candidate_status_changed").count() == 1

    with pytest.raises(ValueError, match="Unknown"):
        services.change_status(candidate, "ghosted")


def test_candidate_flow_over_api(api_client, hr_user):
    api_client.force_authenticate(hr_user)
    res = api_client.post(
        reverse("api_v1:recruitment-candidate-list"),
        {
            "full_name": "Bima",
            "email": "bima@example.com",
            "position": "Copywriter",
            "status": "hired",
        },
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert res.data["status"] == Candidate.Status.APPLIED
    candidate_id = res.data["id"]

    moved = api_client.post(
        reverse(
            "api_v1:recruitment-candidate-change-status", kwargs={"pk": candidate_id}
        ),
        {"status": "interview_user"},
        format="json",
    )
    assert moved.status_code == status.HTTP_200_OK
    assert moved.data["status"] == "interview_user"

    history = api_client.get(
        reverse("api_v1:recruitment-candidate-history", kwargs={"pk": candidate_id})
    )
    assert [row["new_status"] for row in history.data] == ["applied", "interview_user"]
    assert CandidateStatusHistory.objects.filter(candidate_id=candidate_id).count() == 2


def test_dashboard(api_client, hr_user):
    services.create_candidate(full_name="A", email="a@example.com", position="Editor")
    api_client.force_authenticate(hr_user)

    res = api_client.get(reverse("api_v1:recruitment-dashboard"), {"range": "all"})
    assert res.status_code == status.HTTP_200_OK
    assert res.data["stats"]["total"] == 1
    assert res.data["positions"] == ["Editor"]

    bad = api_client.get(reverse("api_v1:recruitment-dashboard"), {"range": "1y"})
    assert bad.status_code == status.HTTP_400_BAD_REQUEST


def test_recruitment_is_hr_only(api_client, user):
    api_client.force_authenticate(user)
    res = api_client.get(reverse("api_v1:recruitment-candidate-list"))
    assert res.status_code == status.HTTP_403_FORBIDDEN
