import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from agency_ops.audit.models import AuditLog
from agency_ops.discipline.models import DisciplinaryCase
from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


@pytest.fixture
def hr_user():
    return UserFactory(roles=["hr"])


def test_case_log_is_hr_only(api_client, user):
    api_client.force_authenticate(user)
    res = api_client.get(reverse("api_v1:discipline-list"))
    assert res.status_code == status.HTTP_403_FORBIDDEN


def test_create_case_defaults(api_client, hr_user):
    employee = EmployeeFactory()
    api_client.force_authenticate(hr_user)
    res = api_client.post(
        reverse("api_v1:discipline-list"),
        {
            "employee": employee.pk,
            "violation_type": "lateness",
            "description": "  Late five times in May  ",
            "severity": "moderate",
            "status": "resolved",
        },
        format="json",
    )
    assert res.status_code == status.HTTP_201_CREATED, res.data
    case = DisciplinaryCase.objects.get(pk=res.data["id"])
    assert case.status == DisciplinaryCase.Status.PENDING
    assert case.case_date == timezone.localdate()
    assert case.reported_by == hr_user
    assert case.description == "Late five times in May"
    assert AuditLog.objects.filter(
        action="discipline_case_created", record_id=case.pk
    ).exists()


def test_update_limited_to_follow_up_fields(api_client, hr_user):
    case = DisciplinaryCase.objects.create(
        employee=EmployeeFactory(),
        case_date="2024-05-01",
        violation_type="sop_breach",
        description="Skipped review",
    )
    api_client.force_authenticate(hr_user)
    url = reverse("api_v1:discipline-detail", kwargs={"pk": case.pk})

    denied = api_client.patch(url, {"severity": "critical"}, format="json")
    assert denied.status_code == status.HTTP_400_BAD_REQUEST

    res = api_client.patch(
        url,
        {"status": "warning_issued", "action_taken": "First warning letter"},
        format="json",
    )
    assert res.status_code == status.HTTP_200_OK
    case.refresh_from_db()
    assert case.status == DisciplinaryCase.Status.WARNING_ISSUED
    assert case.severity == DisciplinaryCase.Severity.MINOR


def test_summary_respects_filters(api_client, hr_user):
    first = EmployeeFactory()
    second = EmployeeFactory()
    for employee, severity in ((first, "minor"), (first, "major"), (second, "minor")):
        DisciplinaryCase.objects.create(
            employee=employee,
            case_date="2024-05-01",
            violation_type="lateness",
            description="Late",
            severity=severity,
        )
    api_client.force_authenticate(hr_user)

    res = api_client.get(reverse("api_v1:discipline-summary"))
    assert res.data["total"] == 3
    assert res.data["repeat_employees"] == [{"employee_id": first.pk, "cases": 2}]

    filtered = api_client.get(
        reverse("api_v1:discipline-summary"), {"employee": second.pk}
    )
    assert filtered.data["total"] == 1
