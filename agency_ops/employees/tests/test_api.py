import pytest
from django.urls import reverse
from rest_framework import status

from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def test_directory_hides_salaries(api_client):
    EmployeeFactory()
    api_client.force_authenticate(UserFactory(roles=["video_editor"]))
    res = api_client.get(reverse("api_v1:employees-list"))
    assert res.status_code == status.HTTP_200_OK
    assert "base_salary" not in res.data[0]
    assert "monthly_salary" not in res.data[0]


def test_finance_sees_monthly_salary(api_client):
    EmployeeFactory(transport_allowance="250000")
    api_client.force_authenticate(UserFactory(roles=["finance"]))
    res = api_client.get(reverse("api_v1:employees-list"))
    assert res.data[0]["monthly_salary"] == "5250000.00"


def test_only_hr_writes(api_client):
    employee = EmployeeFactory()
    url = reverse("api_v1:employees-detail", kwargs={"pk": employee.pk})

    api_client.force_authenticate(UserFactory(roles=["finance"]))
    assert api_client.patch(url, {"position": "Lead"}, format="json").status_code == 403

    api_client.force_authenticate(UserFactory(roles=["hr"]))
    res = api_client.patch(
        url,
        {"contract_start": "2024-06-01", "contract_end": "2024-01-01"},
        format="json",
    )
    assert res.status_code == status.HTTP_400_BAD_REQUEST
    assert "contract_end" in res.data

    res = api_client.patch(url, {"position": "Lead Designer"}, format="json")
    assert res.status_code == status.HTTP_200_OK
    assert res.data["position"] == "Lead Designer"


def test_filter_by_role_and_search(api_client):
    hr_employee = EmployeeFactory(user=UserFactory(name="Sinta Dewi", roles=["hr"]))
    EmployeeFactory(user=UserFactory(name="Agus"))
    api_client.force_authenticate(UserFactory())

    by_role = api_client.get(reverse("api_v1:employees-list"), {"role": "hr"})
    assert [row["id"] for row in by_role.data] == [hr_employee.pk]

    by_name = api_client.get(reverse("api_v1:employees-list"), {"search": "sinta"})
    assert [row["id"] for row in by_name.data] == [hr_employee.pk]
