import pytest
from django.urls import reverse
from rest_framework import status

from agency_ops.attendance.models import Attendance
from agency_ops.employees.tests.factories import EmployeeFactory
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def test_clock_in_and_out_for_today(api_client):
    employee = EmployeeFactory()
    api_client.force_authenticate(employee.user)

    res = api_client.post(reverse("api_v1:attendance-clock-in"), {"notes": "wfo"})
    assert res.status_code == status.HTTP_201_CREATED, res.data
    assert res.data["clock_out"] is None

    again = api_client.post(reverse("api_v1:attendance-clock-in"), {})
    assert again.status_code == status.HTTP_409_CONFLICT

    today = api_client.get(reverse("api_v1:attendance-today"))
    assert today.status_code == status.HTTP_200_OK
    assert today.data["id"] == res.data["id"]

    out = api_client.post(
        reverse("api_v1:attendance-clock-out"),
        {"tasks_completed": ["Moodboard"]},
        format="json",
    )
    assert out.status_code == status.HTTP_200_OK, out.data
    assert out.data["clock_out"] is not None
    assert out.data["tasks_completed"] == ["Moodboard"]
    assert out.data["notes"] == "wfo"


def test_clock_in_without_employee_profile(api_client, user):
    api_client.force_authenticate(user)
    res = api_client.post(reverse("api_v1:attendance-clock-in"), {})
    assert res.status_code == status.HTTP_400_BAD_REQUEST


def test_break_end_without_break_conflicts(api_client):
    employee = EmployeeFactory()
    api_client.force_authenticate(employee.user)
    api_client.post(reverse("api_v1:attendance-clock-in"), {})
    res = api_client.post(reverse("api_v1:attendance-break-end"))
    assert res.status_code == status.HTTP_409_CONFLICT


def test_list_is_scoped_for_non_hr(api_client):
    mine = EmployeeFactory()
    other = EmployeeFactory()
    for employee in (mine, other):
        Attendance.objects.create(employee=employee, date="2024-05-06")

    api_client.force_authenticate(mine.user)
    res = api_client.get(reverse("api_v1:attendance-list"))
    assert {row["employee"] for row in res.data} == {mine.pk}

    api_client.force_authenticate(UserFactory(roles=["hr"]))
    res = api_client.get(reverse("api_v1:attendance-list"), {"employee": other.pk})
    assert {row["employee"] for row in res.data} == {other.pk}
