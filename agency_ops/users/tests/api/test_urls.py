from django.urls import resolve
from django.urls import reverse

from agency_ops.users.models import User


def test_user_detail(user: User):
    assert (
        reverse("api_v1:user-detail", kwargs={"username": user.username})
        == f"/api/v1/users/{user.username}/"
    )
    assert resolve(f"/api/v1/users/{user.username}/").view_name == "api_v1:user-detail"


def test_user_me():
    assert reverse("api_v1:user-me") == "/api/v1/users/me/"
    assert resolve("/api/v1/users/me/").view_name == "api_v1:user-me"


def test_module_routes_share_the_version_namespace():
    assert reverse("api_v1:finance-income-statement") == (
        "/api/v1/finance/income-statement/"
    )
    assert reverse("api_v1:shared-task") == "/api/v1/shared/task/"
    assert reverse("api_v1:audit:recent") == "/api/v1/audit/recent/"
    assert reverse("api:hr-analytics") == "/api/hr-analytics/"
