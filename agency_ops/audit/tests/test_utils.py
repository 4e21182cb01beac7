import pytest
from django.contrib.auth import authenticate
from django.test import RequestFactory

from agency_ops.audit.models import AuditLog
from agency_ops.audit.utils import client_ip
from agency_ops.audit.utils import log_action
from agency_ops.users.tests.factories import UserFactory

pytestmark = pytest.mark.django_db


def test_client_ip_prefers_first_forwarded_hop():
    request = RequestFactory().get(
        "/", HTTP_X_FORWARDED_FOR="10.0.0.1, 172.16.0.2", REMOTE_ADDR="127.0.0.1"
    )
    assert client_ip(request) == "10.0.0.1"
    assert client_ip(RequestFactory().get("/", REMOTE_ADDR="127.0.0.9")) == "127.0.0.9"
    assert client_ip(None) == ""


def test_log_action_takes_actor_and_ip_from_request():
    user = UserFactory()
    request = RequestFactory().post("/", REMOTE_ADDR="192.168.1.5")
    request.user = user

    entry = log_action(
        "case_created",
        request=request,
        model_name="discipline.DisciplinaryCase",
        record_id=7,
        after={"status": "open"},
    )

    assert entry.actor == user
    assert entry.ip_address == "192.168.1.5"
    assert entry.after == {"status": "open"}
    assert AuditLog.objects.filter(model_name="discipline.DisciplinaryCase").count() == 1


def test_log_action_without_user_is_recorded_as_system():
    entry = log_action("auto_clockout", actor="scheduler")
    assert entry.actor is None


def test_failed_login_is_audited():
    UserFactory(username="dina")
    assert authenticate(username="dina", password="wrong-password") is None  # noqa: S106
    row = AuditLog.objects.get(action="login_failed")
    assert row.message == "username=dina"


def test_changed_fields_compares_before_and_after():
    entry = log_action(
        "case_updated",
        before={"status": "pending", "notes": ""},
        after={"status": "resolved", "notes": "", "action_taken": "warning"},
    )
    assert entry.changed_fields == ["action_taken", "status"]
    assert log_action("login").changed_fields == []
