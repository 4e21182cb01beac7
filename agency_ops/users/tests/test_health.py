from http import HTTPStatus
from unittest import mock

import pytest
from django.db import connection as dj_conn


class DummyDbError(Exception):
    """Synthetic DB error for testing."""


@pytest.mark.django_db
def test_health_ok(client):
    with mock.patch("config.health.redis.Redis.ping", return_value=True):
        resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["status"] == "ok"
    assert data["components"]["db"]["ok"] is True
    assert "local_time" in data


@pytest.mark.django_db
def test_health_degraded_when_redis_fails(client):
    with mock.patch(
        "config.health.redis.Redis.ping",
        side_effect=TimeoutError("redis timeout"),
    ):
        resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    data = resp.json()
    assert data["components"]["redis"]["ok"] is False
    assert data["status"] == "degraded"


@pytest.mark.django_db
def test_health_down_when_everything_fails(client, monkeypatch):
    msg = "db down"

    def raise_cursor():
        raise DummyDbError(msg)

    monkeypatch.setattr(dj_conn, "cursor", raise_cursor, raising=True)
    with mock.patch(
        "config.health.redis.Redis.ping", side_effect=ConnectionError("no redis")
    ):
        resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.SERVICE_UNAVAILABLE
    assert resp.json()["status"] == "down"
