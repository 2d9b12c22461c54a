"""Smoke tests for health endpoints."""

from __future__ import annotations


def test_health_endpoint_returns_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload == {"status": "ok", "app": "currency-admin", "default_locale": "en"}


def test_health_response_carries_request_id(client):
    response = client.get("/health", headers={"X-Request-ID": "req-abc"})
    assert response.headers["X-Request-ID"] == "req-abc"
