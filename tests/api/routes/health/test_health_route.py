"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_status_uptime_and_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")

    response = await health_check()

    assert response.status == "ok"
    assert response.environment == "staging"
    assert response.uptime >= 0
    assert response.timestamp


@pytest.mark.asyncio
async def test_readiness_not_ready_without_client() -> None:
    request = _build_request_with_state(SimpleNamespace(openproject_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["openproject"] == {"status": "failed", "error": "not_initialized"}


@pytest.mark.asyncio
async def test_readiness_not_ready_without_token() -> None:
    client = SimpleNamespace(config=SimpleNamespace(api_token=""))
    request = _build_request_with_state(SimpleNamespace(openproject_client=client))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["openproject"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_ready_with_configured_client() -> None:
    client = SimpleNamespace(config=SimpleNamespace(api_token="tok"))
    request = _build_request_with_state(SimpleNamespace(openproject_client=client))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["openproject"]["status"] == "ok"
