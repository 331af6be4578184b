"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from app.bootstrap.relay_factory import create_relay_service
from config.settings import RelaySettings
from tests.fakes.fake_delivery import FakeDelivery


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
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service
    assert response.version == "1.0.0"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_service() -> None:
    request = _build_request_with_state(SimpleNamespace())

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["relay"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_workers_running() -> None:
    service = create_relay_service(FakeDelivery(), RelaySettings(max_queue_size=5, max_workers=2))
    service.start()
    request = _build_request_with_state(SimpleNamespace(relay_service=service))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    relay = payload["checks"]["relay"]
    assert relay["status"] == "ok"
    assert relay["queue_capacity"] == 5
    assert relay["workers_total"] == 2

    await service.shutdown(1)


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_after_shutdown() -> None:
    service = create_relay_service(FakeDelivery(), RelaySettings(max_queue_size=1, max_workers=1))
    service.start()
    await service.shutdown(1)
    request = _build_request_with_state(SimpleNamespace(relay_service=service))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["relay"]["accepting"] is False
    assert payload["checks"]["relay"]["workers_running"] == 0
