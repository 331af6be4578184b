"""Endpoints de health check (liveness/readiness)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o processo está respondendo."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: fila aberta e todos os workers ativos."""
    service = getattr(request.app.state, "relay_service", None)
    if service is None:
        payload = {
            "status": "not_ready",
            "checks": {"relay": {"status": "failed", "error": "not_configured"}},
            "timestamp": datetime.now(UTC).isoformat(),
        }
        return JSONResponse(content=payload, status_code=503)

    ready = service.ready
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "relay": {
                "status": "ok" if ready else "failed",
                **service.snapshot().as_dict(),
            },
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_check_failed", extra=payload["checks"]["relay"])
    return JSONResponse(content=payload, status_code=200 if ready else 503)
