"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()

# Instante de import do módulo ~ início do processo
_STARTED_AT = time.monotonic()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    timestamp: str
    uptime: float
    environment: str


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC).isoformat(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
        environment=get_base_settings().environment,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — cliente OpenProject montado e com credencial."""
    openproject_check = _check_openproject(getattr(request.app.state, "openproject_client", None))
    ready = openproject_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"openproject": openproject_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_openproject(client: Any | None) -> DependencyCheck:
    # Sem chamada de rede: o readiness não pode depender da disponibilidade do upstream
    if client is None:
        return DependencyCheck(status="failed", error="not_initialized")
    config = getattr(client, "config", None)
    if config is None or not getattr(config, "api_token", ""):
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
