"""Middleware HTTP de log de requisições.

Loga a entrada (método, path, cliente, user agent) e a saída (status,
duração, tamanho) de cada requisição, com correlation_id propagado.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

logger = logging.getLogger(__name__)


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Registra requisição e resposta; devolve X-Correlation-ID."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    started_at = time.perf_counter()
    method = request.method
    path = request.url.path

    logger.info(
        "http_request_started",
        extra={
            "method": method,
            "path": path,
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent", "Unknown"),
        },
    )
    try:
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started_at) * 1000
        logger.info(
            "http_request_completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "content_length": response.headers.get("content-length", "0"),
            },
        )
        response.headers[CORRELATION_ID_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
