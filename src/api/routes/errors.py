"""Handlers globais de exceção — traduzem falhas para o envelope de erro."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import responses
from config.settings import get_base_settings

if TYPE_CHECKING:
    from fastapi import FastAPI, Request
    from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTPException (inclusive 404 de rota inexistente) -> envelope."""
    if exc.status_code == 404:
        message = exc.detail if exc.detail and exc.detail != "Not Found" else "Route not found"
        return responses.error("NOT_FOUND", message, 404)
    code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return responses.error(code, str(exc.detail), exc.status_code)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in issue.get("loc", ())),
            "message": issue.get("msg", ""),
            "code": issue.get("type", ""),
        }
        for issue in exc.errors()
    ]
    return responses.validation_error(details)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erro não tratado -> 500; texto da exceção só em modo debug."""
    logger.error(
        "unhandled_exception",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
        exc_info=exc,
    )
    if get_base_settings().debug:
        return responses.internal_error(str(exc) or type(exc).__name__)
    return responses.internal_error()


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
