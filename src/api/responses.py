"""Envelope JSON padrão das respostas da API.

Sucesso:
    {"success": true, "data": ..., "message": "..."}   # message opcional

Erro:
    {"success": false, "error": {"code": "...", "message": "...", "details": ...}}
"""

from __future__ import annotations

from typing import Any

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(data: Any, message: str | None = None, status_code: int = 200) -> JSONResponse:
    """Resposta de sucesso; `message` só entra no corpo quando informada."""
    body: dict[str, Any] = {"success": True, "data": jsonable_encoder(data)}
    if message:
        body["message"] = message
    return JSONResponse(content=body, status_code=status_code)


def created(data: Any, message: str | None = None) -> JSONResponse:
    return success(data, message, status_code=201)


def no_content() -> Response:
    return Response(status_code=204)


def error(
    code: str,
    message: str,
    status_code: int = 500,
    details: Any | None = None,
) -> JSONResponse:
    """Resposta de erro com código estável e mensagem legível."""
    payload: dict[str, Any] = {"code": code, "message": message}
    if details:
        payload["details"] = jsonable_encoder(details)
    return JSONResponse(
        content={"success": False, "error": payload},
        status_code=status_code,
    )


def bad_request(message: str, details: Any | None = None) -> JSONResponse:
    return error("BAD_REQUEST", message, 400, details)


def not_found(resource: str = "Resource") -> JSONResponse:
    return error("NOT_FOUND", f"{resource} not found", 404)


def validation_error(details: Any) -> JSONResponse:
    return error("VALIDATION_ERROR", "Request validation failed", 400, details)


def internal_error(message: str = "Internal server error") -> JSONResponse:
    return error("INTERNAL_ERROR", message, 500)
