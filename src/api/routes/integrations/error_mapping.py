"""Tradução OpenProjectError -> resposta HTTP.

Único lugar que mapeia kind de erro da integração para status HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api import responses
from api.connectors.openproject import OpenProjectError, OpenProjectErrorKind

if TYPE_CHECKING:
    from fastapi.responses import JSONResponse

# UPSTREAM_ERROR usa o status do próprio OpenProject (ver status_for_error)
STATUS_BY_KIND: dict[OpenProjectErrorKind, int] = {
    OpenProjectErrorKind.CONFIG_ERROR: 500,
    OpenProjectErrorKind.UNAUTHORIZED: 401,
    OpenProjectErrorKind.NOT_FOUND: 404,
    OpenProjectErrorKind.UPSTREAM_ERROR: 500,
    OpenProjectErrorKind.TIMEOUT: 408,
    OpenProjectErrorKind.NETWORK_ERROR: 500,
}


def status_for_error(error: OpenProjectError) -> int:
    """Status HTTP para o erro; UPSTREAM_ERROR repassa o status upstream."""
    if error.kind is OpenProjectErrorKind.UPSTREAM_ERROR and error.upstream_status:
        return error.upstream_status
    return STATUS_BY_KIND[error.kind]


def error_response(error: OpenProjectError) -> JSONResponse:
    return responses.error(error.code, error.message, status_for_error(error))
