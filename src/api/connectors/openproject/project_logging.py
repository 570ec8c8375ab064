"""Helpers de logging da integração OpenProject (sem credenciais)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import OpenProjectError
    from app.protocols.models import ProjectRecord

logger = logging.getLogger(__name__)


def log_fetch_started(project_id: str, url: str) -> None:
    logger.info(
        "openproject_fetch_started",
        extra={"project_id": project_id, "url": url},
    )


def log_fetch_succeeded(project: ProjectRecord) -> None:
    logger.info(
        "openproject_fetch_succeeded",
        extra={
            "project_id": project.id,
            "project_name": project.name,
            "project_identifier": project.identifier,
        },
    )


def log_fetch_failed(project_id: str, error: OpenProjectError) -> None:
    logger.warning(
        "openproject_fetch_failed",
        extra={
            "project_id": project_id,
            "error_kind": str(error.kind),
            "upstream_status": error.upstream_status,
        },
    )


def log_transport_error(project_id: str, url: str, exc: BaseException) -> None:
    """Registra o erro de baixo nível que nunca é repassado ao chamador."""
    logger.error(
        "openproject_transport_error",
        extra={
            "project_id": project_id,
            "url": url,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def log_processing_error(project_id: str, exc: BaseException) -> None:
    """Falha inesperada ao interpretar uma resposta já recebida."""
    logger.error(
        "openproject_response_processing_error",
        extra={
            "project_id": project_id,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )
