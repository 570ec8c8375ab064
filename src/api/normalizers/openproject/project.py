"""Normalização do payload de projeto do OpenProject.

Função sem IO de rede: payload JSON (dict) -> ProjectRecord.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.protocols.models import ProjectRecord

logger = logging.getLogger(__name__)


def normalize_project(payload: Mapping[str, Any], requested_id: str) -> ProjectRecord:
    """Converte o payload do OpenProject para ProjectRecord.

    Regras:
    - id: str(payload["id"]); cai para requested_id se ausente, null ou vazio
    - identifier/name: repassados quando são strings; outros tipos viram None
      (registrado em DEBUG)
    - description: string simples ou objeto formatável {"raw": "..."} -> string
    - raw: payload completo, sem alterações

    Args:
        payload: Corpo JSON do OpenProject (objeto).
        requested_id: Identificador pedido pelo chamador.

    Returns:
        ProjectRecord normalizado.
    """
    return ProjectRecord(
        id=_extract_id(payload, requested_id),
        identifier=_text_field(payload, "identifier", requested_id),
        name=_text_field(payload, "name", requested_id),
        description=_flatten_description(payload.get("description")),
        raw=dict(payload),
    )


def _extract_id(payload: Mapping[str, Any], requested_id: str) -> str:
    raw_id = payload.get("id")
    if raw_id is None:
        return requested_id
    return str(raw_id) or requested_id


def _text_field(payload: Mapping[str, Any], field: str, requested_id: str) -> str | None:
    value = payload.get(field)
    if value is not None and not isinstance(value, str):
        logger.debug(
            "openproject_field_dropped",
            extra={
                "project_id": requested_id,
                "field": field,
                "value_type": type(value).__name__,
            },
        )
    return _optional_str(value)


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _flatten_description(value: Any) -> str | None:
    # OpenProject usa Formattable: {"format": "markdown", "raw": "...", "html": "..."}
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return _optional_str(value.get("raw"))
    return None
