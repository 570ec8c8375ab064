"""Protocolo do cliente de projetos usado pelas rotas.

Evita dependência direta das rotas na implementação httpx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from api.connectors.openproject import OpenProjectError
    from app.protocols.models import ProjectRecord


class ProjectClientProtocol(Protocol):
    """Contrato mínimo para busca de projetos no sistema upstream."""

    async def fetch_project(self, project_id: str) -> ProjectRecord | OpenProjectError: ...
