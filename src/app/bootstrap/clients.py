"""Factories de clientes externos — pool httpx e cliente OpenProject.

O pool httpx é criado uma vez no lifespan e compartilhado por todas as
requisições; o lifespan também é responsável por fechá-lo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from api.connectors.openproject import OpenProjectClient, build_client_config

if TYPE_CHECKING:
    from api.connectors.openproject import ClientConfig
    from config.settings import OpenProjectSettings

logger = logging.getLogger(__name__)

# Limites do pool compartilhado
MAX_CONNECTIONS = 50
MAX_KEEPALIVE_CONNECTIONS = 10


def create_http_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Cria pool httpx async para chamadas de saída.

    Args:
        timeout_seconds: Timeout de transporte (connect/read/write/pool).

    Returns:
        httpx.AsyncClient pronto para uso concorrente.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(
            max_connections=MAX_CONNECTIONS,
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
        ),
    )


def create_openproject_client(
    http_client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
    settings: OpenProjectSettings | None = None,
) -> OpenProjectClient:
    """Cria cliente OpenProject com config do ambiente ou explícita.

    Args:
        http_client: Pool httpx. Se None, cria um novo (o chamador deve fechar).
        config: ClientConfig pronto. Se None, resolve via build_client_config.
        settings: OpenProjectSettings opcional repassado a build_client_config.

    Returns:
        Cliente OpenProject configurado.
    """
    client_config = config or build_client_config(settings=settings)
    pool = http_client or create_http_client(client_config.timeout_seconds)

    logger.info(
        "openproject_client_created",
        extra={
            "base_url": client_config.base_url,
            "timeout_ms": client_config.timeout_ms,
            "host_header_override": client_config.host_header is not None,
        },
    )
    return OpenProjectClient(client_config, pool)
