"""Configuração imutável do cliente OpenProject.

build_client_config é o adapter fino entre o ambiente (OpenProjectSettings)
e o cliente: valores explícitos têm precedência sobre os do ambiente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote, urlsplit, urlunsplit

from config.settings import (
    OPENPROJECT_DEFAULT_BASE_URL,
    OPENPROJECT_DEFAULT_TIMEOUT_MS,
    get_openproject_settings,
    parse_timeout_ms,
)

if TYPE_CHECKING:
    from config.settings import OpenProjectSettings

# Alias DNS do OpenProject na rede interna (docker compose) e sua porta
INTERNAL_ALIAS_HOST = "openproject"
INTERNAL_ALIAS_PORT = 8080

PROJECTS_PATH = "/api/v3/projects"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Configuração de conexão com o OpenProject.

    Attributes:
        base_url: URL absoluta, sem barra final
        api_token: Credencial Bearer; vazia falha só no momento da chamada
        host_header: Valor explícito para o header Host (opcional)
        timeout_ms: Limite total da requisição em milissegundos
    """

    base_url: str
    api_token: str = ""
    host_header: str | None = None
    timeout_ms: int = OPENPROJECT_DEFAULT_TIMEOUT_MS

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def project_url(self, project_id: str) -> str:
        """URL do recurso de projeto: {base_url}/api/v3/projects/{id}."""
        return f"{self.base_url}{PROJECTS_PATH}/{quote(project_id, safe='')}"


def normalize_base_url(raw: str) -> str:
    """Remove barras finais e injeta a porta padrão do alias interno.

    Exemplo:
        normalize_base_url("http://openproject/")  -> "http://openproject:8080"
        normalize_base_url("https://op.example.com") -> "https://op.example.com"
    """
    url = raw.strip().rstrip("/")
    parts = urlsplit(url)
    if parts.hostname == INTERNAL_ALIAS_HOST and parts.port is None:
        netloc = parts.netloc.rstrip(":")
        url = urlunsplit(parts._replace(netloc=f"{netloc}:{INTERNAL_ALIAS_PORT}"))
    return url


def build_client_config(
    base_url: str | None = None,
    api_token: str | None = None,
    host_header: str | None = None,
    timeout_ms: str | int | None = None,
    settings: OpenProjectSettings | None = None,
) -> ClientConfig:
    """Resolve a configuração do cliente.

    Args:
        base_url: URL base explícita. Usa OPENPROJECT_BASE_URL se None.
        api_token: Token explícito. Usa OPENPROJECT_API_TOKEN se None.
        host_header: Override do Host. Usa OPENPROJECT_HOST_HEADER se None.
        timeout_ms: Timeout em ms. Usa OPENPROJECT_TIMEOUT_MS se None;
            valores inválidos ou <= 0 caem no padrão de 10s.
        settings: OpenProjectSettings opcional. Se None, carrega do ambiente.

    Returns:
        ClientConfig imutável.
    """
    env = settings or get_openproject_settings()

    resolved_url = base_url if base_url is not None else env.base_url
    resolved_token = api_token if api_token is not None else env.api_token
    resolved_host = host_header if host_header is not None else env.host_header
    resolved_timeout = parse_timeout_ms(timeout_ms if timeout_ms is not None else env.timeout_ms)

    return ClientConfig(
        base_url=normalize_base_url(resolved_url or OPENPROJECT_DEFAULT_BASE_URL),
        api_token=resolved_token or "",
        host_header=resolved_host or None,
        timeout_ms=resolved_timeout or OPENPROJECT_DEFAULT_TIMEOUT_MS,
    )
