"""Settings da integração OpenProject.

Valores brutos lidos do ambiente. A normalização (URL base, porta padrão
do alias interno, timeout) acontece em api.connectors.openproject.config.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

OPENPROJECT_DEFAULT_BASE_URL: str = "http://openproject:8080"
OPENPROJECT_DEFAULT_TIMEOUT_MS: int = 10_000


@dataclass(frozen=True)
class OpenProjectSettings:
    """Configurações do OpenProject.

    Attributes:
        base_url: URL base da instância OpenProject
        api_token: Token de API (Bearer). Vazio é permitido até a primeira chamada
        host_header: Override do header Host (DNS interno != virtual host)
        timeout_ms: Timeout total da requisição em milissegundos (texto bruto)
    """

    base_url: str = OPENPROJECT_DEFAULT_BASE_URL
    api_token: str = ""
    host_header: str = ""
    timeout_ms: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas do OpenProject.

        Token ausente não é erro de startup: o cliente avisa na construção
        e cada chamada devolve ConfigError; /ready reporta o estado.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("OPENPROJECT_BASE_URL deve começar com http:// ou https://")

        if self.timeout_ms and parse_timeout_ms(self.timeout_ms) is None:
            errors.append("OPENPROJECT_TIMEOUT_MS deve ser um inteiro > 0")

        return errors


def parse_timeout_ms(raw: str | int | float | None) -> int | None:
    """Converte timeout em ms; None quando ausente, inválido ou <= 0."""
    if raw is None or raw == "":
        return None
    try:
        value = int(float(raw))
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def _load_from_env() -> OpenProjectSettings:
    """Carrega OpenProjectSettings a partir de variáveis de ambiente."""
    return OpenProjectSettings(
        base_url=os.getenv("OPENPROJECT_BASE_URL", "") or OPENPROJECT_DEFAULT_BASE_URL,
        api_token=os.getenv("OPENPROJECT_API_TOKEN", ""),
        host_header=os.getenv("OPENPROJECT_HOST_HEADER", ""),
        timeout_ms=os.getenv("OPENPROJECT_TIMEOUT_MS", ""),
    )


@lru_cache(maxsize=1)
def get_openproject_settings() -> OpenProjectSettings:
    """Retorna instância cacheada de OpenProjectSettings.

    Lida uma vez no startup; testes chamam cache_clear() ou passam valores
    explícitos para build_client_config.
    """
    return _load_from_env()
