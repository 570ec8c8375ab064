"""Taxonomia fechada de erros da integração OpenProject.

Todo caminho de saída de OpenProjectClient.fetch_project que não é um
ProjectRecord é um OpenProjectError com um destes kinds. A tradução
kind -> status HTTP pertence à borda (api.routes.integrations).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OpenProjectErrorKind(StrEnum):
    """Kinds estáveis, legíveis por máquina."""

    CONFIG_ERROR = "ConfigError"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    UPSTREAM_ERROR = "UpstreamError"
    TIMEOUT = "Timeout"
    NETWORK_ERROR = "NetworkError"


# Código exposto no envelope de erro para cada kind
ERROR_CODES: dict[OpenProjectErrorKind, str] = {
    OpenProjectErrorKind.CONFIG_ERROR: "OPENPROJECT_CONFIG_ERROR",
    OpenProjectErrorKind.UNAUTHORIZED: "OPENPROJECT_UNAUTHORIZED",
    OpenProjectErrorKind.NOT_FOUND: "OPENPROJECT_NOT_FOUND",
    OpenProjectErrorKind.UPSTREAM_ERROR: "OPENPROJECT_ERROR",
    OpenProjectErrorKind.TIMEOUT: "OPENPROJECT_TIMEOUT",
    OpenProjectErrorKind.NETWORK_ERROR: "OPENPROJECT_NETWORK_ERROR",
}


@dataclass(frozen=True, slots=True)
class OpenProjectError:
    """Falha classificada de uma chamada ao OpenProject.

    Attributes:
        kind: Classificação da falha
        message: Mensagem legível, sem stack trace nem texto de erro de baixo nível
        upstream_status: Status HTTP devolvido pelo OpenProject (só UPSTREAM_ERROR
            causado por status; None para payload malformado)
    """

    kind: OpenProjectErrorKind
    message: str
    upstream_status: int | None = None

    @property
    def code(self) -> str:
        return ERROR_CODES[self.kind]

    @classmethod
    def config_error(cls) -> OpenProjectError:
        return cls(OpenProjectErrorKind.CONFIG_ERROR, "OpenProject API token not configured")

    @classmethod
    def unauthorized(cls) -> OpenProjectError:
        return cls(OpenProjectErrorKind.UNAUTHORIZED, "Unauthorized access to OpenProject")

    @classmethod
    def not_found(cls, project_id: str) -> OpenProjectError:
        return cls(OpenProjectErrorKind.NOT_FOUND, f"Project {project_id} not found")

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> OpenProjectError:
        message = f"OpenProject API error: {status_code} {reason}".rstrip()
        return cls(OpenProjectErrorKind.UPSTREAM_ERROR, message, upstream_status=status_code)

    @classmethod
    def malformed_payload(cls) -> OpenProjectError:
        return cls(
            OpenProjectErrorKind.UPSTREAM_ERROR,
            "OpenProject API returned a malformed payload",
        )

    @classmethod
    def timeout(cls, timeout_ms: int) -> OpenProjectError:
        return cls(
            OpenProjectErrorKind.TIMEOUT,
            f"OpenProject request timed out after {timeout_ms} ms",
        )

    @classmethod
    def network_error(cls) -> OpenProjectError:
        return cls(OpenProjectErrorKind.NETWORK_ERROR, "Failed to connect to OpenProject")
