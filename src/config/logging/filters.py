"""Filters de logging para injeção de contexto e mascaramento.

- CorrelationIdFilter: adiciona correlation_id e service a cada record
- SensitiveFieldFilter: mascara credenciais passadas por engano via `extra`
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Atributos de LogRecord que nunca devem chegar ao output em claro
SENSITIVE_FIELDS = frozenset(
    {
        "authorization",
        "api_token",
        "token",
        "password",
        "secret",
    }
)

MASK = "***"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; correlation_id explícito via `extra` é preservado."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Substitui valores de campos sensíveis por máscara fixa."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in SENSITIVE_FIELDS:
            if getattr(record, field, None):
                setattr(record, field, MASK)
        return True
