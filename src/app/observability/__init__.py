"""Observabilidade — correlation_id e log de requisições HTTP.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import request_logging_middleware
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.request_logging import request_logging_middleware

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "request_logging_middleware",
    "reset_correlation_id",
    "set_correlation_id",
]
