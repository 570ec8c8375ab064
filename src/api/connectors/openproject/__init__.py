"""Conector OpenProject - adapter de borda para a API v3.

Responsabilidades:
- Configuração imutável de conexão (URL base, token, Host, timeout)
- HTTP client com timeout e classificação de falhas
- Modelo normalizado de projeto e taxonomia de erros
"""

from .client import OpenProjectClient
from .config import ClientConfig, build_client_config, normalize_base_url
from .errors import ERROR_CODES, OpenProjectError, OpenProjectErrorKind
from app.protocols.models import ProjectRecord

__all__ = [
    "ERROR_CODES",
    "ClientConfig",
    "OpenProjectClient",
    "OpenProjectError",
    "OpenProjectErrorKind",
    "ProjectRecord",
    "build_client_config",
    "normalize_base_url",
]
