"""Protocolos e contratos do core da aplicação."""

from .models import ProjectRecord
from .project_client import ProjectClientProtocol

__all__ = [
    "ProjectClientProtocol",
    "ProjectRecord",
]
