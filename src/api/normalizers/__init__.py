"""Normalizers por integração — conversão de payloads externos para modelos internos.

Estrutura:
- openproject/: projetos da API v3 do OpenProject
"""

from .openproject import normalize_project

__all__ = ["normalize_project"]
