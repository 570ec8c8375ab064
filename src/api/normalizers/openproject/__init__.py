"""Normalizer OpenProject — payloads da API v3 -> modelos internos."""

from .project import normalize_project

__all__ = ["normalize_project"]
