"""Agregador de settings da Content Automation API.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Integrações
from config.settings.openproject import (
    OPENPROJECT_DEFAULT_BASE_URL,
    OPENPROJECT_DEFAULT_TIMEOUT_MS,
    OpenProjectSettings,
    get_openproject_settings,
    parse_timeout_ms,
)

__all__ = [
    # Constants
    "OPENPROJECT_DEFAULT_BASE_URL",
    "OPENPROJECT_DEFAULT_TIMEOUT_MS",
    # Base
    "BaseSettings",
    "Environment",
    # OpenProject
    "OpenProjectSettings",
    "get_base_settings",
    "get_openproject_settings",
    "parse_timeout_ms",
]
