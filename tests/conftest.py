"""Configuração do pytest para a Content Automation API."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import get_base_settings, get_openproject_settings  # noqa: E402

_OPENPROJECT_ENV_VARS = (
    "OPENPROJECT_BASE_URL",
    "OPENPROJECT_API_TOKEN",
    "OPENPROJECT_HOST_HEADER",
    "OPENPROJECT_TIMEOUT_MS",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Cada teste parte de um ambiente limpo e de settings recarregadas."""
    for name in _OPENPROJECT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.delenv("DEBUG", raising=False)
    get_base_settings.cache_clear()
    get_openproject_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_openproject_settings.cache_clear()
