"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (health, info, conteúdo, integrações)
- Validação inicial de request (path params)
- Delegação para connectors
- Respostas no envelope padrão (api.responses)

Estrutura:
- routes/health/: health checks e readiness
- routes/info/: metadados da API
- routes/content/: artigos, landing pages e anúncios (placeholders)
- routes/integrations/: proxies para sistemas externos (OpenProject)
- errors.py: handlers globais de exceção

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
