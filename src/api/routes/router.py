"""Agregador de rotas — registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.content.router import router as content_router
from api.routes.health.router import router as health_router
from api.routes.info.router import router as info_router
from api.routes.integrations.router import router as integrations_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(info_router, prefix=API_PREFIX, tags=["info"])
    api_router.include_router(content_router, prefix=API_PREFIX, tags=["content"])
    api_router.include_router(
        integrations_router,
        prefix=f"{API_PREFIX}/integrations",
        tags=["integrations"],
    )

    return api_router
