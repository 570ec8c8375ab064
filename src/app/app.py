"""Entrypoint da Content Automation API.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.connectors.openproject import build_client_config
from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client, create_openproject_client
from app.observability import request_logging_middleware
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.protocols import ProjectClientProtocol

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha em staging/production)
    - Cria o pool httpx e o cliente OpenProject, salvo se injetado

    Shutdown:
    - Fecha o pool httpx criado aqui
    """
    base = get_base_settings()
    logger.info(
        "app_starting",
        extra={"environment": base.environment, "port": base.port},
    )
    validate_runtime_settings()

    http_pool = None
    if getattr(app.state, "openproject_client", None) is None:
        client_config = build_client_config()
        http_pool = create_http_client(client_config.timeout_seconds)
        app.state.openproject_client = create_openproject_client(
            http_client=http_pool,
            config=client_config,
        )

    yield

    logger.info("app_shutting_down", extra={"environment": base.environment})
    if http_pool is not None:
        await http_pool.aclose()
        app.state.openproject_client = None


def create_app(openproject_client: ProjectClientProtocol | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        openproject_client: Cliente de projetos injetado (testes). Se None,
            o lifespan cria um a partir do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Content Automation API",
        description="REST API for the Content Automation Platform",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.openproject_client = openproject_client

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(request_logging_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    port = get_base_settings().port
    logger.info("app_dev_server_starting", extra={"port": port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=port,
        reload=True,
    )


if __name__ == "__main__":
    main()
