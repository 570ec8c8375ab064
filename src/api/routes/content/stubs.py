"""Factory de routers placeholder para recursos de conteúdo.

Os recursos ainda não têm persistência: listagem devolve lista vazia,
criação devolve objeto vazio e operações por id respondem 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from api import responses


def create_stub_router(singular: str, plural: str) -> APIRouter:
    """Cria router CRUD placeholder.

    Args:
        singular: Nome do recurso no singular (ex: "Article").
        plural: Nome do recurso no plural (ex: "Articles").

    Returns:
        APIRouter com GET/POST na raiz e GET/PUT/DELETE por id.
    """
    router = APIRouter()

    @router.get("")
    @router.get("/", include_in_schema=False)
    async def list_items() -> JSONResponse:
        # TODO: listar do repositório quando a camada de persistência existir
        return responses.success([], f"{plural} retrieved successfully")

    @router.get("/{item_id}")
    async def get_item(item_id: str) -> JSONResponse:
        return responses.not_found(singular)

    @router.post("")
    @router.post("/", include_in_schema=False)
    async def create_item(
        payload: dict[str, Any] | None = Body(default=None),  # noqa: B008
    ) -> JSONResponse:
        return responses.created({}, f"{singular} created successfully")

    @router.put("/{item_id}")
    async def update_item(
        item_id: str,
        payload: dict[str, Any] | None = Body(default=None),  # noqa: B008
    ) -> JSONResponse:
        return responses.not_found(singular)

    @router.delete("/{item_id}")
    async def delete_item(item_id: str) -> JSONResponse:
        return responses.not_found(singular)

    return router
