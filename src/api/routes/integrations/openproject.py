"""Endpoints da integração OpenProject.

GET /api/integrations/openproject/projects/{project_id}
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse  # noqa: TC002 - FastAPI resolve as anotações em runtime

from api import responses
from api.connectors.openproject import OpenProjectError
from api.routes.integrations.error_mapping import error_response
from app.protocols import ProjectClientProtocol  # noqa: TC001

logger = logging.getLogger(__name__)

router = APIRouter()


def get_project_client(request: Request) -> ProjectClientProtocol:
    """Dependency: cliente montado pelo lifespan em app.state."""
    client = getattr(request.app.state, "openproject_client", None)
    if client is None:
        raise RuntimeError("openproject_client não inicializado no lifespan")
    return client


@router.get("/projects/{project_id}")
async def get_project(
    project_id: str,
    request: Request,
    client: Annotated[ProjectClientProtocol, Depends(get_project_client)],
) -> JSONResponse:
    """Busca um projeto no OpenProject.

    Returns:
        Envelope de sucesso com o ProjectRecord, ou envelope de erro com o
        status correspondente ao kind do erro.
    """
    if not project_id.strip():
        return responses.error("INVALID_PROJECT_ID", "Project ID is required", 400)

    logger.info(
        "openproject_project_requested",
        extra={
            "project_id": project_id,
            "client_ip": request.client.host if request.client else None,
            "user_agent": request.headers.get("user-agent"),
        },
    )

    result = await client.fetch_project(project_id)
    if isinstance(result, OpenProjectError):
        return error_response(result)
    return responses.success(result)
