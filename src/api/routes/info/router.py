"""Endpoint de informações da API."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api import responses

API_NAME = "Content Automation API"
API_VERSION = "0.1.0"

router = APIRouter()


@router.get("")
@router.get("/", include_in_schema=False)
async def api_info() -> JSONResponse:
    """Nome, versão e mapa de endpoints da API."""
    return responses.success(
        {
            "name": API_NAME,
            "version": API_VERSION,
            "description": "REST API for the Content Automation Platform",
            "endpoints": {
                "articles": "/api/articles",
                "landingPages": "/api/landing-pages",
                "ads": "/api/ads",
                "openproject": "/api/integrations/openproject",
            },
            "health": "/health",
        }
    )
