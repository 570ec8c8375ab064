"""Router de integrações externas."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.integrations.openproject import router as openproject_router

router = APIRouter()

router.include_router(openproject_router, prefix="/openproject")
