"""Router de conteúdo — artigos, landing pages e anúncios (placeholders)."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.content.stubs import create_stub_router

router = APIRouter()

router.include_router(create_stub_router("Article", "Articles"), prefix="/articles")
router.include_router(
    create_stub_router("Landing page", "Landing pages"),
    prefix="/landing-pages",
)
router.include_router(create_stub_router("Ad", "Ads"), prefix="/ads")
