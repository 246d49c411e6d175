"""
API Version 1 Package

Version 1 of the modcatalog API endpoints.
"""

from fastapi import APIRouter

from .endpoints import health_router, mods_router, redirects_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(mods_router)
router.include_router(redirects_router)

__all__ = ["router"]
