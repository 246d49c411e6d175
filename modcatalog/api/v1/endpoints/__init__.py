"""
API Endpoints Package

FastAPI endpoint definitions for modcatalog.
"""

from .health import router as health_router
from .mods import router as mods_router
from .redirects import router as redirects_router

__all__ = [
    "health_router",
    "mods_router",
    "redirects_router",
]
