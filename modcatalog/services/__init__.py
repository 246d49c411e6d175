"""
Services Package

Business logic for the mod catalog, sitting between the API and the stores.
"""

from .mod_service import ModService
from .redirect_service import RedirectService, normalize_redirect_path

__all__ = ["ModService", "RedirectService", "normalize_redirect_path"]
