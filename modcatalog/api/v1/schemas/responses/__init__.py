"""
V1 API Response Schemas

Response schemas for all API v1 endpoints.
"""

from .health_response import HealthResponse
from .mod_responses import (
    DeleteResponse,
    DependencyResponse,
    ModResponse,
    VersionResponse,
)
from .redirect_responses import RedirectResponse

__all__ = [
    "DeleteResponse",
    "DependencyResponse",
    "HealthResponse",
    "ModResponse",
    "RedirectResponse",
    "VersionResponse",
]
