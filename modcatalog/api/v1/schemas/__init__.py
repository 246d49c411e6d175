"""
V1 API Schemas Package

Pydantic models for v1 API request and response data.
"""

from .requests import (
    DependencyRequest,
    ModCreateRequest,
    ModUpdateRequest,
    RedirectCreateRequest,
    RedirectUpdateRequest,
    VersionCreateRequest,
)
from .responses import (
    DeleteResponse,
    DependencyResponse,
    HealthResponse,
    ModResponse,
    RedirectResponse,
    VersionResponse,
)

__all__ = [
    "DependencyRequest",
    "ModCreateRequest",
    "ModUpdateRequest",
    "RedirectCreateRequest",
    "RedirectUpdateRequest",
    "VersionCreateRequest",
    "DeleteResponse",
    "DependencyResponse",
    "HealthResponse",
    "ModResponse",
    "RedirectResponse",
    "VersionResponse",
]
