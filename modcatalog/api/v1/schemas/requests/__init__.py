"""
V1 API Request Schemas

Request schemas for all API v1 endpoints.
"""

from .mod_requests import (
    DependencyRequest,
    ModCreateRequest,
    ModUpdateRequest,
    VersionCreateRequest,
)
from .redirect_requests import RedirectCreateRequest, RedirectUpdateRequest

__all__ = [
    "DependencyRequest",
    "ModCreateRequest",
    "ModUpdateRequest",
    "VersionCreateRequest",
    "RedirectCreateRequest",
    "RedirectUpdateRequest",
]
