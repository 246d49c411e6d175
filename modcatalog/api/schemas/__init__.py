"""
API Schemas

Pydantic models shared by all API versions.
"""

from .error import DebugErrorDetail, ErrorResponse, ValidationErrorDetail

__all__ = ["ErrorResponse", "DebugErrorDetail", "ValidationErrorDetail"]
