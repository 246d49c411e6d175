"""
Error Codes

Standardized error codes for modcatalog.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class DatabaseErrorCode(ErrorCode):
    """Database-related error codes."""

    CONNECTION_FAILED = "DATABASE_CONNECTION_FAILED"
    QUERY_FAILED = "DATABASE_QUERY_FAILED"


class APIErrorCode(ErrorCode):
    """API-related error codes."""

    INTERNAL_ERROR = "API_INTERNAL_ERROR"


class ValidationErrorCode(ErrorCode):
    """Validation-related error codes."""

    INVALID_INPUT = "VALIDATION_INVALID_INPUT"


class CatalogErrorCode(ErrorCode):
    """Mod catalog error codes."""

    MOD_NOT_FOUND = "CATALOG_MOD_NOT_FOUND"
    MOD_EXISTS = "CATALOG_MOD_EXISTS"
    VERSION_EXISTS = "CATALOG_VERSION_EXISTS"
    REDIRECT_NOT_FOUND = "CATALOG_REDIRECT_NOT_FOUND"
    REDIRECT_EXISTS = "CATALOG_REDIRECT_EXISTS"


# Error code to HTTP status mapping
#
# Error code values carry a domain prefix (DATABASE_*, API_*, CATALOG_*, ...)
# so they stay unique in responses and logs. Every new code needs an entry here.
ERROR_CODE_MAP: Mapping[ErrorCode, int] = MappingProxyType(
    {
        # Database errors
        DatabaseErrorCode.CONNECTION_FAILED: 503,
        DatabaseErrorCode.QUERY_FAILED: 500,
        # API errors
        APIErrorCode.INTERNAL_ERROR: 500,
        # Validation errors
        ValidationErrorCode.INVALID_INPUT: 400,
        # Catalog errors
        CatalogErrorCode.MOD_NOT_FOUND: 404,
        CatalogErrorCode.MOD_EXISTS: 409,
        CatalogErrorCode.VERSION_EXISTS: 409,
        CatalogErrorCode.REDIRECT_NOT_FOUND: 404,
        CatalogErrorCode.REDIRECT_EXISTS: 409,
    }
)


def get_http_status_code(error_code: ErrorCode | str) -> int:
    """
    Get HTTP status code for an error code.

    Args:
        error_code: Error code enum or string

    Returns:
        HTTP status code (defaults to 500 if not found)
    """
    if isinstance(error_code, ErrorCode):
        return ERROR_CODE_MAP.get(error_code, 500)

    for code, status in ERROR_CODE_MAP.items():
        if code.value == error_code:
            return status
    return 500
