"""
Core Package

Core configuration, error handling, and logging for modcatalog.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, parse_trust_proxy, settings
from .error_codes import (
    ERROR_CODE_MAP,
    APIErrorCode,
    CatalogErrorCode,
    DatabaseErrorCode,
    ValidationErrorCode,
    get_http_status_code,
)
from .exceptions import (
    ApplicationException,
    ConflictException,
    DatabaseException,
    NotFoundException,
    ValidationException,
)
from .logger import get_logger

__all__ = [
    # Configuration
    "Settings",
    "settings",
    "parse_trust_proxy",
    # Error handling
    "ERROR_CODE_MAP",
    "APIErrorCode",
    "CatalogErrorCode",
    "DatabaseErrorCode",
    "ValidationErrorCode",
    "get_http_status_code",
    # Exceptions
    "ApplicationException",
    "ConflictException",
    "DatabaseException",
    "NotFoundException",
    "ValidationException",
    # Logger
    "get_logger",
]
