"""
Custom Exceptions

Exception classes raised by stores and services and turned into the
``{"errors": [...], "code": ...}`` envelope by the API error handlers.

Raise with an ErrorCode member so the handler can pick the HTTP status;
chain the lower-level error with ``raise ... from e``.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from modcatalog.core.error_codes import ErrorCode


class ApplicationException(Exception):
    """Base exception for modcatalog errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    @property
    def code(self) -> Optional[str]:
        """Error code as a plain string (``None`` when unset)."""
        if self.error_code is None:
            return None
        return getattr(self.error_code, "value", self.error_code)

    @property
    def http_status(self) -> int:
        """HTTP status mapped from the error code; 500 without one."""
        if self.error_code:
            from modcatalog.core.error_codes import get_http_status_code

            return get_http_status_code(self.error_code)
        return 500

    def __str__(self) -> str:
        text = self.message
        if self.code:
            text += f" [{self.code}]"
        if self.details:
            text += f" Details: {self.details}"
        return text


class DatabaseException(ApplicationException):
    """A query, session or connection failure, or a row changed underneath a setter."""


class ValidationException(ApplicationException):
    """Business validation failure (HTTP 400, same as malformed requests)."""


class NotFoundException(ApplicationException):
    """A mod, version or redirect that does not exist."""


class ConflictException(ApplicationException):
    """A mod, version or redirect that already exists."""
