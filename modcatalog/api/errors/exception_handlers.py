"""
Exception Handlers

Dedicated module for FastAPI-bound exception handling.
"""

import traceback
from typing import Any, Dict, List, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from modcatalog.api.schemas.error import (
    DebugErrorDetail,
    ErrorResponse,
    ValidationErrorDetail,
)
from modcatalog.core.config import Settings, settings
from modcatalog.core.error_codes import APIErrorCode, ValidationErrorCode
from modcatalog.core.exceptions import ApplicationException, ValidationException
from modcatalog.core.logger import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def _log_exception(request: Request, exc: Exception, status_code: int) -> None:
    """Log exception with appropriate level based on status code."""
    msg = "Unhandled exception in %s %s: %s"
    args = (request.method, request.url.path, str(exc))

    if status_code >= 500:
        logger.error(msg, *args, exc_info=exc)
    elif status_code >= 400:
        logger.warning(msg, *args)
    else:
        logger.info(msg, *args)


def _settings_for(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or settings


def _build_response(
    errors: List[Any],
    status_code: int,
    code: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    payload = ErrorResponse(errors=errors, code=code)
    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def _validation_details(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        ValidationErrorDetail(
            loc=list(error.get("loc", ())),
            msg=str(error.get("msg", "")),
            type=str(error.get("type", ValidationErrorCode.INVALID_INPUT.value)),
        ).model_dump()
        for error in errors
    ]


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for all unhandled exceptions.

    Args:
        request: FastAPI request object
        exc: Exception that was raised

    Returns:
        JSONResponse with an ``errors`` list
    """
    # Request and payload validation
    if isinstance(exc, (RequestValidationError, ValidationError)):
        _log_exception(request, exc, 400)
        return _build_response(
            _validation_details(exc.errors()),
            400,
            code=ValidationErrorCode.INVALID_INPUT.value,
        )

    if isinstance(exc, ValidationException):
        _log_exception(request, exc, 400)
        detail = ValidationErrorDetail(
            loc=list(exc.details.get("loc", [])),
            msg=exc.message,
            type=str(exc.code or ValidationErrorCode.INVALID_INPUT.value),
        )
        return _build_response([detail.model_dump()], 400, code=detail.type)

    # Custom application exceptions
    if isinstance(exc, ApplicationException):
        status_code = exc.http_status
        _log_exception(request, exc, status_code)
        if status_code >= 500:
            return _unexpected_error_response(request, exc)
        return _build_response([exc.message], status_code, code=exc.code)

    # Starlette/FastAPI HTTP exceptions
    if isinstance(exc, StarletteHTTPException):
        _log_exception(request, exc, exc.status_code)
        return _build_response(
            [exc.detail],
            exc.status_code,
            code=f"HTTP_{exc.status_code}",
            headers=getattr(exc, "headers", None),
        )

    # All other exceptions
    _log_exception(request, exc, 500)
    return _unexpected_error_response(request, exc)


def _unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    if _settings_for(request).is_development:
        detail = DebugErrorDetail(
            message=str(exc),
            stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            name=exc.__class__.__name__,
        )
        errors: List[Any] = [detail.model_dump()]
    else:
        errors = [UNEXPECTED_ERROR_MESSAGE]
    return _build_response(errors, 500, code=APIErrorCode.INTERNAL_ERROR.value)
