"""
API Error Handling

FastAPI-specific error handling and response schemas.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from modcatalog.core.exceptions import ApplicationException

from .exception_handlers import UNEXPECTED_ERROR_MESSAGE, global_exception_handler


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers for the FastAPI application.

    Every exception type funnels into ``global_exception_handler`` so all
    error bodies share the same ``{"errors": [...]}`` shape.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(StarletteHTTPException, global_exception_handler)
    app.add_exception_handler(RequestValidationError, global_exception_handler)
    app.add_exception_handler(ValidationError, global_exception_handler)
    app.add_exception_handler(ApplicationException, global_exception_handler)


__all__ = [
    "UNEXPECTED_ERROR_MESSAGE",
    "global_exception_handler",
    "register_exception_handlers",
]
