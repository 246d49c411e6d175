"""
API Error Response Schemas

Pydantic models for error responses. Every error body carries an
``errors`` list; entries are plain messages or structured details.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ValidationErrorDetail(BaseModel):
    """Individual validation error detail."""

    loc: List[Union[str, int]] = Field(
        default_factory=list, description="Location of the error in the input"
    )
    msg: str = Field(..., description="Error message")
    type: str = Field(..., description="Error type")


class DebugErrorDetail(BaseModel):
    """Exception detail exposed in development mode only."""

    message: str = Field(..., description="Exception message")
    stack: str = Field(..., description="Formatted traceback")
    name: str = Field(..., description="Exception class name")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {"errors": ["The specified endpoint could not be found."]},
                {
                    "errors": [
                        {
                            "loc": ["body", "name"],
                            "msg": "Field required",
                            "type": "missing",
                        }
                    ]
                },
            ]
        },
    )

    errors: List[Any] = Field(..., description="Error messages or details")
    code: Optional[str] = Field(
        None, description="Machine-readable error code", examples=["MOD_NOT_FOUND"]
    )
