"""Redirect API response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RedirectResponse(BaseModel):
    """Stored redirect."""

    path: str = Field(..., description="Normalized request path")
    url: str = Field(..., description="Redirect target")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["RedirectResponse"]
