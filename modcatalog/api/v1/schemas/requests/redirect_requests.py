"""Redirect API request schemas."""

from pydantic import BaseModel, Field


class RedirectCreateRequest(BaseModel):
    """Request model for creating a redirect."""

    path: str = Field(
        ...,
        min_length=1,
        max_length=1024,
        description="Request path; slashes and query string are normalized away",
    )
    url: str = Field(..., min_length=1, max_length=2048, description="Redirect target")


class RedirectUpdateRequest(BaseModel):
    """Request model for changing a redirect target."""

    url: str = Field(..., min_length=1, max_length=2048, description="New redirect target")
