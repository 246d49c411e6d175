"""Mod API response schemas."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModResponse(BaseModel):
    """Full mod response."""

    id: str = Field(..., description="Mod identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Project page URL")

    model_config = ConfigDict(from_attributes=True)


class DependencyResponse(BaseModel):
    id: str = Field(..., description="Id of the required mod")
    version: Optional[str] = Field(None, description="Version constraint")
    required: bool = Field(True, description="False for optional dependencies")

    model_config = ConfigDict(from_attributes=True)


class VersionResponse(BaseModel):
    """Full version response."""

    id: str = Field(..., description="Version identifier")
    mod: str = Field(..., description="Owning mod identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Download URL")
    minecraft: Optional[str] = Field(None, description="Game version")
    loader: Optional[str] = Field(None, description="Mod loader")
    changelog: Optional[str] = Field(None, description="Changelog text")
    dependencies: List[DependencyResponse] = Field(
        default_factory=list, description="Declared dependencies"
    )

    model_config = ConfigDict(from_attributes=True)


class DeleteResponse(BaseModel):
    message: str = Field(..., description="Outcome message")


__all__ = ["ModResponse", "DependencyResponse", "VersionResponse", "DeleteResponse"]
