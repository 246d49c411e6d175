"""Mod API request schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field

from modcatalog.services.mod_service import MOD_ID_PATTERN


class ModCreateRequest(BaseModel):
    """Request model for registering a mod."""

    id: str = Field(
        ..., min_length=1, max_length=255, pattern=MOD_ID_PATTERN, description="Mod identifier"
    )
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    url: str = Field(..., min_length=1, max_length=2048, description="Project page URL")


class ModUpdateRequest(BaseModel):
    """Request model for updating a mod. Omitted fields are left unchanged."""

    id: Optional[str] = Field(
        None, min_length=1, max_length=255, pattern=MOD_ID_PATTERN, description="New identifier"
    )
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="New name")
    url: Optional[str] = Field(None, min_length=1, max_length=2048, description="New URL")


class DependencyRequest(BaseModel):
    id: str = Field(..., min_length=1, description="Id of the required mod")
    version: Optional[str] = Field(None, description="Version constraint")
    required: bool = Field(True, description="False for optional dependencies")


class VersionCreateRequest(BaseModel):
    """Request model for adding a version to a mod."""

    id: str = Field(..., min_length=1, max_length=255, description="Version identifier")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    url: str = Field(..., min_length=1, max_length=2048, description="Download URL")
    minecraft: Optional[str] = Field(None, max_length=64, description="Game version")
    loader: Optional[str] = Field(None, max_length=64, description="Mod loader")
    changelog: Optional[str] = Field(None, description="Changelog text")
    dependencies: List[DependencyRequest] = Field(
        default_factory=list, description="Other mods this version depends on"
    )
