"""Business logic for managing mods and their versions."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modcatalog.core.error_codes import CatalogErrorCode, ValidationErrorCode
from modcatalog.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from modcatalog.core.logger import get_logger
from modcatalog.entities.mod import Mod
from modcatalog.entities.version import Version
from modcatalog.stores.database import Database

logger = get_logger(__name__)

MOD_ID_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$"


class ModCreateData(BaseModel):
    """Input payload for creating a mod."""

    id: str = Field(..., min_length=1, max_length=255, pattern=MOD_ID_PATTERN)
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=2048)


class ModUpdateData(BaseModel):
    """Input payload for updating a mod; ``None`` leaves a field untouched."""

    id: Optional[str] = Field(
        None, min_length=1, max_length=255, pattern=MOD_ID_PATTERN
    )
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    url: Optional[str] = Field(None, min_length=1, max_length=2048)


class ModData(BaseModel):
    """Full mod representation."""

    id: str = Field(..., description="Mod identifier")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Project page URL")

    model_config = ConfigDict(from_attributes=True)


class DependencyData(BaseModel):
    """A dependency of a version on another mod."""

    id: str = Field(..., min_length=1, description="Id of the required mod")
    version: Optional[str] = Field(None, description="Version constraint")
    required: bool = Field(True, description="False for optional dependencies")


class VersionCreateData(BaseModel):
    """Input payload for adding a version to a mod."""

    id: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=2048)
    minecraft: Optional[str] = Field(None, max_length=64)
    loader: Optional[str] = Field(None, max_length=64)
    changelog: Optional[str] = Field(None)
    dependencies: List[DependencyData] = Field(default_factory=list)


class VersionData(BaseModel):
    """Full version representation."""

    id: str
    mod: str
    name: str
    url: str
    minecraft: Optional[str] = None
    loader: Optional[str] = None
    changelog: Optional[str] = None
    dependencies: List[DependencyData] = Field(default_factory=list)


def _to_mod_data(mod: Mod) -> ModData:
    return ModData.model_validate(mod.to_json())


def _to_version_data(version: Version) -> VersionData:
    return VersionData.model_validate(version.to_json())


class ModService:
    """Service exposing mod and version operations."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.store = database.mods

    def get_mod_or_raise(self, mod_id: str) -> Mod:
        mod = self.store.get_by_id(mod_id)
        if mod is None:
            raise NotFoundException(
                f"Mod not found: {mod_id}",
                CatalogErrorCode.MOD_NOT_FOUND,
                details={"mod_id": mod_id},
            )
        return mod

    def list_mods(self) -> List[ModData]:
        return [_to_mod_data(mod) for mod in self.store.get_all()]

    def get_mod(self, mod_id: str) -> Optional[ModData]:
        mod = self.store.get_by_id(mod_id)
        if mod is None:
            return None
        return _to_mod_data(mod)

    def create_mod(self, data: ModCreateData) -> ModData:
        if self.store.get_by_id(data.id) is not None:
            raise ConflictException(
                f"Mod already exists: {data.id}",
                CatalogErrorCode.MOD_EXISTS,
                details={"mod_id": data.id},
            )
        return _to_mod_data(self.store.create(data.id, data.name, data.url))

    def update_mod(self, mod_id: str, data: ModUpdateData) -> ModData:
        """
        Apply the given changes one field at a time.

        Each field is its own statement, so a failure part-way leaves the
        earlier fields changed.
        """
        mod = self.get_mod_or_raise(mod_id)

        if data.id is not None and data.id != mod.id:
            if self.store.get_by_id(data.id) is not None:
                raise ConflictException(
                    f"Mod already exists: {data.id}",
                    CatalogErrorCode.MOD_EXISTS,
                    details={"mod_id": data.id},
                )
            mod.set_id(data.id)
            logger.info("Renamed mod %s to %s", mod_id, mod.id)
        if data.name is not None and data.name != mod.name:
            mod.set_name(data.name)
        if data.url is not None and data.url != mod.url:
            mod.set_url(data.url)

        return _to_mod_data(mod)

    def delete_mod(self, mod_id: str) -> bool:
        mod = self.store.get_by_id(mod_id)
        if mod is None:
            return False
        return mod.delete() > 0

    def list_versions(self, mod_id: str) -> List[VersionData]:
        mod = self.get_mod_or_raise(mod_id)
        return [_to_version_data(version) for version in mod.get_versions()]

    def add_version(self, mod_id: str, data: VersionCreateData) -> VersionData:
        mod = self.get_mod_or_raise(mod_id)
        if any(version.id == data.id for version in mod.get_versions()):
            raise ConflictException(
                f"Version {data.id} already exists for mod {mod_id}",
                CatalogErrorCode.VERSION_EXISTS,
                details={"mod_id": mod_id, "version_id": data.id},
            )
        if any(dependency.id == mod.id for dependency in data.dependencies):
            raise ValidationException(
                f"Version {data.id} cannot depend on its own mod",
                ValidationErrorCode.INVALID_INPUT,
                details={"mod_id": mod.id},
            )
        version = mod.add_version(data.model_dump())
        return _to_version_data(version)

    def delete_version(self, mod_id: str, version_id: str) -> bool:
        mod = self.get_mod_or_raise(mod_id)
        return mod.delete_version(version_id) > 0


__all__ = [
    "ModService",
    "ModCreateData",
    "ModUpdateData",
    "ModData",
    "DependencyData",
    "VersionCreateData",
    "VersionData",
    "MOD_ID_PATTERN",
]
