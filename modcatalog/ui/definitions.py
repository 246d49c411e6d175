"""Field definitions for the catalog edit forms."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Unset:
    """Marker returned by field getters when no value is stored for a key."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

class FieldDefinition(BaseModel):
    """
    Declarative description of one editable property.

    ``type`` is left as a free string: definitions come from outside the
    renderer and an unknown type must render as an error control instead of
    failing validation.
    """

    key: str
    name: str
    description: str = ""
    type: str
    default: Optional[Any] = None
    options: Optional[List[str]] = None
    is_number: bool = Field(False, alias="isNumber")
    autocomplete: Optional[List[str]] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


MINECRAFT_VERSIONS = [
    "1.21.1",
    "1.21",
    "1.20.6",
    "1.20.4",
    "1.20.2",
    "1.20.1",
    "1.20",
    "1.19.4",
    "1.19.2",
    "1.18.2",
    "1.17.1",
    "1.16.5",
    "1.15.2",
    "1.14.4",
    "1.12.2",
    "1.10.2",
    "1.8.9",
    "1.7.10",
]

LOADERS = ["forge", "neoforge", "fabric", "quilt"]

MOD_FIELDS = [
    FieldDefinition(
        key="id",
        name="ID",
        description="Unique identifier, used in URLs.\nChanging it moves every version with it.",
        type="input",
    ),
    FieldDefinition(key="name", name="Name", description="Display name.", type="input"),
    FieldDefinition(key="url", name="URL", description="Project page.", type="input"),
]

VERSION_FIELDS = [
    FieldDefinition(
        key="id",
        name="ID",
        description="Version identifier, unique within the mod.",
        type="input",
    ),
    FieldDefinition(key="name", name="Name", description="Display name.", type="input"),
    FieldDefinition(key="url", name="URL", description="Download page.", type="input"),
    FieldDefinition(
        key="minecraft",
        name="Minecraft",
        description="Game version this build targets.",
        type="input",
        autocomplete=MINECRAFT_VERSIONS,
    ),
    FieldDefinition(
        key="loader",
        name="Loader",
        description="Mod loader.",
        type="select",
        options=LOADERS,
    ),
    FieldDefinition(
        key="changelog",
        name="Changelog",
        description="What changed in this version.",
        type="textarea",
    ),
]


__all__ = [
    "FieldDefinition",
    "LOADERS",
    "MINECRAFT_VERSIONS",
    "MOD_FIELDS",
    "UNSET",
    "VERSION_FIELDS",
]
