"""Version entity wrapper."""

import json
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from sqlalchemy import delete

from modcatalog.entities.base import Entity
from modcatalog.models.version import VersionRecord

if TYPE_CHECKING:
    from modcatalog.stores.database import Database


def load_dependencies(raw: Any) -> List[Dict[str, Any]]:
    """Deserialize the stored dependency list."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, str):
        return json.loads(raw)
    return list(raw)


class Version(Entity):
    """A row of ``versions``; identified by the (mod, id) pair."""

    def __init__(self, row: Mapping[str, Any], database: "Database") -> None:
        super().__init__(database)
        self._id: str = row["id"]
        self._mod: str = row["mod"]
        self._name: str = row["name"]
        self._url: str = row["url"]
        self._minecraft: Optional[str] = row.get("minecraft")
        self._loader: Optional[str] = row.get("loader")
        self._changelog: Optional[str] = row.get("changelog")
        self._stored_dependencies: Optional[str] = row.get("dependencies")
        self._dependencies = load_dependencies(self._stored_dependencies)

    @property
    def id(self) -> str:
        return self._id

    @property
    def mod(self) -> str:
        return self._mod

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> str:
        return self._url

    @property
    def minecraft(self) -> Optional[str]:
        return self._minecraft

    @property
    def loader(self) -> Optional[str]:
        return self._loader

    @property
    def changelog(self) -> Optional[str]:
        return self._changelog

    @property
    def dependencies(self) -> List[Dict[str, Any]]:
        return self._dependencies

    def _row_key(self):
        return (VersionRecord.mod == self._mod) & (VersionRecord.id == self._id)

    def _set(self, column, previous: Any, value: Any) -> Any:
        # Nullable columns: IS NOT DISTINCT FROM also matches a NULL previous value
        return self._update_returning(
            VersionRecord,
            self._row_key() & column.is_not_distinct_from(previous),
            column,
            value,
        )

    def set_id(self, id: str) -> None:
        self._id = self._set(VersionRecord.id, self._id, id)

    def set_name(self, name: str) -> None:
        self._name = self._set(VersionRecord.name, self._name, name)

    def set_url(self, url: str) -> None:
        self._url = self._set(VersionRecord.url, self._url, url)

    def set_minecraft(self, minecraft: Optional[str]) -> None:
        self._minecraft = self._set(VersionRecord.minecraft, self._minecraft, minecraft)

    def set_loader(self, loader: Optional[str]) -> None:
        self._loader = self._set(VersionRecord.loader, self._loader, loader)

    def set_changelog(self, changelog: Optional[str]) -> None:
        self._changelog = self._set(VersionRecord.changelog, self._changelog, changelog)

    def set_dependencies(self, dependencies: List[Dict[str, Any]]) -> None:
        self._stored_dependencies = self._set(
            VersionRecord.dependencies,
            self._stored_dependencies,
            json.dumps(list(dependencies)),
        )
        self._dependencies = load_dependencies(self._stored_dependencies)

    def delete(self) -> int:
        with self._database.session() as db:
            result = db.execute(delete(VersionRecord).where(self._row_key()))
            db.commit()
        return result.rowcount

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "mod": self._mod,
            "name": self._name,
            "url": self._url,
            "minecraft": self._minecraft,
            "loader": self._loader,
            "changelog": self._changelog,
            "dependencies": self._dependencies,
        }

    def __repr__(self) -> str:
        return f"<Version(mod='{self._mod}', id='{self._id}')>"


__all__ = ["Version", "load_dependencies"]
