"""Mod entity wrapper."""

import json
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Union

from sqlalchemy import delete, insert, select

from modcatalog.core.logger import get_logger
from modcatalog.entities.base import Entity
from modcatalog.entities.version import Version
from modcatalog.models.mod import ModRecord
from modcatalog.models.version import VersionRecord

if TYPE_CHECKING:
    from modcatalog.stores.database import Database

logger = get_logger(__name__)

_versions = VersionRecord.__table__


class Mod(Entity):
    """
    A mod row plus the operations that touch it.

    Every mutator issues a single statement and lets SQL client errors
    propagate; nothing here reports failure through return values.
    """

    def __init__(self, row: Mapping[str, Any], database: "Database") -> None:
        super().__init__(database)
        self._id: str = row["id"]
        self._name: str = row["name"]
        self._url: str = row["url"]

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> str:
        return self._url

    def delete(self) -> int:
        """Delete the mod row. Returns the number of rows removed."""
        with self._database.session() as db:
            result = db.execute(delete(ModRecord).where(ModRecord.id == self._id))
            db.commit()
        logger.info("Deleted mod %s (%d row(s))", self._id, result.rowcount)
        return result.rowcount

    def set_id(self, id: str) -> None:
        self._id = self._update_returning(
            ModRecord, ModRecord.id == self._id, ModRecord.id, id
        )

    def set_name(self, name: str) -> None:
        self._name = self._update_returning(
            ModRecord,
            (ModRecord.id == self._id) & (ModRecord.name == self._name),
            ModRecord.name,
            name,
        )

    def set_url(self, url: str) -> None:
        self._url = self._update_returning(
            ModRecord,
            (ModRecord.id == self._id) & (ModRecord.url == self._url),
            ModRecord.url,
            url,
        )

    def get_versions(self) -> List[Version]:
        with self._database.session() as db:
            rows = (
                db.execute(
                    select(_versions)
                    .where(_versions.c.mod == self._id)
                    .order_by(_versions.c.created_at, _versions.c.id)
                )
                .mappings()
                .all()
            )
        return [Version(row, self._database) for row in rows]

    def delete_version(self, version: Union[str, Version]) -> int:
        """Delete one of this mod's versions by id or wrapper."""
        version_id = version if isinstance(version, str) else version.id
        with self._database.session() as db:
            result = db.execute(
                delete(VersionRecord).where(
                    (VersionRecord.mod == self._id) & (VersionRecord.id == version_id)
                )
            )
            db.commit()
        return result.rowcount

    def add_version(self, version: Mapping[str, Any]) -> Version:
        """
        Insert a new version owned by this mod.

        Any ``mod`` key in ``version`` is ignored; the row is always scoped to
        this mod's id. Dependencies are stored as JSON text.
        """
        values = {key: value for key, value in version.items() if key != "mod"}
        values["mod"] = self._id
        values["dependencies"] = json.dumps(list(values.get("dependencies") or []))

        with self._database.session() as db:
            row = (
                db.execute(insert(_versions).values(values).returning(*_versions.c))
                .mappings()
                .one()
            )
            db.commit()

        logger.info("Added version %s to mod %s", row["id"], self._id)
        return Version(row, self._database)

    def to_json(self) -> Dict[str, Any]:
        return {"id": self._id, "name": self._name, "url": self._url}

    def __repr__(self) -> str:
        return f"<Mod(id='{self._id}', name='{self._name}')>"


__all__ = ["Mod"]
