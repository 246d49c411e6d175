"""Mod data access layer."""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import insert, select

from modcatalog.core.logger import get_logger
from modcatalog.entities.mod import Mod
from modcatalog.models.mod import ModRecord

if TYPE_CHECKING:
    from modcatalog.stores.database import Database

logger = get_logger(__name__)

_mods = ModRecord.__table__


class ModStore:
    """Lookup and creation of mods; per-row operations live on ``Mod``."""

    def __init__(self, database: "Database") -> None:
        self._database = database

    def get_all(self) -> List[Mod]:
        with self._database.session() as db:
            rows = db.execute(select(_mods).order_by(_mods.c.id)).mappings().all()
        return [Mod(row, self._database) for row in rows]

    def get_by_id(self, mod_id: str) -> Optional[Mod]:
        with self._database.session() as db:
            row = (
                db.execute(select(_mods).where(_mods.c.id == mod_id))
                .mappings()
                .first()
            )
        if row is None:
            logger.debug("Mod not found: %s", mod_id)
            return None
        return Mod(row, self._database)

    def create(self, mod_id: str, name: str, url: str) -> Mod:
        with self._database.session() as db:
            row = (
                db.execute(
                    insert(_mods)
                    .values(id=mod_id, name=name, url=url)
                    .returning(*_mods.c)
                )
                .mappings()
                .one()
            )
            db.commit()
        logger.info("Created mod %s", mod_id)
        return Mod(row, self._database)


__all__ = ["ModStore"]
