"""Redirect data access layer."""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import insert, select

from modcatalog.core.logger import get_logger
from modcatalog.entities.redirect import Redirect
from modcatalog.models.redirect import RedirectRecord

if TYPE_CHECKING:
    from modcatalog.stores.database import Database

logger = get_logger(__name__)

_redirects = RedirectRecord.__table__


class RedirectStore:
    """Lookup table of normalized paths to redirect targets."""

    def __init__(self, database: "Database") -> None:
        self._database = database

    def get_by_path(self, path: str) -> Optional[Redirect]:
        """Exact match on an already normalized path."""
        with self._database.session() as db:
            row = (
                db.execute(select(_redirects).where(_redirects.c.path == path))
                .mappings()
                .first()
            )
        return Redirect(row, self._database) if row is not None else None

    def get_all(self) -> List[Redirect]:
        with self._database.session() as db:
            rows = (
                db.execute(select(_redirects).order_by(_redirects.c.path))
                .mappings()
                .all()
            )
        return [Redirect(row, self._database) for row in rows]

    def create(self, path: str, url: str) -> Redirect:
        with self._database.session() as db:
            row = (
                db.execute(
                    insert(_redirects)
                    .values(path=path, url=url)
                    .returning(*_redirects.c)
                )
                .mappings()
                .one()
            )
            db.commit()
        logger.info("Created redirect %s -> %s", path, url)
        return Redirect(row, self._database)


__all__ = ["RedirectStore"]
