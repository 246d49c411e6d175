"""Redirect entity wrapper."""

from typing import TYPE_CHECKING, Any, Dict, Mapping

from sqlalchemy import delete

from modcatalog.entities.base import Entity
from modcatalog.models.redirect import RedirectRecord

if TYPE_CHECKING:
    from modcatalog.stores.database import Database


class Redirect(Entity):
    """A stored redirect from a normalized path to a target URL."""

    def __init__(self, row: Mapping[str, Any], database: "Database") -> None:
        super().__init__(database)
        self._path: str = row["path"]
        self._url: str = row["url"]

    @property
    def path(self) -> str:
        return self._path

    @property
    def url(self) -> str:
        return self._url

    def set_url(self, url: str) -> None:
        self._url = self._update_returning(
            RedirectRecord,
            RedirectRecord.path == self._path,
            RedirectRecord.url,
            url,
        )

    def delete(self) -> int:
        with self._database.session() as db:
            result = db.execute(
                delete(RedirectRecord).where(RedirectRecord.path == self._path)
            )
            db.commit()
        return result.rowcount

    def to_json(self) -> Dict[str, Any]:
        return {"path": self._path, "url": self._url}

    def __repr__(self) -> str:
        return f"<Redirect(path='{self._path}', url='{self._url}')>"


__all__ = ["Redirect"]
