"""Shared plumbing for the row-backed entity wrappers."""

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, update
from sqlalchemy.orm import InstrumentedAttribute

if TYPE_CHECKING:
    from modcatalog.stores.database import Database


class Entity:
    """
    In-memory copy of a single database row.

    Wrappers are not kept consistent with concurrent writers: each mutator is
    one independent statement and the in-memory field is overwritten with
    whatever the statement returned.
    """

    def __init__(self, database: "Database") -> None:
        self._database = database

    def _update_returning(
        self,
        record: type,
        criteria: ColumnElement[bool],
        column: InstrumentedAttribute,
        value: Any,
    ) -> Any:
        """Run ``UPDATE record SET column = value WHERE criteria RETURNING column``."""
        statement = (
            update(record)
            .where(criteria)
            .values({column.key: value})
            .returning(column)
            .execution_options(synchronize_session=False)
        )
        with self._database.session() as db:
            returned = db.execute(statement).scalar_one()
            db.commit()
        return returned
