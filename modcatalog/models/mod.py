"""Mod SQLAlchemy model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class ModRecord(Base, TimestampMixin):
    """A catalogued mod. The id is the public slug, not a generated key."""

    __tablename__ = "mods"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    def __repr__(self) -> str:
        return f"<ModRecord(id='{self.id}', name='{self.name}')>"


__all__ = ["ModRecord"]
