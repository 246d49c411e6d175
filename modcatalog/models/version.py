"""Version SQLAlchemy model."""

from typing import Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class VersionRecord(Base, TimestampMixin):
    """One released version of a mod, keyed by (mod, id)."""

    __tablename__ = "versions"

    mod: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("mods.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    minecraft: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    loader: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    changelog: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # JSON-encoded list of {"id", "version", "required"}
    dependencies: Mapped[str] = mapped_column(Text, nullable=False, default="[]")

    def __repr__(self) -> str:
        return f"<VersionRecord(mod='{self.mod}', id='{self.id}')>"


__all__ = ["VersionRecord"]
