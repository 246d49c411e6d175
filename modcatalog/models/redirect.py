"""Redirect SQLAlchemy model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class RedirectRecord(Base, TimestampMixin):
    """Maps a normalized request path (no leading/trailing slash) to a target URL."""

    __tablename__ = "redirects"

    path: Mapped[str] = mapped_column(String(1024), primary_key=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)

    def __repr__(self) -> str:
        return f"<RedirectRecord(path='{self.path}', url='{self.url}')>"


__all__ = ["RedirectRecord"]
