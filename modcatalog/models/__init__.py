"""
Models Package

SQLAlchemy table models for modcatalog.
"""

from .base import Base, TimestampMixin
from .mod import ModRecord
from .redirect import RedirectRecord
from .version import VersionRecord

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Database models
    "ModRecord",
    "VersionRecord",
    "RedirectRecord",
]
