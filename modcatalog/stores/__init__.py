"""
Stores Package

Data persistence for modcatalog.

Only the database core is re-exported here; the catalog stores are imported
from their modules (or reached through ``Database.mods`` / ``Database.redirects``)
so that the table models can import ``Base`` without a cycle.
"""

from .database import Base, Database, PoolStatus

__all__ = [
    "Base",
    "Database",
    "PoolStatus",
]
