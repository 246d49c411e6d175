"""
modcatalog Package

Mod catalog backend with redirects, built on FastAPI and SQLAlchemy,
plus a headless form builder for editing catalog entries.
"""

__version__ = "0.1.0"

__all__ = [
    "api",
    "core",
    "entities",
    "models",
    "services",
    "stores",
    "ui",
]
