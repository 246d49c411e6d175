"""
Entities Package

Row-backed wrappers around catalog records. Each wrapper is built from a raw
row mapping plus the shared ``Database`` handle.
"""

from .mod import Mod
from .redirect import Redirect
from .version import Version, load_dependencies

__all__ = ["Mod", "Version", "Redirect", "load_dependencies"]
