"""Business logic for path redirects."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modcatalog.core.error_codes import CatalogErrorCode, ValidationErrorCode
from modcatalog.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from modcatalog.core.logger import get_logger
from modcatalog.entities.redirect import Redirect
from modcatalog.stores.database import Database

logger = get_logger(__name__)

# Served by the API and page routes, which are matched before redirect lookup
RESERVED_PREFIXES = ("api", "mods")


def normalize_redirect_path(raw: str) -> str:
    """
    Reduce a request path to its redirect key.

    The query string is dropped, then at most one leading and one trailing
    slash are removed: ``/foo/``, ``foo`` and ``/foo?x=1`` all become ``foo``.
    """
    path = raw
    if "?" in path:
        path = path[: path.index("?")]
    if path.startswith("/"):
        path = path[1:]
    if path.endswith("/"):
        path = path[:-1]
    return path


class RedirectCreateData(BaseModel):
    """Input payload for creating a redirect."""

    path: str = Field(..., min_length=1, max_length=1024)
    url: str = Field(..., min_length=1, max_length=2048)


class RedirectData(BaseModel):
    """Full redirect representation."""

    path: str
    url: str

    model_config = ConfigDict(from_attributes=True)


def _to_redirect_data(redirect: Redirect) -> RedirectData:
    return RedirectData.model_validate(redirect.to_json())


class RedirectService:
    """Service exposing redirect lookup and management."""

    def __init__(self, database: Database) -> None:
        self.store = database.redirects

    def resolve(self, raw_path: str) -> Optional[str]:
        """Return the redirect target for a request path, if one is stored."""
        redirect = self.store.get_by_path(normalize_redirect_path(raw_path))
        if redirect is None:
            return None
        return redirect.url

    def list_redirects(self) -> List[RedirectData]:
        return [_to_redirect_data(redirect) for redirect in self.store.get_all()]

    def get_redirect(self, path: str) -> Optional[RedirectData]:
        redirect = self.store.get_by_path(normalize_redirect_path(path))
        return _to_redirect_data(redirect) if redirect is not None else None

    def create_redirect(self, data: RedirectCreateData) -> RedirectData:
        path = normalize_redirect_path(data.path)
        if path.split("/", 1)[0] in RESERVED_PREFIXES:
            raise ValidationException(
                f"Redirect path is served by the application: {path}",
                ValidationErrorCode.INVALID_INPUT,
                details={"path": path},
            )
        if self.store.get_by_path(path) is not None:
            raise ConflictException(
                f"Redirect already exists: {path}",
                CatalogErrorCode.REDIRECT_EXISTS,
                details={"path": path},
            )
        return _to_redirect_data(self.store.create(path, data.url))

    def update_redirect(self, path: str, url: str) -> RedirectData:
        redirect = self._get_or_raise(path)
        redirect.set_url(url)
        return _to_redirect_data(redirect)

    def delete_redirect(self, path: str) -> bool:
        redirect = self.store.get_by_path(normalize_redirect_path(path))
        if redirect is None:
            return False
        return redirect.delete() > 0

    def _get_or_raise(self, path: str) -> Redirect:
        normalized = normalize_redirect_path(path)
        redirect = self.store.get_by_path(normalized)
        if redirect is None:
            raise NotFoundException(
                f"Redirect not found: {normalized}",
                CatalogErrorCode.REDIRECT_NOT_FOUND,
                details={"path": normalized},
            )
        return redirect


__all__ = [
    "RedirectService",
    "RedirectCreateData",
    "RedirectData",
    "normalize_redirect_path",
    "RESERVED_PREFIXES",
]
