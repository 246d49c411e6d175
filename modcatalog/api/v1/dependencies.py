"""Request-scoped dependencies for v1 endpoints."""

from fastapi import Depends, Request

from modcatalog.services.mod_service import ModService
from modcatalog.services.redirect_service import RedirectService
from modcatalog.stores.database import Database


def get_database(request: Request) -> Database:
    """The database handle created by the application factory."""
    return request.app.state.database


def get_mod_service(database: Database = Depends(get_database)) -> ModService:
    return ModService(database)


def get_redirect_service(database: Database = Depends(get_database)) -> RedirectService:
    return RedirectService(database)
