"""
Mods API

REST API endpoints for mods and their versions.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from modcatalog.api.v1.converters import (
    convert_mod_create_request,
    convert_mod_data_to_response,
    convert_mod_update_request,
    convert_version_create_request,
    convert_version_data_to_response,
)
from modcatalog.api.v1.dependencies import get_mod_service
from modcatalog.api.v1.schemas.requests import (
    ModCreateRequest,
    ModUpdateRequest,
    VersionCreateRequest,
)
from modcatalog.api.v1.schemas.responses import (
    DeleteResponse,
    ModResponse,
    VersionResponse,
)
from modcatalog.core.logger import get_logger
from modcatalog.services.mod_service import ModService

logger = get_logger(__name__)

router = APIRouter(prefix="/mods", tags=["mods"])


@router.get("", response_model=List[ModResponse])
async def list_mods(service: ModService = Depends(get_mod_service)) -> List[ModResponse]:
    mods = service.list_mods()
    logger.debug("API: Retrieved %d mods", len(mods))
    return [convert_mod_data_to_response(mod) for mod in mods]


@router.post("", response_model=ModResponse, status_code=status.HTTP_201_CREATED)
async def create_mod(
    request: ModCreateRequest, service: ModService = Depends(get_mod_service)
) -> ModResponse:
    """
    Register a new mod.

    Raises:
        ConflictException: If a mod with the same id exists (409)
    """
    logger.info("API: Creating mod '%s'", request.id)
    mod = service.create_mod(convert_mod_create_request(request))
    return convert_mod_data_to_response(mod)


@router.get("/{mod_id}", response_model=ModResponse)
async def get_mod(mod_id: str, service: ModService = Depends(get_mod_service)) -> ModResponse:
    mod = service.get_mod(mod_id)
    if not mod:
        raise HTTPException(status_code=404, detail="Mod not found")
    return convert_mod_data_to_response(mod)


@router.patch("/{mod_id}", response_model=ModResponse)
async def update_mod(
    mod_id: str,
    request: ModUpdateRequest,
    service: ModService = Depends(get_mod_service),
) -> ModResponse:
    """
    Update a mod. Only fields present in the body are changed.

    Changing ``id`` carries the mod's versions along.
    """
    logger.info("API: Updating mod: %s", mod_id)
    mod = service.update_mod(mod_id, convert_mod_update_request(request))
    return convert_mod_data_to_response(mod)


@router.delete("/{mod_id}", response_model=DeleteResponse)
async def delete_mod(
    mod_id: str, service: ModService = Depends(get_mod_service)
) -> DeleteResponse:
    logger.info("API: Deleting mod: %s", mod_id)
    if not service.delete_mod(mod_id):
        raise HTTPException(status_code=404, detail="Mod not found")
    return DeleteResponse(message="Mod deleted successfully")


@router.get("/{mod_id}/versions", response_model=List[VersionResponse])
async def list_versions(
    mod_id: str, service: ModService = Depends(get_mod_service)
) -> List[VersionResponse]:
    versions = service.list_versions(mod_id)
    return [convert_version_data_to_response(version) for version in versions]


@router.post(
    "/{mod_id}/versions",
    response_model=VersionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_version(
    mod_id: str,
    request: VersionCreateRequest,
    service: ModService = Depends(get_mod_service),
) -> VersionResponse:
    logger.info("API: Adding version '%s' to mod %s", request.id, mod_id)
    version = service.add_version(mod_id, convert_version_create_request(request))
    return convert_version_data_to_response(version)


@router.delete("/{mod_id}/versions/{version_id}", response_model=DeleteResponse)
async def delete_version(
    mod_id: str, version_id: str, service: ModService = Depends(get_mod_service)
) -> DeleteResponse:
    logger.info("API: Deleting version %s of mod %s", version_id, mod_id)
    if not service.delete_version(mod_id, version_id):
        raise HTTPException(status_code=404, detail="Version not found")
    return DeleteResponse(message="Version deleted successfully")


__all__ = ["router"]
