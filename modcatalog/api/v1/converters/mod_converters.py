"""
Mod Converters

Converters between API layer and service layer schemas for mods and versions.
"""

from modcatalog.api.v1.schemas.requests import (
    ModCreateRequest,
    ModUpdateRequest,
    VersionCreateRequest,
)
from modcatalog.api.v1.schemas.responses import (
    DependencyResponse,
    ModResponse,
    VersionResponse,
)
from modcatalog.services.mod_service import (
    DependencyData,
    ModCreateData,
    ModData,
    ModUpdateData,
    VersionCreateData,
    VersionData,
)


def convert_mod_create_request(request: ModCreateRequest) -> ModCreateData:
    """Convert API create request to service layer data."""
    return ModCreateData(id=request.id, name=request.name, url=request.url)


def convert_mod_update_request(request: ModUpdateRequest) -> ModUpdateData:
    """Convert API update request to service layer data."""
    return ModUpdateData(id=request.id, name=request.name, url=request.url)


def convert_mod_data_to_response(data: ModData) -> ModResponse:
    """Convert service layer data to API response."""
    return ModResponse(id=data.id, name=data.name, url=data.url)


def convert_version_create_request(request: VersionCreateRequest) -> VersionCreateData:
    return VersionCreateData(
        id=request.id,
        name=request.name,
        url=request.url,
        minecraft=request.minecraft,
        loader=request.loader,
        changelog=request.changelog,
        dependencies=[
            DependencyData(id=dep.id, version=dep.version, required=dep.required)
            for dep in request.dependencies
        ],
    )


def convert_version_data_to_response(data: VersionData) -> VersionResponse:
    return VersionResponse(
        id=data.id,
        mod=data.mod,
        name=data.name,
        url=data.url,
        minecraft=data.minecraft,
        loader=data.loader,
        changelog=data.changelog,
        dependencies=[
            DependencyResponse.model_validate(dep) for dep in data.dependencies
        ],
    )
