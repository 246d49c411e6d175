"""
Redirects API

REST API endpoints for managing path redirects.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from modcatalog.api.v1.converters import (
    convert_redirect_create_request,
    convert_redirect_data_to_response,
)
from modcatalog.api.v1.dependencies import get_redirect_service
from modcatalog.api.v1.schemas.requests import (
    RedirectCreateRequest,
    RedirectUpdateRequest,
)
from modcatalog.api.v1.schemas.responses import DeleteResponse, RedirectResponse
from modcatalog.core.logger import get_logger
from modcatalog.services.redirect_service import RedirectService

logger = get_logger(__name__)

router = APIRouter(prefix="/redirects", tags=["redirects"])


@router.get("", response_model=List[RedirectResponse])
async def list_redirects(
    service: RedirectService = Depends(get_redirect_service),
) -> List[RedirectResponse]:
    return [convert_redirect_data_to_response(r) for r in service.list_redirects()]


@router.post("", response_model=RedirectResponse, status_code=status.HTTP_201_CREATED)
async def create_redirect(
    request: RedirectCreateRequest,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    logger.info("API: Creating redirect %s -> %s", request.path, request.url)
    redirect = service.create_redirect(convert_redirect_create_request(request))
    return convert_redirect_data_to_response(redirect)


@router.get("/{path:path}", response_model=RedirectResponse)
async def get_redirect(
    path: str, service: RedirectService = Depends(get_redirect_service)
) -> RedirectResponse:
    redirect = service.get_redirect(path)
    if not redirect:
        raise HTTPException(status_code=404, detail="Redirect not found")
    return convert_redirect_data_to_response(redirect)


@router.put("/{path:path}", response_model=RedirectResponse)
async def update_redirect(
    path: str,
    request: RedirectUpdateRequest,
    service: RedirectService = Depends(get_redirect_service),
) -> RedirectResponse:
    logger.info("API: Updating redirect: %s", path)
    redirect = service.update_redirect(path, request.url)
    return convert_redirect_data_to_response(redirect)


@router.delete("/{path:path}", response_model=DeleteResponse)
async def delete_redirect(
    path: str, service: RedirectService = Depends(get_redirect_service)
) -> DeleteResponse:
    logger.info("API: Deleting redirect: %s", path)
    if not service.delete_redirect(path):
        raise HTTPException(status_code=404, detail="Redirect not found")
    return DeleteResponse(message="Redirect deleted successfully")


__all__ = ["router"]
