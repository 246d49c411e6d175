"""
Redirect lookup

Last route of the application: any path that nothing else handled is looked
up in the redirect table and answered with a 301 to the stored target.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from modcatalog.api.router import ALL_METHODS
from modcatalog.api.schemas.error import ErrorResponse
from modcatalog.api.v1.dependencies import get_redirect_service
from modcatalog.core.logger import get_logger
from modcatalog.services.redirect_service import RedirectService

logger = get_logger(__name__)

PAGE_NOT_FOUND_MESSAGE = "The specified page could not be found."

router = APIRouter(tags=["redirects"])


@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def follow_redirect(
    request: Request,
    path: str,
    service: RedirectService = Depends(get_redirect_service),
) -> Response:
    target = service.resolve(request.url.path)
    if target is None:
        payload = ErrorResponse(errors=[PAGE_NOT_FOUND_MESSAGE])
        return JSONResponse(status_code=404, content=payload.model_dump(exclude_none=True))

    logger.debug("Redirecting %s to %s", request.url.path, target)
    return Response(status_code=301, headers={"Location": target})


__all__ = ["router", "PAGE_NOT_FOUND_MESSAGE"]
