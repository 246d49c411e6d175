"""
FastAPI router for the modcatalog API.

Mounted at ``/api``: the version 1 router, then a catch-all that answers
any other ``/api`` path with a JSON 404.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from modcatalog.api.schemas.error import ErrorResponse
from modcatalog.api.v1 import router as v1_router

ENDPOINT_NOT_FOUND_MESSAGE = "The specified endpoint could not be found."

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()
router.include_router(v1_router, prefix="/v1")


@router.api_route("", methods=ALL_METHODS, include_in_schema=False)
@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def endpoint_not_found(path: str = "") -> JSONResponse:
    payload = ErrorResponse(errors=[ENDPOINT_NOT_FOUND_MESSAGE])
    return JSONResponse(status_code=404, content=payload.model_dump(exclude_none=True))


__all__ = ["router", "ENDPOINT_NOT_FOUND_MESSAGE"]
