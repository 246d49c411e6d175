"""Redirect converters."""

from modcatalog.api.v1.schemas.requests import RedirectCreateRequest
from modcatalog.api.v1.schemas.responses import RedirectResponse
from modcatalog.services.redirect_service import RedirectCreateData, RedirectData


def convert_redirect_create_request(request: RedirectCreateRequest) -> RedirectCreateData:
    return RedirectCreateData(path=request.path, url=request.url)


def convert_redirect_data_to_response(data: RedirectData) -> RedirectResponse:
    return RedirectResponse(path=data.path, url=data.url)
