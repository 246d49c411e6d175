import pytest

from modcatalog.core.error_codes import (
    ERROR_CODE_MAP,
    APIErrorCode,
    CatalogErrorCode,
    DatabaseErrorCode,
    ValidationErrorCode,
    get_http_status_code,
)


@pytest.mark.parametrize(
    "code",
    [
        *DatabaseErrorCode,
        *APIErrorCode,
        *ValidationErrorCode,
        *CatalogErrorCode,
    ],
)
def test_every_code_has_a_status(code):
    assert code in ERROR_CODE_MAP


def test_status_lookup_by_value():
    assert get_http_status_code("CATALOG_MOD_EXISTS") == 409
    assert get_http_status_code(CatalogErrorCode.REDIRECT_NOT_FOUND) == 404
    assert get_http_status_code("UNKNOWN") == 500
