from types import SimpleNamespace

import pytest

from modcatalog.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from modcatalog.services.redirect_service import (
    RedirectCreateData,
    RedirectService,
    normalize_redirect_path,
)


@pytest.mark.parametrize("raw", ["/foo/", "foo", "/foo?x=1", "/foo/?x=1&y=2", "foo/"])
def test_normalize_reduces_variants_to_one_key(raw):
    assert normalize_redirect_path(raw) == "foo"


def test_normalize_strips_only_one_slash_each_side():
    assert normalize_redirect_path("//foo//") == "/foo/"
    assert normalize_redirect_path("/docs/guide/") == "docs/guide"
    assert normalize_redirect_path("/") == ""


def make_service(redirects):
    store = SimpleNamespace(
        get_by_path=lambda path: redirects.get(path),
        get_all=lambda: list(redirects.values()),
        create=lambda path, url: redirects.setdefault(
            path, SimpleNamespace(path=path, url=url, to_json=lambda: {"path": path, "url": url})
        ),
    )
    return RedirectService(SimpleNamespace(redirects=store))


def test_resolve_normalizes_before_lookup():
    service = make_service({"foo": SimpleNamespace(url="https://example.com/foo")})

    assert service.resolve("/foo/?utm=1") == "https://example.com/foo"
    assert service.resolve("/bar") is None


def test_create_redirect_normalizes_and_rejects_duplicates():
    redirects = {}
    service = make_service(redirects)

    created = service.create_redirect(RedirectCreateData(path="/wiki/", url="https://wiki"))

    assert created.path == "wiki"
    assert "wiki" in redirects
    with pytest.raises(ConflictException):
        service.create_redirect(RedirectCreateData(path="wiki", url="https://other"))


def test_update_missing_redirect_raises():
    service = make_service({})

    with pytest.raises(NotFoundException):
        service.update_redirect("nope", "https://x")


@pytest.mark.parametrize("path", ["/mods", "mods/waystones/edit", "/api/v1/mods/"])
def test_create_redirect_rejects_paths_served_by_routes(path):
    redirects = {}
    service = make_service(redirects)

    with pytest.raises(ValidationException):
        service.create_redirect(RedirectCreateData(path=path, url="https://x"))

    assert redirects == {}


def test_create_redirect_allows_lookalike_prefix():
    service = make_service({})

    assert service.create_redirect(RedirectCreateData(path="modsite", url="https://x")).path == "modsite"
