from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from modcatalog.api import middleware as middleware_module
from modcatalog.api.factory import create_api
from modcatalog.services.mod_service import ModService


@pytest.fixture
def app(database, make_settings):
    return create_api(database=database, config=make_settings(health__check_database=True))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def create_mod(client, mod_id="waystones", name="Waystones"):
    response = client.post(
        "/api/v1/mods",
        json={"id": mod_id, "name": name, "url": f"https://example.com/{mod_id}"},
    )
    assert response.status_code == 201
    return response.json()


# API

def test_mod_crud(client):
    assert create_mod(client) == {
        "id": "waystones",
        "name": "Waystones",
        "url": "https://example.com/waystones",
    }
    assert [m["id"] for m in client.get("/api/v1/mods").json()] == ["waystones"]

    response = client.patch("/api/v1/mods/waystones", json={"name": "Waystones Reborn"})
    assert response.status_code == 200
    assert response.json()["name"] == "Waystones Reborn"

    assert client.delete("/api/v1/mods/waystones").status_code == 200
    assert client.get("/api/v1/mods/waystones").status_code == 404


def test_missing_mod_uses_error_envelope(client):
    response = client.get("/api/v1/mods/missing")

    assert response.status_code == 404
    assert response.json()["errors"] == ["Mod not found"]


def test_duplicate_mod_is_conflict(client):
    create_mod(client)

    response = client.post(
        "/api/v1/mods", json={"id": "waystones", "name": "Again", "url": "https://x"}
    )

    assert response.status_code == 409
    assert response.json()["code"] == "CATALOG_MOD_EXISTS"


def test_versions_follow_renamed_mod(client):
    create_mod(client)
    response = client.post(
        "/api/v1/mods/waystones/versions",
        json={
            "id": "1.0.0",
            "name": "Waystones 1.0.0",
            "url": "https://example.com/waystones/1.0.0",
            "minecraft": "1.20.1",
            "dependencies": [{"id": "balm", "version": ">=7"}],
        },
    )
    assert response.status_code == 201

    client.patch("/api/v1/mods/waystones", json={"id": "waystones-reborn"})
    versions = client.get("/api/v1/mods/waystones-reborn/versions").json()

    assert len(versions) == 1
    assert versions[0]["mod"] == "waystones-reborn"
    assert versions[0]["dependencies"] == [{"id": "balm", "version": ">=7", "required": True}]

    assert client.delete("/api/v1/mods/waystones-reborn/versions/1.0.0").status_code == 200
    assert client.delete("/api/v1/mods/waystones-reborn/versions/1.0.0").status_code == 404


def test_validation_errors_are_400_with_details(client):
    response = client.post("/api/v1/mods", json={"name": "No id"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert {"loc", "msg", "type"} <= set(errors[0])
    assert ["body", "id"] in [error["loc"] for error in errors]


def test_unknown_api_endpoint_is_json_404(client):
    for method, path in [("GET", "/api/nope"), ("POST", "/api/v1/nothing"), ("GET", "/api")]:
        response = client.request(method, path)
        assert response.status_code == 404
        assert response.json() == {"errors": ["The specified endpoint could not be found."]}


def test_health_reports_database(client):
    body = client.get("/api/v1/health").json()

    assert body["status"] == "healthy"
    assert body["components"]["database"]["status"] == "healthy"


def test_redirect_api_normalizes_paths(client):
    response = client.post("/api/v1/redirects", json={"path": "/discord/", "url": "https://discord.gg/x"})

    assert response.status_code == 201
    assert response.json()["path"] == "discord"
    assert client.get("/api/v1/redirects/discord").json()["url"] == "https://discord.gg/x"

    client.put("/api/v1/redirects/discord", json={"url": "https://discord.gg/y"})
    assert client.get("/api/v1/redirects/discord").json()["url"] == "https://discord.gg/y"
    assert client.delete("/api/v1/redirects/discord").status_code == 200


# Redirect lookup

@pytest.mark.parametrize("path", ["/foo/", "/foo", "/foo?x=1"])
def test_redirect_lookup(client, database, path):
    database.redirects.create("foo", "https://example.com/foo")

    response = client.get(path, follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == "https://example.com/foo"


def test_unknown_path_is_404(client):
    response = client.get("/nowhere", follow_redirects=False)

    assert response.status_code == 404
    assert response.json() == {"errors": ["The specified page could not be found."]}


# Middleware chain

def test_security_headers(client):
    headers = client.get("/api/v1/mods").headers

    assert headers["x-frame-options"] == "SAMEORIGIN"
    assert headers["x-content-type-options"] == "nosniff"
    assert headers["referrer-policy"] == "same-origin"
    assert "script-src 'self' 'unsafe-inline' 'unsafe-eval'" in headers["content-security-policy"]


def test_cors_allows_any_origin(client):
    response = client.get("/api/v1/mods", headers={"Origin": "https://elsewhere.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_static_assets_served_before_routes(client):
    response = client.get("/css/app.css")
    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]

    index = client.get("/")
    assert index.status_code == 200
    assert "modcatalog" in index.text

    assert client.get("/index").status_code == 200


def test_successful_asset_requests_are_not_logged(client, monkeypatch):
    records = []
    recorder = SimpleNamespace(
        info=lambda *args: records.append(("info", args)),
        warning=lambda *args: records.append(("warning", args)),
        error=lambda *args, **kwargs: records.append(("error", args)),
        debug=lambda *args: None,
    )
    monkeypatch.setattr(middleware_module, "logger", recorder)

    client.get("/css/app.css")
    assert records == []

    client.get("/css/missing.css")
    assert [level for level, _ in records] == ["warning"]

    client.get("/api/v1/mods")
    assert [level for level, _ in records] == ["warning", "info"]


# Unexpected errors

def boom(*_args, **_kwargs):
    raise RuntimeError("boom")


def test_unexpected_error_is_opaque_in_production(app, monkeypatch):
    monkeypatch.setattr(ModService, "list_mods", boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/v1/mods")

    assert response.status_code == 500
    assert response.json()["errors"] == ["An unexpected error occurred."]


def test_unexpected_error_detail_in_development(database, make_settings, monkeypatch):
    app = create_api(database=database, config=make_settings(environment="development"))
    monkeypatch.setattr(ModService, "list_mods", boom)
    client = TestClient(app, raise_server_exceptions=False)

    (error,) = client.get("/api/v1/mods").json()["errors"]

    assert error["name"] == "RuntimeError"
    assert error["message"] == "boom"
    assert "RuntimeError: boom" in error["stack"]


# Pages

def test_mod_edit_page_renders_form(client):
    create_mod(client)

    response = client.get("/mods/waystones/edit")

    assert response.status_code == 200
    assert 'name="name"' in response.text
    assert 'value="Waystones"' in response.text


def test_mod_edit_form_post_updates_changed_fields(client):
    create_mod(client)

    response = client.post(
        "/mods/waystones/edit",
        data={"id": "waystones", "name": "Waystones Reborn", "url": ""},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/mods/waystones/edit"
    mod = client.get("/api/v1/mods/waystones").json()
    assert mod["name"] == "Waystones Reborn"
    assert mod["url"] == "https://example.com/waystones"


def test_version_form_creates_version(client):
    create_mod(client)
    assert client.get("/mods/waystones/versions/new").status_code == 200

    response = client.post(
        "/mods/waystones/versions/new",
        data={
            "id": "2.0.0",
            "name": "Waystones 2.0.0",
            "url": "https://example.com/waystones/2.0.0",
            "minecraft": "1.20.1",
            "loader": "fabric",
            "changelog": "",
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    (version,) = client.get("/api/v1/mods/waystones/versions").json()
    assert version["minecraft"] == "1.20.1"
    assert version["loader"] == "fabric"
    assert version["changelog"] is None


def test_self_dependency_is_rejected(client):
    create_mod(client)

    response = client.post(
        "/api/v1/mods/waystones/versions",
        json={
            "id": "1.0.0",
            "name": "Waystones 1.0.0",
            "url": "https://example.com/waystones/1.0.0",
            "dependencies": [{"id": "waystones"}],
        },
    )

    assert response.status_code == 400
    (error,) = response.json()["errors"]
    assert error["msg"] == "Version 1.0.0 cannot depend on its own mod"
    assert response.json()["code"] == "VALIDATION_INVALID_INPUT"


def test_numeric_trust_proxy_setting_builds_app(database, make_settings):
    app = create_api(database=database, config=make_settings(trust_proxy="1.5"))

    with TestClient(app) as client:
        assert client.get("/api/v1/mods").status_code == 200


def test_version_form_marks_seeded_loader_selected(client):
    create_mod(client)

    html = client.get("/mods/waystones/versions/new").text

    assert '<option selected value="forge">forge</option>' in html
    assert "&lt;option" not in html


def test_redirect_shadowed_by_page_route_is_rejected(client):
    response = client.post("/api/v1/redirects", json={"path": "/mods", "url": "https://x"})

    assert response.status_code == 400
    assert client.get("/mods").status_code == 200
