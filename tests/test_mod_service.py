from types import SimpleNamespace

import pytest

from modcatalog.core.error_codes import CatalogErrorCode
from modcatalog.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from modcatalog.services.mod_service import (
    DependencyData,
    ModCreateData,
    ModService,
    ModUpdateData,
    VersionCreateData,
)


class FakeMod:
    def __init__(self, mod_id="waystones", name="Waystones", url="https://example.com"):
        self.id = mod_id
        self.name = name
        self.url = url
        self.calls = []
        self.versions = []

    def set_id(self, value):
        self.calls.append(("id", value))
        self.id = value

    def set_name(self, value):
        self.calls.append(("name", value))
        self.name = value

    def set_url(self, value):
        self.calls.append(("url", value))
        self.url = value

    def get_versions(self):
        return self.versions

    def to_json(self):
        return {"id": self.id, "name": self.name, "url": self.url}


def make_service(mods=None):
    mods = dict(mods or {})
    store = SimpleNamespace(
        get_by_id=lambda mod_id: mods.get(mod_id),
        get_all=lambda: list(mods.values()),
        create=lambda *_args: pytest.fail("unexpected create"),
    )
    return ModService(SimpleNamespace(mods=store)), store


def test_create_mod_rejects_duplicate_id():
    service, _ = make_service({"waystones": FakeMod()})

    with pytest.raises(ConflictException) as excinfo:
        service.create_mod(ModCreateData(id="waystones", name="Again", url="https://x"))

    assert excinfo.value.error_code == CatalogErrorCode.MOD_EXISTS
    assert excinfo.value.http_status == 409


def test_create_mod_delegates_to_store(monkeypatch):
    service, store = make_service()
    created = {}

    def fake_create(mod_id, name, url):
        created.update(id=mod_id, name=name, url=url)
        return FakeMod(mod_id, name, url)

    monkeypatch.setattr(store, "create", fake_create)

    result = service.create_mod(ModCreateData(id="balm", name="Balm", url="https://balm"))

    assert created == {"id": "balm", "name": "Balm", "url": "https://balm"}
    assert result.id == "balm"


def test_update_mod_only_touches_changed_fields():
    mod = FakeMod()
    service, _ = make_service({"waystones": mod})

    result = service.update_mod(
        "waystones", ModUpdateData(name="Waystones", url="https://new.example.com")
    )

    assert mod.calls == [("url", "https://new.example.com")]
    assert result.url == "https://new.example.com"


def test_update_mod_rejects_taken_id():
    mod = FakeMod()
    service, _ = make_service({"waystones": mod, "balm": FakeMod("balm")})

    with pytest.raises(ConflictException):
        service.update_mod("waystones", ModUpdateData(id="balm"))

    assert mod.calls == []


def test_update_missing_mod_raises_not_found():
    service, _ = make_service()

    with pytest.raises(NotFoundException) as excinfo:
        service.update_mod("missing", ModUpdateData(name="x"))

    assert excinfo.value.http_status == 404


def test_mod_id_pattern_rejects_slashes():
    with pytest.raises(ValueError):
        ModCreateData(id="bad/id", name="Bad", url="https://x")


def test_add_version_rejects_duplicate():
    mod = FakeMod()
    mod.versions = [SimpleNamespace(id="1.0.0")]
    service, _ = make_service({"waystones": mod})

    with pytest.raises(ConflictException) as excinfo:
        service.add_version(
            "waystones", VersionCreateData(id="1.0.0", name="1.0.0", url="https://x")
        )

    assert excinfo.value.error_code == CatalogErrorCode.VERSION_EXISTS


def test_add_version_passes_plain_dependency_dicts():
    mod = FakeMod()
    captured = {}

    def fake_add_version(data):
        captured.update(data)
        return SimpleNamespace(to_json=lambda: {**data, "mod": mod.id})

    mod.add_version = fake_add_version
    service, _ = make_service({"waystones": mod})

    result = service.add_version(
        "waystones",
        VersionCreateData(
            id="1.0.0",
            name="1.0.0",
            url="https://x",
            dependencies=[DependencyData(id="balm", version=">=7")],
        ),
    )

    assert captured["dependencies"] == [{"id": "balm", "version": ">=7", "required": True}]
    assert result.mod == "waystones"
    assert result.dependencies[0].id == "balm"


def test_delete_mod_reports_missing():
    service, _ = make_service()
    assert service.delete_mod("missing") is False


def test_add_version_rejects_dependency_on_own_mod():
    service, _ = make_service({"waystones": FakeMod()})
    data = VersionCreateData(
        id="1.0.0",
        name="Waystones 1.0.0",
        url="https://example.com/1.0.0",
        dependencies=[DependencyData(id="waystones")],
    )

    with pytest.raises(ValidationException) as excinfo:
        service.add_version("waystones", data)

    assert excinfo.value.http_status == 400
