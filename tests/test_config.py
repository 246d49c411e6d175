import pytest

from modcatalog.core.config import Settings, parse_trust_proxy, resolve_project_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, False),
        ("", False),
        ("2", 2),
        ("0", 0),
        ("1.5", 1.5),
        ("1e1", 10),
        ("true", True),
        ("false", False),
        ("TRUE", True),
        ("loopback", "loopback"),
        ("10.0.0.1, 10.0.0.2", "10.0.0.1, 10.0.0.2"),
    ],
)
def test_parse_trust_proxy(raw, expected):
    result = parse_trust_proxy(raw)
    assert result == expected
    assert type(result) is type(expected)


def test_trust_proxy_read_from_environment(monkeypatch):
    monkeypatch.setenv("TRUST_PROXY", "1")
    assert Settings().trust_proxy_setting == 1


def test_nested_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE__URL", "sqlite:///catalog.db")
    monkeypatch.setenv("ENVIRONMENT", "development")

    config = Settings()

    assert config.database__url == "sqlite:///catalog.db"
    assert config.is_development


def test_production_is_default_environment(monkeypatch):
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    assert Settings(_env_file=None).is_development is False


def test_invalid_log_level_rejected():
    with pytest.raises(ValueError):
        Settings(log_level="chatty")


def test_relative_paths_resolve_against_project_root(tmp_path):
    assert resolve_project_path("templates").name == "templates"
    assert resolve_project_path("templates").is_absolute()
    assert resolve_project_path(str(tmp_path)) == tmp_path
