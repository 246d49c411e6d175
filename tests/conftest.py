import pytest

from modcatalog.core.config import Settings
from modcatalog.stores.database import Database


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def make_settings():
    def factory(**overrides) -> Settings:
        overrides.setdefault("environment", "production")
        overrides.setdefault("logfire__enabled", False)
        return Settings(**overrides)

    return factory
