from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from workout_log.core.config import Settings, get_settings
from workout_log.db.session import Database
from workout_log.main import create_app


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    get_settings.cache_clear()


@pytest.fixture()
def database() -> Iterator[Database]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_env="test",
        database_url="sqlite+pysqlite:///:memory:",
        export_dir=tmp_path,
    )


@pytest.fixture()
def client(settings: Settings, database: Database) -> Iterator[TestClient]:
    application = create_app(settings=settings, database=database)
    with TestClient(application) as test_client:
        yield test_client
