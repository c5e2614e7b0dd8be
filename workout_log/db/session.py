from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from workout_log.core.config import Settings, get_settings
from workout_log.models import exercise as exercise_models  # noqa: F401 ensure metadata
from workout_log.models.base import Base

logger = structlog.get_logger(__name__)


class Database:
    """Owns one engine and hands out short-lived sessions."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False, class_=Session)

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("database.schema_ready", tables=sorted(Base.metadata.tables))

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()


def create_database(settings: Settings | None = None) -> Database:
    settings = settings or get_settings()
    database_url = getattr(settings, "database_url", None)
    if not database_url:
        raise RuntimeError("DATABASE_URL is not configured")

    engine_options: dict[str, Any] = {"echo": settings.database_echo}
    url = make_url(database_url)
    if settings.database_ssl and url.get_backend_name() == "postgresql":
        engine_options["connect_args"] = {"sslmode": "require"}
    if url.get_backend_name() == "sqlite":
        engine_options["connect_args"] = {"check_same_thread": False}

    logger.info("database.configured", backend=url.get_backend_name(), database=url.database)
    return Database(create_engine(database_url, future=True, **engine_options))
