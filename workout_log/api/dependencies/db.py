from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from workout_log.core.config import Settings
from workout_log.db.session import Database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db_session(database: Database = Depends(get_database)) -> Iterator[Session]:
    with database.session_scope() as session:
        yield session
