from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from workout_log.api.routes import api_router
from workout_log.api.templating import STATIC_DIR
from workout_log.core.config import Settings, get_settings
from workout_log.core.errors import WorkoutLogError
from workout_log.core.logging import configure_logging
from workout_log.db.session import Database, create_database

logger = structlog.get_logger(__name__)


async def _handle_workout_log_error(request: Request, exc: WorkoutLogError) -> PlainTextResponse:
    logger.error(
        "request.failed",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return PlainTextResponse(exc.public_message, status_code=500)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(application: FastAPI) -> AsyncIterator[None]:
        app_settings = application.state.settings or get_settings()
        application.state.settings = app_settings
        configure_logging(app_settings.log_level, json_logs=app_settings.log_json)

        owns_database = getattr(application.state, "database", None) is None
        if owns_database:
            application.state.database = create_database(app_settings)
        try:
            application.state.database.ping()
        except SQLAlchemyError:
            logger.exception("database.connection_failed")
        else:
            logger.info("database.connected")
        if app_settings.auto_create_schema:
            application.state.database.create_schema()
        logger.info("app.started", env=app_settings.app_env)
        try:
            yield
        finally:
            if owns_database:
                application.state.database.dispose()
                application.state.database = None

    application = FastAPI(title="Workout Log", lifespan=lifespan)
    application.state.settings = settings
    application.state.database = database
    application.add_exception_handler(WorkoutLogError, _handle_workout_log_error)
    application.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    application.include_router(api_router)
    return application


app = create_app()
