from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse, RedirectResponse
from starlette.background import BackgroundTask

from workout_log.api.dependencies.db import get_app_settings
from workout_log.api.dependencies.exercise import get_exercise_log_service
from workout_log.core.config import Settings
from workout_log.core.errors import ExportError
from workout_log.services.exercise_log import ExerciseLogService
from workout_log.services.export import ARCHIVE_FILENAME

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["export"])


def _remove_export_dir(directory: Path) -> None:
    try:
        shutil.rmtree(directory)
    except OSError as exc:
        logger.warning("export.cleanup_failed", directory=str(directory), error=str(exc))


@router.get("/export-both", response_class=FileResponse)
def export_both(
    settings: Settings = Depends(get_app_settings),
    service: ExerciseLogService = Depends(get_exercise_log_service),
) -> FileResponse:
    try:
        directory = Path(tempfile.mkdtemp(prefix="workout-export-", dir=settings.export_dir))
    except OSError as exc:
        raise ExportError(f"Error creating export directory: {exc}") from exc

    try:
        archive = service.export_archive(directory)
    except ExportError:
        _remove_export_dir(directory)
        raise

    return FileResponse(
        archive,
        media_type="application/zip",
        filename=ARCHIVE_FILENAME,
        background=BackgroundTask(_remove_export_dir, directory),
    )


@router.post("/delete-both")
def delete_both(service: ExerciseLogService = Depends(get_exercise_log_service)) -> RedirectResponse:
    service.clear_all()
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
