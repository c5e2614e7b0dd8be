from __future__ import annotations

from pathlib import Path

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from workout_log.core.errors import ExportError, StorageError
from workout_log.models.exercise import NUMERIC_FIELDS, ExerciseAverages
from workout_log.repositories.exercise import ExerciseLogRepository
from workout_log.schemas.exercise import (
    NOT_AVAILABLE,
    ExerciseLogSubmission,
    LogEntryView,
    LogView,
)
from workout_log.services.averages import compute_averages
from workout_log.services.duration import parse_duration
from workout_log.services.export import build_export_archive

logger = structlog.get_logger(__name__)

AVERAGE_FIELDS = ("duration_avg", *(f"{field}_avg" for field in NUMERIC_FIELDS))


class ExerciseLogService:
    def __init__(self, session: Session, repository: ExerciseLogRepository) -> None:
        self._session = session
        self._repo = repository

    def submit_entry(self, submission: ExerciseLogSubmission) -> ExerciseAverages:
        """Store one entry and append a fresh averages snapshot in one transaction."""
        try:
            entry = self._repo.add_entry(
                date=submission.date,
                description=submission.description,
                duration=parse_duration(submission.hours, submission.minutes, submission.seconds),
                **{field: getattr(submission, field) for field in NUMERIC_FIELDS},
            )
            snapshot = compute_averages(self._repo.list_entries(newest_first=False))
            averages = self._repo.add_snapshot(snapshot)
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StorageError(f"Error inserting data: {exc}") from exc

        logger.info(
            "entry.submitted",
            entry_id=entry.id,
            snapshot_id=averages.id,
            duration_avg=averages.duration_avg,
        )
        return averages

    def build_log_view(self) -> LogView:
        try:
            entries = self._repo.list_entries()
            latest = self._repo.latest_snapshot()
        except SQLAlchemyError as exc:
            raise StorageError(f"Error loading logs: {exc}") from exc

        return LogView(
            entries=[LogEntryView.model_validate(entry) for entry in entries],
            averages=_display_averages(latest),
        )

    def clear_all(self) -> None:
        try:
            self._repo.clear_all()
            self._session.commit()
        except SQLAlchemyError as exc:
            self._session.rollback()
            raise StorageError(f"Error clearing data: {exc}", public_message="Error clearing data") from exc
        logger.info("logs.cleared")

    def export_archive(self, directory: Path) -> Path:
        try:
            logs = self._repo.list_entries(newest_first=False)
            averages = self._repo.list_snapshots()
            archive = build_export_archive(logs, averages, directory)
        except (SQLAlchemyError, OSError) as exc:
            raise ExportError(f"Error exporting data: {exc}") from exc
        logger.info("logs.exported", archive=str(archive), entries=len(logs), snapshots=len(averages))
        return archive


def _display_averages(latest: ExerciseAverages | None) -> dict[str, str]:
    if latest is None:
        return {field: NOT_AVAILABLE for field in AVERAGE_FIELDS}
    return {field: str(getattr(latest, field)) for field in AVERAGE_FIELDS}
