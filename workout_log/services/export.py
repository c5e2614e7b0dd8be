from __future__ import annotations

import csv
import zipfile
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Iterable, Sequence

from workout_log.models.exercise import ExerciseAverages, ExerciseLog
from workout_log.services.duration import duration_to_seconds, format_duration

LOGS_FILENAME = "exercise_logs.csv"
AVERAGES_FILENAME = "exercise_averages.csv"
ARCHIVE_FILENAME = "workouts.zip"


def _columns(model: type) -> list[str]:
    return [column.name for column in model.__table__.columns]


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, timedelta):
        return format_duration(duration_to_seconds(value))
    if isinstance(value, date):
        return value.isoformat()
    return value


def write_csv(path: Path, columns: Sequence[str], rows: Iterable[Any]) -> Path:
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(columns)
        for row in rows:
            writer.writerow([_cell(getattr(row, column)) for column in columns])
    return path


def build_export_archive(
    logs: Iterable[ExerciseLog],
    averages: Iterable[ExerciseAverages],
    directory: Path,
) -> Path:
    """Dump both tables to CSV inside ``directory`` and zip them together."""
    logs_path = write_csv(directory / LOGS_FILENAME, _columns(ExerciseLog), logs)
    averages_path = write_csv(directory / AVERAGES_FILENAME, _columns(ExerciseAverages), averages)

    archive_path = directory / ARCHIVE_FILENAME
    with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        archive.write(logs_path, arcname=LOGS_FILENAME)
        archive.write(averages_path, arcname=AVERAGES_FILENAME)
    return archive_path
