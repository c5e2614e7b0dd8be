from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy import delete, inspect, select, text
from sqlalchemy.orm import Session

from workout_log.models.exercise import ExerciseAverages, ExerciseLog
from workout_log.schemas.exercise import AveragesSnapshot
from workout_log.services.averages import round_snapshot


class ExerciseLogRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def add_entry(
        self,
        *,
        date: date | None = None,
        description: str | None = None,
        duration: timedelta | None = None,
        distance: Decimal | None = None,
        pace: Decimal | None = None,
        zone5: Decimal | None = None,
        zone4: Decimal | None = None,
        zone3: Decimal | None = None,
        zone2: Decimal | None = None,
        zone1: Decimal | None = None,
        avg_hr: Decimal | None = None,
        max_hr: Decimal | None = None,
        strain: Decimal | None = None,
    ) -> ExerciseLog:
        entry = ExerciseLog(
            date=date,
            description=description,
            duration=duration,
            distance=distance,
            pace=pace,
            zone5=zone5,
            zone4=zone4,
            zone3=zone3,
            zone2=zone2,
            zone1=zone1,
            avg_hr=avg_hr,
            max_hr=max_hr,
            strain=strain,
        )
        self._session.add(entry)
        self._session.flush()
        return entry

    def list_entries(self, *, newest_first: bool = True) -> list[ExerciseLog]:
        statement = select(ExerciseLog)
        if newest_first:
            statement = statement.order_by(ExerciseLog.date.desc().nulls_last(), ExerciseLog.id.desc())
        else:
            statement = statement.order_by(ExerciseLog.id)
        return list(self._session.scalars(statement))

    def add_snapshot(self, snapshot: AveragesSnapshot) -> ExerciseAverages:
        averages = ExerciseAverages(**round_snapshot(snapshot).model_dump())
        self._session.add(averages)
        self._session.flush()
        return averages

    def latest_snapshot(self) -> ExerciseAverages | None:
        statement = select(ExerciseAverages).order_by(ExerciseAverages.id.desc()).limit(1)
        return self._session.scalar(statement)

    def list_snapshots(self) -> list[ExerciseAverages]:
        statement = select(ExerciseAverages).order_by(ExerciseAverages.id)
        return list(self._session.scalars(statement))

    def clear_all(self) -> None:
        tables = (ExerciseLog.__tablename__, ExerciseAverages.__tablename__)
        dialect = self._session.get_bind().dialect.name
        if dialect == "postgresql":
            self._session.execute(text(f"TRUNCATE TABLE {', '.join(tables)} RESTART IDENTITY"))
        else:
            self._session.execute(delete(ExerciseLog))
            self._session.execute(delete(ExerciseAverages))
            if dialect == "sqlite" and inspect(self._session.connection()).has_table("sqlite_sequence"):
                self._session.execute(
                    text("DELETE FROM sqlite_sequence WHERE name IN (:logs, :averages)"),
                    {"logs": tables[0], "averages": tables[1]},
                )
        self._session.expunge_all()
