from __future__ import annotations

import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, Interval, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from workout_log.models.base import Base

MEASURE = Numeric(10, 2)

# Averaged columns, in the order they are shown and exported.
NUMERIC_FIELDS = (
    "distance",
    "pace",
    "zone5",
    "zone4",
    "zone3",
    "zone2",
    "zone1",
    "avg_hr",
    "max_hr",
    "strain",
)


class ExerciseLog(Base):
    __tablename__ = "exercise_logs"

    date: Mapped[dt.date | None] = mapped_column(Date, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    duration: Mapped[dt.timedelta | None] = mapped_column(Interval)
    distance: Mapped[Decimal | None] = mapped_column(MEASURE)
    pace: Mapped[Decimal | None] = mapped_column(MEASURE)
    zone5: Mapped[Decimal | None] = mapped_column(MEASURE)
    zone4: Mapped[Decimal | None] = mapped_column(MEASURE)
    zone3: Mapped[Decimal | None] = mapped_column(MEASURE)
    zone2: Mapped[Decimal | None] = mapped_column(MEASURE)
    zone1: Mapped[Decimal | None] = mapped_column(MEASURE)
    avg_hr: Mapped[Decimal | None] = mapped_column(MEASURE)
    max_hr: Mapped[Decimal | None] = mapped_column(MEASURE)
    strain: Mapped[Decimal | None] = mapped_column(MEASURE)


class ExerciseAverages(Base):
    __tablename__ = "exercise_averages"

    duration_avg: Mapped[str] = mapped_column(String(32), default="00:00:00", nullable=False)
    distance_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    pace_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    zone5_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    zone4_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    zone3_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    zone2_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    zone1_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    avg_hr_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    max_hr_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
    strain_avg: Mapped[Decimal] = mapped_column(MEASURE, nullable=False)
