from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from workout_log.services.duration import duration_to_seconds, format_duration
from workout_log.services.parsing import parse_optional_number

NOT_AVAILABLE = "N/A"


class ExerciseLogSubmission(BaseModel):
    """One submitted entry form, keyed by the HTML field names."""

    model_config = ConfigDict(populate_by_name=True)

    date: dt.date | None = Field(default=None, alias="formDate")
    description: str | None = Field(default=None, alias="formDescription")
    hours: str | None = Field(default=None, alias="formHours")
    minutes: str | None = Field(default=None, alias="formMinutes")
    seconds: str | None = Field(default=None, alias="formSeconds")
    distance: Decimal | None = Field(default=None, alias="formDistance")
    pace: Decimal | None = Field(default=None, alias="formPace")
    zone5: Decimal | None = Field(default=None, alias="form5")
    zone4: Decimal | None = Field(default=None, alias="form4")
    zone3: Decimal | None = Field(default=None, alias="form3")
    zone2: Decimal | None = Field(default=None, alias="form2")
    zone1: Decimal | None = Field(default=None, alias="form1")
    avg_hr: Decimal | None = Field(default=None, alias="formAvgHr")
    max_hr: Decimal | None = Field(default=None, alias="formMaxHr")
    strain: Decimal | None = Field(default=None, alias="formStrain")

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value: object) -> dt.date | None:
        if isinstance(value, dt.date):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return dt.date.fromisoformat(value.strip())
        except ValueError:
            return None

    @field_validator("description", "hours", "minutes", "seconds", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator(
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
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: object) -> Decimal | None:
        return parse_optional_number(value)


class AveragesSnapshot(BaseModel):
    duration_avg: str = "00:00:00"
    distance_avg: Decimal = Decimal(0)
    pace_avg: Decimal = Decimal(0)
    zone5_avg: Decimal = Decimal(0)
    zone4_avg: Decimal = Decimal(0)
    zone3_avg: Decimal = Decimal(0)
    zone2_avg: Decimal = Decimal(0)
    zone1_avg: Decimal = Decimal(0)
    avg_hr_avg: Decimal = Decimal(0)
    max_hr_avg: Decimal = Decimal(0)
    strain_avg: Decimal = Decimal(0)


class LogEntryView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date | None = None
    description: str | None = None
    duration: str = "00:00:00"
    distance: Decimal | None = None
    pace: Decimal | None = None
    zone5: Decimal | None = None
    zone4: Decimal | None = None
    zone3: Decimal | None = None
    zone2: Decimal | None = None
    zone1: Decimal | None = None
    avg_hr: Decimal | None = None
    max_hr: Decimal | None = None
    strain: Decimal | None = None

    @field_validator("duration", mode="before")
    @classmethod
    def _format_duration(cls, value: object) -> str:
        if isinstance(value, str):
            return value
        if value is None or isinstance(value, dt.timedelta):
            return format_duration(duration_to_seconds(value))
        return format_duration(value)  # type: ignore[arg-type]


class LogView(BaseModel):
    entries: List[LogEntryView] = Field(default_factory=list)
    averages: dict[str, str] = Field(default_factory=dict)
