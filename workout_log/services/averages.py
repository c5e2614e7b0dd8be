from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from workout_log.models.exercise import NUMERIC_FIELDS
from workout_log.schemas.exercise import AveragesSnapshot
from workout_log.services.duration import duration_to_seconds, format_duration
from workout_log.services.parsing import ZERO, parse_number

TWO_PLACES = Decimal("0.01")
WHOLE_SECOND = Decimal(1)


def compute_averages(entries: Iterable[Any]) -> AveragesSnapshot:
    """Mean of every numeric field over ``entries``.

    Missing or unparseable values count as zero and still count toward the
    entry total. An empty input yields an all-zero snapshot with a duration of
    ``00:00:00``.
    """
    sums = {field: ZERO for field in NUMERIC_FIELDS}
    duration_total = 0
    count = 0

    for entry in entries:
        count += 1
        for field in NUMERIC_FIELDS:
            sums[field] += parse_number(getattr(entry, field, None))
        duration_total += duration_to_seconds(getattr(entry, "duration", None))

    if count == 0:
        return AveragesSnapshot()

    values: dict[str, Any] = {f"{field}_avg": sums[field] / count for field in NUMERIC_FIELDS}
    mean_seconds = (Decimal(duration_total) / count).quantize(WHOLE_SECOND, rounding=ROUND_HALF_UP)
    values["duration_avg"] = format_duration(int(mean_seconds))
    return AveragesSnapshot(**values)


def round_snapshot(snapshot: AveragesSnapshot) -> AveragesSnapshot:
    """Two decimal places, halves rounded away from zero."""
    rounded = {
        f"{field}_avg": getattr(snapshot, f"{field}_avg").quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        for field in NUMERIC_FIELDS
    }
    return snapshot.model_copy(update=rounded)
