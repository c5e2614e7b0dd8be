from datetime import timedelta

from workout_log.services.duration import (
    duration_to_seconds,
    format_duration,
    parse_duration,
    to_seconds,
)


def test_round_trip_hours_minutes_seconds():
    total = to_seconds(1, 2, 3)
    assert total == 3723
    assert format_duration(total) == "01:02:03"


def test_missing_and_non_numeric_components_are_zero():
    assert to_seconds(None, "30", "") == 1800
    assert to_seconds("abc", None, "15") == 15
    assert to_seconds() == 0


def test_format_pads_and_never_wraps_hours():
    assert format_duration(0) == "00:00:00"
    assert format_duration(59) == "00:00:59"
    assert format_duration(100 * 3600 + 61) == "100:01:01"
    assert format_duration(None) == "00:00:00"
    assert format_duration(-5) == "00:00:00"


def test_duration_to_seconds_accepts_interval_and_triplet():
    assert duration_to_seconds(timedelta(minutes=30)) == 1800
    assert duration_to_seconds((0, 30, 0)) == 1800
    assert duration_to_seconds([1]) == 3600
    assert duration_to_seconds(None) == 0


def test_parse_duration_returns_none_when_nothing_entered():
    assert parse_duration(None, "", None) is None
    assert parse_duration("0", "30", "0") == timedelta(minutes=30)
    assert parse_duration(None, "x", "5") == timedelta(seconds=5)


def test_parse_duration_drops_out_of_range_values():
    assert parse_duration("1e20", None, None) is None
    assert parse_duration(None, None, "-1e30") is None
    assert parse_duration("999999", None, None) == timedelta(hours=999_999)
