from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal(0)


def parse_optional_number(value: Any) -> Decimal | None:
    """Decimal for anything number-like, otherwise None. Never raises."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    if not number.is_finite():
        return None
    return number


def parse_number(value: Any) -> Decimal:
    number = parse_optional_number(value)
    return ZERO if number is None else number
