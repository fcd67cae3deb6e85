"""Helpers shared by the rule modules"""

from datetime import date, datetime, time, timezone
from typing import Any, Optional

SIZE_FIELDS = (
    "yxs", "ys", "ym", "yl",
    "xs", "s", "m", "l", "xl", "xxl", "xxxl", "xxxxl",
)


def is_blank(value: Optional[str]) -> bool:
    return value is None or len(value.strip()) == 0


def total_units(line_item: Any) -> int:
    """Sum a line item's size grid; missing or NULL sizes count as zero."""
    return sum(getattr(line_item, size, None) or 0 for size in SIZE_FIELDS)


def to_datetime(value: Any) -> datetime:
    """Normalise a stored date/datetime/ISO string to a naive UTC datetime.

    A bare date means midnight UTC at the start of that day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return to_datetime(datetime.fromisoformat(value))
        except ValueError:
            return datetime.combine(date.fromisoformat(value), time.min)
    raise TypeError(f"Unsupported date value: {value!r}")


def format_date(value: datetime) -> str:
    return value.date().isoformat()
