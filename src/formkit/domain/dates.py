"""Calendar helpers for date summaries shown next to timelines."""

from __future__ import annotations

from datetime import date, datetime, timedelta

WEEKDAYS_JA = ("月", "火", "水", "木", "金", "土", "日")
MONDAY = 0
SATURDAY = 5


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def format_date_ja(value: date, *, with_weekday: bool = True) -> str:
    """Format as ``2024年03月15日 (金)``.

    Examples:
        >>> format_date_ja(date(2024, 3, 15))
        '2024年03月15日 (金)'
        >>> format_date_ja(date(2024, 3, 15), with_weekday=False)
        '2024年03月15日'
    """
    day = _as_date(value)
    text = f"{day.year:04d}年{day.month:02d}月{day.day:02d}日"
    if with_weekday:
        text += f" ({WEEKDAYS_JA[day.weekday()]})"
    return text


def format_month_day(value: date) -> str:
    """Format as ``MM/dd``."""
    day = _as_date(value)
    return f"{day.month:02d}/{day.day:02d}"


def week_range(value: date, *, week_starts_on: int = MONDAY) -> tuple[date, date]:
    """Return the first and last day of the week containing *value*.

    *week_starts_on* uses :meth:`date.weekday` numbering (0 = Monday).
    """
    if not 0 <= week_starts_on <= 6:
        msg = f"week_starts_on must be 0-6, got {week_starts_on}"
        raise ValueError(msg)
    day = _as_date(value)
    start = day - timedelta(days=(day.weekday() - week_starts_on) % 7)
    return start, start + timedelta(days=6)


def days_until_weekend(value: date) -> int:
    """Whole days until Saturday, the last day of a Sunday-start week."""
    return (SATURDAY - _as_date(value).weekday()) % 7


def is_recent(target: datetime, reference: datetime, *, days: int = 7) -> bool:
    """True when *target* is at most *days* whole days before *reference*."""
    return (reference - target) // timedelta(days=1) <= days
