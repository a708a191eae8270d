"""Relative "time ago" labels for timeline rows.

Elapsed time is bucketed by floor-divided whole units, so a given pair of
instants always yields the same label:

- under 60 seconds (or any future target): ``たった今``
- under 60 minutes: ``{n}分前``
- under 24 hours: ``{n}時間前``
- under 7 days: ``{n}日前``
- otherwise the target's calendar date, with the year only when it differs
  from the reference's year.

Thresholds are exact: 60 seconds is already ``1分前``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

JUST_NOW = "たった今"

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_BEFORE_DATE = 7

_ONE_MS = timedelta(milliseconds=1)


class InvalidInputError(ValueError):
    """An argument could not be interpreted as a point in time."""


def resolve_zone(tz: str | tzinfo | None) -> tzinfo | None:
    """Turn an IANA zone name into a tzinfo; ``None`` means system local."""
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return ZoneInfo(tz)


def to_instant(value: Any, name: str, tz: str | tzinfo | None = None) -> datetime:
    """Coerce *value* into an aware datetime, or raise ``Invalid {name}``.

    Accepts datetimes and ISO-8601 strings. Naive values are taken to be in
    *tz* (system local when *tz* is None).
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidInputError(f"Invalid {name}") from exc
    if not isinstance(value, datetime):
        raise InvalidInputError(f"Invalid {name}")

    zone = resolve_zone(tz)
    if value.tzinfo is None:
        return value.astimezone() if zone is None else value.replace(tzinfo=zone)
    return value


def format_time_ago(
    target: datetime | str,
    reference: datetime | str,
    *,
    tz: str | tzinfo | None = None,
) -> str:
    """Describe how long before *reference* the *target* instant was.

    Args:
        target: The instant being labelled.
        reference: The instant treated as "now".
        tz: Zone used for calendar dates and naive inputs. ``None`` uses the
            system local zone.

    Raises:
        InvalidInputError: ``Invalid target`` or ``Invalid reference`` when
            an argument is not a datetime or a parseable ISO-8601 string.
    """
    # Aware datetimes sharing one tzinfo compare by wall clock, so compare in UTC.
    target_at = to_instant(target, "target", tz).astimezone(timezone.utc)
    reference_at = to_instant(reference, "reference", tz).astimezone(timezone.utc)

    if target_at > reference_at:
        return JUST_NOW

    elapsed_ms = (reference_at - target_at) // _ONE_MS
    seconds = elapsed_ms // 1000
    minutes = seconds // SECONDS_PER_MINUTE
    hours = minutes // MINUTES_PER_HOUR
    days = hours // HOURS_PER_DAY

    if seconds < SECONDS_PER_MINUTE:
        return JUST_NOW
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes}分前"
    if hours < HOURS_PER_DAY:
        return f"{hours}時間前"
    if days < DAYS_BEFORE_DATE:
        return f"{days}日前"

    zone = resolve_zone(tz)
    local_target = target_at.astimezone(zone)
    local_reference = reference_at.astimezone(zone)
    if local_target.year == local_reference.year:
        return f"{local_target.month}月{local_target.day}日"
    return f"{local_target.year}年{local_target.month}月{local_target.day}日"


def format_time_ago_now(target: datetime | str, *, tz: str | tzinfo | None = None) -> str:
    """:func:`format_time_ago` against the current wall-clock time."""
    return format_time_ago(target, datetime.now().astimezone(), tz=tz)
