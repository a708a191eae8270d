"""TimeService — relative labels and date summaries for timeline views."""

from __future__ import annotations

import logging
from datetime import datetime

from formkit.domain.dates import (
    days_until_weekend,
    format_date_ja,
    format_month_day,
    is_recent,
    week_range,
)
from formkit.domain.time_ago import (
    InvalidInputError,
    format_time_ago,
    resolve_zone,
    to_instant,
)
from formkit.services.base import BaseService
from formkit.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class TimeService(BaseService):
    """Formats instants using the configured zone and calendar rules."""

    def _reference(self, reference: str | datetime | None) -> datetime:
        if reference is None:
            return datetime.now().astimezone()
        return to_instant(reference, "reference", self._settings.timezone)

    def ago(
        self,
        target: str | datetime,
        reference: str | datetime | None = None,
    ) -> ServiceResult:
        """Label *target* relative to *reference* (default: now)."""
        op = "ago"
        tz = self._settings.timezone
        try:
            target_at = to_instant(target, "target", tz)
            reference_at = self._reference(reference)
        except InvalidInputError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc))

        label = format_time_ago(target_at, reference_at, tz=tz)
        recent = is_recent(target_at, reference_at, days=self._settings.calendar.recent_days)
        logger.debug("Formatted %s relative to %s as %s", target_at, reference_at, label)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "label": label,
                "target": target_at.isoformat(),
                "reference": reference_at.isoformat(),
                "recent": recent,
                "timezone": tz or "local",
            },
        )

    def date_info(self, reference: str | datetime | None = None) -> ServiceResult:
        """Summarize the day and week containing *reference* (default: now)."""
        op = "today"
        try:
            reference_at = self._reference(reference)
        except InvalidInputError as exc:
            return self._fail(op, ErrorCode.INVALID_INPUT, str(exc))

        local = reference_at.astimezone(resolve_zone(self._settings.timezone))
        start, end = week_range(local, week_starts_on=self._settings.calendar.week_starts_on)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "today": format_date_ja(local),
                "time": local.strftime("%H:%M:%S"),
                "week": f"{format_month_day(start)} - {format_month_day(end)}",
                "days_until_weekend": days_until_weekend(local),
            },
        )
