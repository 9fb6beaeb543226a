"""Clock helpers.

All calendar-day comparisons (streaks, scheduled prompts, entry dates) go
through ``today()`` so the configured ``APP_TIMEZONE`` decides where midnight
falls. Tests patch ``inkwell.core.utils.clock.today`` to pin the day.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo

from flask import current_app, has_app_context

DEFAULT_TIMEZONE = "UTC"


def _zone() -> ZoneInfo:
    name = DEFAULT_TIMEZONE
    if has_app_context():
        name = current_app.config.get("APP_TIMEZONE") or DEFAULT_TIMEZONE
    return ZoneInfo(name)


def now() -> datetime:
    """Current instant, timezone-aware."""
    return datetime.now(_zone())


def today() -> date:
    """Current calendar day with no time-of-day component."""
    return now().date()


def to_day(value: date | datetime | None) -> date | None:
    """Normalize a stored date/datetime to its calendar day."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value
