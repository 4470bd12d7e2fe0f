"""
Month boundary arithmetic and locale-aware date formatting.

Formatting goes through Babel so weekday and month names follow the
configured locale instead of the process locale.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from babel.dates import format_datetime

from ..config import FormatConfig


def resolve_timezone(cfg: FormatConfig) -> ZoneInfo:
    return ZoneInfo(cfg.timezone)


def month_start(year: int, month: int, tz: ZoneInfo) -> datetime:
    """Return midnight of the first day of ``year``/``month`` in ``tz``.

    Raises:
        ValueError: If the month or year is out of range
    """
    return datetime(year, month, 1, tzinfo=tz)


def next_month(value: datetime) -> datetime:
    """Return the first day of the month after ``value``, at midnight.

    December rolls over to January of the following year. The tzinfo of
    ``value`` is kept.
    """
    if value.month == 12:
        return _first_of(value, value.year + 1, 1)
    return _first_of(value, value.year, value.month + 1)


def previous_month(value: datetime) -> datetime:
    """Return the first day of the month before ``value``, at midnight.

    January rolls back to December of the previous year.
    """
    if value.month == 1:
        return _first_of(value, value.year - 1, 12)
    return _first_of(value, value.year, value.month - 1)


def _first_of(value: datetime, year: int, month: int) -> datetime:
    return value.replace(year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0)


def format_long_date(ts: datetime, cfg: FormatConfig) -> str:
    """Weekday, day of month and month name, e.g. ``maandag 3 juni``."""
    return format_datetime(ts, "EEEE d MMMM", tzinfo=resolve_timezone(cfg), locale=cfg.locale)


def format_time(ts: datetime, cfg: FormatConfig) -> str:
    """Hour and minute on a 24-hour clock, e.g. ``19:30``."""
    return format_datetime(ts, "HH:mm", tzinfo=resolve_timezone(cfg), locale=cfg.locale)


def format_month_name(ts: datetime, cfg: FormatConfig) -> str:
    """Stand-alone month name, e.g. ``juni``."""
    return format_datetime(ts, "LLLL", tzinfo=resolve_timezone(cfg), locale=cfg.locale)


def format_iso_date(ts: datetime, cfg: FormatConfig) -> str:
    """Calendar date in the configured zone for ``<time datetime>`` attributes."""
    return ts.astimezone(resolve_timezone(cfg)).date().isoformat()


def capitalize(value: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the remainder is not lowercased.
    """
    value = str(value)
    return value[:1].upper() + value[1:]
