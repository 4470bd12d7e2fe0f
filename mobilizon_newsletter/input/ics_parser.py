"""
iCalendar parser for the instance events feed.

Converts the VEVENT components of a calendar document into CalendarEvent
objects. Start times are normalized to timezone-aware datetimes:
- Date-only DTSTART values become midnight in the configured zone
- Floating (naive) times are read as wall-clock time in the configured zone
- Times with a TZID or UTC marker are kept as given
"""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Any

from icalendar import Calendar

from ..core.types import CalendarEvent
from ..errors import FeedParseError, MissingFieldError


def parse_calendar(text: str | bytes, tz: tzinfo) -> list[CalendarEvent]:
    """Parse an iCalendar document into events, in document order.

    Args:
        text: The calendar document
        tz: Zone used for date-only and floating start times

    Returns:
        A list of CalendarEvent objects, one per VEVENT

    Raises:
        FeedParseError: If the document is not a valid VCALENDAR
        MissingFieldError: If an event has no DTSTART
    """
    try:
        cal = Calendar.from_ical(text)
    except ValueError as exc:
        raise FeedParseError("calendar", str(exc)) from exc
    if cal.name != "VCALENDAR":
        raise FeedParseError("calendar", f"unexpected top-level component {cal.name!r}")

    return [_event_from_component(component, tz) for component in cal.walk("VEVENT")]


def _event_from_component(component: Any, tz: tzinfo) -> CalendarEvent:
    title = _text(component.get("summary"))
    dtstart = component.get("dtstart")
    if dtstart is None:
        raise MissingFieldError("DTSTART", title or _text(component.get("uid")))

    location = _text(component.get("location")).strip()
    return CalendarEvent(
        start=_to_aware(dtstart.dt, tz),
        title=title,
        url=_text(component.get("url")),
        organizer=_organizer_name(component.get("organizer")),
        description=_text(component.get("description")),
        location=location or None,
    )


def _to_aware(value: date | datetime, tz: tzinfo) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=tz)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=tz)


def _organizer_name(prop: Any) -> str:
    """Prefer the CN parameter, falling back to the address without ``mailto:``."""
    if prop is None:
        return ""
    params = getattr(prop, "params", None) or {}
    common_name = params.get("CN")
    if common_name:
        return str(common_name)
    value = str(prop)
    if value.lower().startswith("mailto:"):
        return value[len("mailto:"):]
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
