"""
Date-range selection and ordering of calendar events and feed items.

Both filters keep entries whose timestamp lies in the interval
``(start, end]`` and return them in ascending timestamp order. Python's
sort is stable, so entries sharing a timestamp keep their feed order.
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import urlsplit

from .types import CalendarEvent, DateInterval, FeedItem


POST_PATH_PREFIX = "/p/"


def filter_events(events: Iterable[CalendarEvent], interval: DateInterval) -> list[CalendarEvent]:
    """Select the events starting inside ``interval``, earliest first."""
    selected = [event for event in events if interval.contains(event.start)]
    selected.sort(key=lambda event: event.start)
    return selected


def filter_feed_items(
    items: Iterable[FeedItem],
    interval: DateInterval,
    post_prefix: str = POST_PATH_PREFIX,
) -> list[FeedItem]:
    """Select the posts published inside ``interval``, oldest first.

    Event entries (``/e/...`` links) are left out even when they fall in the
    interval; events are listed from the calendar feed only.
    """
    selected = [
        item
        for item in items
        if interval.contains(item.published) and is_post_link(item.link, post_prefix)
    ]
    selected.sort(key=lambda item: item.published)
    return selected


def is_post_link(link: str, post_prefix: str = POST_PATH_PREFIX) -> bool:
    """Return True when ``link`` is an absolute URL whose path starts with ``post_prefix``.

    Links that cannot be parsed are treated as non-matching rather than
    raising, so one malformed entry does not abort the run.
    """
    try:
        parts = urlsplit(link)
    except (TypeError, ValueError):
        return False
    if not parts.scheme or not parts.netloc:
        return False
    return parts.path.startswith(post_prefix)
