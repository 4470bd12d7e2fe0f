"""
Core domain models and business logic.

This package contains data types, date arithmetic and the filtering
logic that is independent of fetching and rendering.
"""

from .types import CalendarEvent, DateInterval, FeedItem, reporting_intervals
from .dates import (
    capitalize,
    format_iso_date,
    format_long_date,
    format_month_name,
    format_time,
    month_start,
    next_month,
    previous_month,
)
from .filters import filter_events, filter_feed_items, is_post_link
from .text import html_to_text, truncate

__all__ = [
    "CalendarEvent",
    "DateInterval",
    "FeedItem",
    "reporting_intervals",
    "capitalize",
    "format_iso_date",
    "format_long_date",
    "format_month_name",
    "format_time",
    "month_start",
    "next_month",
    "previous_month",
    "filter_events",
    "filter_feed_items",
    "is_post_link",
    "html_to_text",
    "truncate",
]
