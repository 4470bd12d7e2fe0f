"""
Core data types for the newsletter pipeline.

This module defines the fundamental data structures used throughout the pipeline:
- CalendarEvent: An event parsed from the instance calendar feed
- FeedItem: A post or event entry parsed from the instance Atom feed
- DateInterval: The reporting period a pipeline selects entries from
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .dates import next_month, previous_month


@dataclass(frozen=True)
class CalendarEvent:
    """An event parsed from the calendar feed.

    Attributes:
        start: Timezone-aware start timestamp
        title: Event title (SUMMARY)
        url: Detail page of the event on the instance
        organizer: Name of the organizing group
        description: Free-text description, may contain HTML markup
        location: Optional address or venue string
    """
    start: datetime
    title: str
    url: str
    organizer: str
    description: str
    location: str | None = None


@dataclass(frozen=True)
class FeedItem:
    """An entry parsed from the syndication feed.

    Attributes:
        published: Timezone-aware publish timestamp
        title: Entry title
        link: Link to the entry on the instance
        description: Free-text description, may contain HTML markup
    """
    published: datetime
    title: str
    link: str
    description: str


@dataclass(frozen=True)
class DateInterval:
    """A reporting period that excludes its start and includes its end.

    Entries exactly on a month boundary are counted in the month that
    ends there, so consecutive intervals never double-count an instant.
    """
    start: datetime
    end: datetime

    def contains(self, ts: datetime) -> bool:
        return self.start < ts <= self.end

    @classmethod
    def upcoming(cls, month_start: datetime) -> DateInterval:
        """Interval covering the target month, used for events."""
        return cls(start=month_start, end=next_month(month_start))

    @classmethod
    def previous(cls, month_start: datetime) -> DateInterval:
        """Interval covering the month before the target month, used for posts."""
        return cls(start=previous_month(month_start), end=month_start)


def reporting_intervals(month_start: datetime) -> tuple[DateInterval, DateInterval]:
    """Return the event and post intervals for the month starting at ``month_start``.

    Raises:
        ValueError: If either interval crosses the supported year range (1-9999)
    """
    return DateInterval.upcoming(month_start), DateInterval.previous(month_start)
