"""
Input parsing utilities.

This package contains the parsers for the instance calendar and posts feeds.
"""

from .feed_parser import parse_feed
from .ics_parser import parse_calendar

__all__ = ["parse_calendar", "parse_feed"]
