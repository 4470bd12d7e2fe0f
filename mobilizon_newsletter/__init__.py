"""
Mobilizon Newsletter - compile instance posts and events into a newsletter.

This package fetches the iCalendar and Atom feeds of a Mobilizon instance,
selects the events of a target month and the posts of the month before it,
and renders a fixed-structure HTML newsletter.

Main entry point is the CLI via the `mobilizon-newsletter` command.

Example:
    $ mobilizon-newsletter https://mobilizon.example --year 2024 --month 6
"""

__all__ = ["__version__", "filter_events", "filter_feed_items", "truncate", "run_pipeline"]
__version__ = "0.1.0"

from .core.filters import filter_events, filter_feed_items
from .core.text import truncate
from .runner import run_pipeline
