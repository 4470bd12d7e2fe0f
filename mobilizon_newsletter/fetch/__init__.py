"""
Feed fetching.

This package handles the HTTP requests for the instance feeds.
"""

from .fetcher import build_client, calendar_feed_url, fetch_text, posts_feed_url

__all__ = [
    "build_client",
    "calendar_feed_url",
    "fetch_text",
    "posts_feed_url",
]
