"""
Atom/RSS parser for the instance posts feed.

Uses feedparser, which tolerates most malformed markup. Only documents that
feedparser flags as broken and that yield no entries at all are rejected.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import feedparser

from ..core.types import FeedItem
from ..errors import FeedParseError, MissingFieldError


def parse_feed(text: str | bytes) -> list[FeedItem]:
    """Parse a syndication feed document into items, in document order.

    The document is handed to feedparser as bytes so it is never mistaken
    for a URL or a file name.

    Raises:
        FeedParseError: If the document cannot be parsed as a feed
        MissingFieldError: If an entry has neither a published nor an updated date
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    feed = feedparser.parse(data)
    if feed.bozo and not feed.entries:
        raise FeedParseError("posts", str(feed.get("bozo_exception", "no entries")))

    return [_item_from_entry(entry) for entry in feed.entries]


def _item_from_entry(entry: Any) -> FeedItem:
    title = entry.get("title", "")
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        raise MissingFieldError("published", title or entry.get("id", ""))

    return FeedItem(
        # feedparser normalizes *_parsed values to UTC
        published=datetime(*parsed[:6], tzinfo=timezone.utc),
        title=title,
        link=entry.get("link", ""),
        description=_description(entry),
    )


def _description(entry: Any) -> str:
    summary = entry.get("summary")
    if summary:
        return summary
    content = entry.get("content") or []
    if content:
        return content[0].get("value", "")
    return ""
