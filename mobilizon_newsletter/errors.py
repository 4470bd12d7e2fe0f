"""Exceptions raised while turning instance feeds into a newsletter."""

from __future__ import annotations


class NewsletterError(Exception):
    """Base class for newsletter generation errors."""


class FeedParseError(NewsletterError):
    """A fetched feed document could not be parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not parse {source} feed: {reason}")


class MissingFieldError(NewsletterError):
    """A feed entry lacks a field the pipeline requires."""

    def __init__(self, field: str, entry: str):
        self.field = field
        self.entry = entry
        super().__init__(f"Entry {entry!r} has no {field}")
