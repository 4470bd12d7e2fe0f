"""Newsletter rendering and output."""

from .renderer import render_event, render_newsletter, render_post, write_newsletter

__all__ = [
    "render_event",
    "render_newsletter",
    "render_post",
    "write_newsletter",
]
