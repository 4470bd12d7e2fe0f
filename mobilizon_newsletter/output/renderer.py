"""
Newsletter renderer.

Builds the newsletter as a list of HTML fragments joined with newlines.
Feed content is interpolated as-is: it comes from the operator's own
instance. Only the OpenStreetMap search query is URL-encoded.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Sequence
from urllib.parse import quote

from ..config import AppConfig, FormatConfig, NewsletterConfig
from ..core.dates import capitalize, format_iso_date, format_long_date, format_month_name, format_time
from ..core.text import truncate
from ..core.types import CalendarEvent, FeedItem


OSM_SEARCH_URL = "https://www.openstreetmap.org/search?query="


def render_newsletter(
    base_url: str,
    month_start: datetime,
    events: Sequence[CalendarEvent],
    posts: Sequence[FeedItem],
    cfg: AppConfig,
) -> str:
    """Render the complete newsletter document.

    Args:
        base_url: Instance URL linked from the count sentences
        month_start: First instant of the target month
        events: Filtered and sorted upcoming events
        posts: Filtered and sorted posts of the previous month
        cfg: Application configuration (text fragments and formatting)

    Returns:
        The HTML document as a single string
    """
    text = cfg.newsletter
    fmt = cfg.format
    month_name = format_month_name(month_start, fmt)
    platform_link = f'<a href="{base_url}">{text.platform_name}</a>'

    html: list[str] = []
    html.extend(_render_intro(text, month_name, month_start.year))

    html.append(f"<h2>{text.events_heading}</h2>")
    html.append(f"<p>{text.events_count.format(month=month_name, count=len(events))}</p>")
    html.append(f"<p>{text.events_overview.format(platform=platform_link)}</p>")
    for event in events:
        html.extend(render_event(event, text, fmt))

    html.append(f"<h2>{text.posts_heading}</h2>")
    html.append(f"<p>{text.posts_count.format(count=len(posts))}</p>")
    html.append(f"<p>{text.posts_call_to_action.format(platform=platform_link)}</p>")
    html.append("<ul>")
    for post in posts:
        html.append(render_post(post, fmt))
    html.append("</ul>")

    html.extend(_render_channels(text))
    html.append(_render_footer(text))
    return "\n".join(html)


def _render_intro(text: NewsletterConfig, month_name: str, year: int) -> list[str]:
    return [
        f"<h1>{text.title} {month_name} {year}</h1>",
        f"<p>{text.greeting}</p>",
        f"<p>{text.intro}</p>",
        f"<p>{text.placeholder}</p>",
        f"<p>{text.sign_off}</p>",
        f"<p>{text.organization}</p>",
    ]


def render_event(event: CalendarEvent, text: NewsletterConfig, fmt: FormatConfig) -> list[str]:
    """Render one event as a heading followed by its detail paragraphs."""
    when = f"{capitalize(format_long_date(event.start, fmt))} {text.time_joiner} {format_time(event.start, fmt)}"
    excerpt = truncate(event.description, fmt.max_description_length)

    parts = [
        f'<h3><a href="{event.url}">{event.title}</a></h3>',
        f"<p><b>{text.organizer_label}:</b> {event.organizer}</p>",
        f'<p><b>{text.when_label}</b>: <time datetime="{format_iso_date(event.start, fmt)}">{when}</time></p>',
    ]
    if event.location:
        parts.append(
            f'<p><b>{text.where_label}</b>: '
            f'<a href="{OSM_SEARCH_URL}{quote(event.location, safe="")}" target="_blank" rel="noopener noreferrer">'
            f"<address>{event.location}</address></a></p>"
        )
    parts.append(f'<p>{excerpt} <a href="{event.url}" title="{event.title}">{text.read_more}</a></p>')
    return parts


def render_post(post: FeedItem, fmt: FormatConfig) -> str:
    """Render one post as a list item with its date and a linked title."""
    timestamp = capitalize(format_long_date(post.published, fmt))
    excerpt = truncate(post.description, fmt.max_description_length)
    return (
        f'<li><time datetime="{format_iso_date(post.published, fmt)}">{timestamp}</time>: '
        f'<a href="{post.link}" title="{excerpt}">{post.title}</a></li>'
    )


def _render_channels(text: NewsletterConfig) -> list[str]:
    parts = [
        f"<h2>{text.channels_heading}</h2>",
        f"<p>{text.channels_intro}</p>",
        "<ul>",
    ]
    for channel in text.channels:
        parts.append(f'\t<li><a href="{channel.url}">{channel.label}</a></li>')
    if text.contact_email:
        parts.append(
            f'\t<li><a href="mailto:{text.contact_email}">{text.email_label} ({text.contact_email})</a></li>'
        )
    parts.append("</ul>")
    return parts


def _render_footer(text: NewsletterConfig) -> str:
    email_link = f'<a href="mailto:{text.contact_email}">{text.footer_email_text}</a>'
    return f"<p><em>{text.footer.format(platform=text.platform_name, email_link=email_link)}</em></p>"


def write_newsletter(html: str, output_path: Path) -> Path:
    """Write the rendered newsletter, replacing any previous file."""
    output_path.write_text(html, encoding="utf-8")
    return output_path
