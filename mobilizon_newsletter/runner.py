"""
Main pipeline orchestration for the newsletter generator.

This module coordinates the entire workflow:
1. Fetch and parse the instance calendar feed
2. Select the events of the target month
3. Fetch and parse the instance posts feed
4. Select the posts of the month before the target month
5. Render the newsletter and write it to disk

The two feeds are fetched one after the other on a single event loop.
Nothing is recovered locally: any fetch, parse or write error aborts the
run, and the output file is only written once the document is complete.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import httpx
from rich.console import Console

from .config import AppConfig
from .core.dates import month_start, resolve_timezone
from .core.filters import filter_events, filter_feed_items
from .core.types import reporting_intervals
from .fetch.fetcher import build_client, calendar_feed_url, fetch_text, posts_feed_url
from .input.feed_parser import parse_feed
from .input.ics_parser import parse_calendar
from .logging_utils import LOGGER_NAME, log_event, setup_logging
from .output.renderer import render_newsletter, write_newsletter


@dataclass
class PipelineStats:
    """Entry counts collected while building the newsletter.

    Attributes:
        events_total: Events in the calendar feed
        events_selected: Events starting in the target month
        posts_total: Entries in the posts feed
        posts_selected: Posts published in the previous month
    """
    events_total: int = 0
    events_selected: int = 0
    posts_total: int = 0
    posts_selected: int = 0


def run_pipeline(
    base_url: str,
    year: int,
    month: int,
    cfg: AppConfig,
    console: Console | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Path:
    """Generate the newsletter for ``year``/``month`` and write it to disk.

    Args:
        base_url: Base URL of the Mobilizon instance
        year: Target year
        month: Target month (1-12)
        cfg: Application configuration
        console: Rich console for the summary line (creates default if None)
        transport: Optional httpx transport override, used by tests

    Returns:
        Path to the written newsletter
    """
    output_path = Path(cfg.output.path)
    logger = setup_logging(cfg.logging, output_path.parent)
    start = month_start(year, month, resolve_timezone(cfg.format))

    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        base_url=base_url,
        target_month=start.strftime("%Y-%m"),
    )

    html, stats = asyncio.run(build_newsletter(base_url, start, cfg, logger, transport))
    _render_stats(stats, console or Console())

    write_newsletter(html, output_path)
    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        output=str(output_path),
        events=stats.events_selected,
        posts=stats.posts_selected,
    )
    return output_path


async def build_newsletter(
    base_url: str,
    start: datetime,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[str, PipelineStats]:
    """Fetch both feeds, select the reporting periods and render the HTML.

    Args:
        base_url: Base URL of the Mobilizon instance
        start: First instant of the target month
        cfg: Application configuration
        logger: Logger for progress events
        transport: Optional httpx transport override, used by tests

    Returns:
        Tuple of the rendered HTML document and the collected counts
    """
    logger = logger or logging.getLogger(LOGGER_NAME)
    tz = resolve_timezone(cfg.format)
    events_interval, posts_interval = reporting_intervals(start)
    stats = PipelineStats()

    async with build_client(cfg.fetch, transport) as client:
        ics_url = calendar_feed_url(base_url)
        log_event(
            logger, "Fetching calendar feed", logging.DEBUG, event="fetch_start", feed="calendar", url=ics_url
        )
        all_events = parse_calendar(await fetch_text(client, ics_url), tz)
        events = filter_events(all_events, events_interval)
        stats.events_total = len(all_events)
        stats.events_selected = len(events)

        atom_url = posts_feed_url(base_url)
        log_event(
            logger, "Fetching posts feed", logging.DEBUG, event="fetch_start", feed="posts", url=atom_url
        )
        all_posts = parse_feed(await fetch_text(client, atom_url))
        posts = filter_feed_items(
            all_posts,
            posts_interval,
            cfg.feed.post_path_prefix,
        )
        stats.posts_total = len(all_posts)
        stats.posts_selected = len(posts)

    log_event(
        logger,
        "Feeds filtered",
        event="feeds_filtered",
        events_total=stats.events_total,
        events_selected=stats.events_selected,
        posts_total=stats.posts_total,
        posts_selected=stats.posts_selected,
    )
    return render_newsletter(base_url, start, events, posts, cfg), stats


def _render_stats(stats: PipelineStats, console: Console) -> None:
    console.print(
        "[bold]Feed summary[/bold]: "
        f"events={stats.events_selected}/{stats.events_total}, "
        f"posts={stats.posts_selected}/{stats.posts_total}"
    )
