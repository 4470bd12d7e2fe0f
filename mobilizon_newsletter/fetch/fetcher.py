"""
HTTP fetching of the instance feeds.

Both feeds are fetched with one ``httpx.AsyncClient``. Transport errors and
non-2xx responses propagate as ``httpx.HTTPError``; there is no retry.
"""

from __future__ import annotations

import httpx

from ..config import FetchConfig


CALENDAR_FEED_PATH = "/feed/instance/ics"
POSTS_FEED_PATH = "/feed/instance/atom"


def calendar_feed_url(base_url: str) -> str:
    """Return the iCalendar feed URL of the instance at ``base_url``."""
    return f"{base_url.rstrip('/')}{CALENDAR_FEED_PATH}"


def posts_feed_url(base_url: str) -> str:
    """Return the Atom feed URL of the instance at ``base_url``."""
    return f"{base_url.rstrip('/')}{POSTS_FEED_PATH}"


def build_client(cfg: FetchConfig, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the async client used for both feed requests.

    Args:
        cfg: Fetch configuration (timeout, proxy handling, user agent)
        transport: Optional transport override, used by tests

    Returns:
        An ``httpx.AsyncClient`` that follows redirects
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(cfg.timeout_seconds),
        headers={"User-Agent": cfg.user_agent},
        follow_redirects=True,
        trust_env=cfg.trust_env,
        transport=transport,
    )


async def fetch_text(client: httpx.AsyncClient, url: str) -> str:
    """GET ``url`` and return the full response body as text.

    Raises:
        httpx.HTTPStatusError: If the server answers with an error status
        httpx.TransportError: If the request fails before a response arrives
    """
    resp = await client.get(url)
    resp.raise_for_status()
    return resp.text
