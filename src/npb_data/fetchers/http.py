"""Page fetching for npb.jp

Single async GET helper shared by every scraper. The site serves UTF-8 but
does not always say so, so the body is decoded from raw bytes rather than
trusting the transport's charset detection.

No retries, caching or rate limiting happen here. Callers that want any of
that pass their own ``httpx.AsyncClient`` (custom transport, event hooks).

Usage:
    from npb_data.fetchers.http import fetch_html, roster_url

    html = await fetch_html(roster_url("g"))
"""

from __future__ import annotations

import logging

import httpx

from ..config import config
from ..exceptions import FetchError

logger = logging.getLogger(__name__)

ROSTER_PATH = "/bis/teams/rst_{team_code}.html"
PLAYER_PATH = "/bis/players/{player_id}.html"


def roster_url(team_code: str, base_url: str | None = None) -> str:
    base = base_url or config.scraper.base_url
    return base + ROSTER_PATH.format(team_code=team_code)


def player_url(player_id: str, base_url: str | None = None) -> str:
    base = base_url or config.scraper.base_url
    return base + PLAYER_PATH.format(player_id=player_id)


def new_client() -> httpx.AsyncClient:
    """Create a redirect-following client with the configured User-Agent and httpx default timeouts."""
    return httpx.AsyncClient(headers={"User-Agent": config.scraper.user_agent}, follow_redirects=True)


async def fetch_html(url: str, client: httpx.AsyncClient | None = None) -> str:
    """
    GET a page and return its body decoded as UTF-8.

    Args:
        url: Absolute URL to fetch
        client: Optional client to send the request through. When omitted,
            a short-lived client is opened for this request only.

    Returns:
        Page markup as text

    Raises:
        FetchError: On non-2xx status or transport failure
    """
    if client is None:
        async with new_client() as own_client:
            return await _get(own_client, url)
    return await _get(client, url)


async def _get(client: httpx.AsyncClient, url: str) -> str:
    logger.debug(f"Fetching {url}")
    try:
        # Redirects are followed on caller-supplied clients too
        response = await client.get(url, follow_redirects=True)
    except httpx.RequestError as e:
        logger.warning(f"Request to {url} failed: {e!r}")
        raise FetchError(url, reason=type(e).__name__) from e

    if not response.is_success:
        logger.warning(f"{url} returned HTTP {response.status_code}")
        raise FetchError(url, status_code=response.status_code)

    return response.content.decode("utf-8", errors="replace")
