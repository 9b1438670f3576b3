"""Cross-team player search

Walks the registry one team at a time. Fetches are deliberately sequential:
12 requests against a public site, and the first failure ends the search
with no partial result.
"""

from __future__ import annotations

import logging

import httpx

from ..fetchers.http import new_client
from ..fetchers.roster import get_team_roster
from ..models import PlayerSummary
from ..teams import TEAMS

logger = logging.getLogger(__name__)


async def search_players(query: str, client: httpx.AsyncClient | None = None) -> list[PlayerSummary]:
    """
    Find players whose name contains ``query`` across all 12 rosters.

    Matching is plain case-sensitive substring containment on the
    whitespace-collapsed name; an empty query matches everyone.

    Args:
        query: Name fragment (e.g. "田中")
        client: Optional httpx client shared by all 12 roster fetches

    Returns:
        Matches in registry order, then roster page order

    Raises:
        FetchError: Any team's roster page could not be fetched
    """
    if client is None:
        async with new_client() as own_client:
            return await _search(query, own_client)
    return await _search(query, client)


async def _search(query: str, client: httpx.AsyncClient) -> list[PlayerSummary]:
    results: list[PlayerSummary] = []
    for team in TEAMS:
        roster = await get_team_roster(team.code, client=client)
        results.extend(p for p in roster if query in p.name)

    logger.info(f"Search {query!r}: {len(results)} matches across {len(TEAMS)} teams")
    return results
