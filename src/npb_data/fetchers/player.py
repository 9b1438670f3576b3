"""Player profile scraper

Reads the header block of https://npb.jp/bis/players/{id}.html, which
exposes each field under a fixed element id:

    #pc_v_no     背番号
    #pc_v_name   選手名
    #pc_v_kana   ふりがな
    #pc_v_team   所属球団
"""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup

from ..models import PlayerDetail
from .http import fetch_html, player_url
from .roster import collapse_whitespace

logger = logging.getLogger(__name__)


def _text_by_id(soup: BeautifulSoup, element_id: str) -> str:
    element = soup.find(id=element_id)
    return element.get_text().strip() if element else ""


def parse_player_detail_html(html: str, player_id: str) -> PlayerDetail:
    """Extract profile fields; any element missing from the page yields ""."""
    soup = BeautifulSoup(html, "html.parser")
    return PlayerDetail(
        player_id=player_id,
        number=_text_by_id(soup, "pc_v_no"),
        name=collapse_whitespace(_text_by_id(soup, "pc_v_name")),
        kana=_text_by_id(soup, "pc_v_kana"),
        team=_text_by_id(soup, "pc_v_team"),
    )


async def get_player_detail(player_id: str, client: httpx.AsyncClient | None = None) -> PlayerDetail:
    """
    Fetch a player's profile page.

    The ID is not validated up front. An unknown ID that still returns a
    page gives a record with blank fields rather than an error.

    Raises:
        FetchError: Profile page could not be fetched
    """
    html = await fetch_html(player_url(player_id), client=client)
    detail = parse_player_detail_html(html, player_id)
    if detail.is_blank():
        logger.warning(f"Player page for {player_id} had no profile fields")
    return detail
