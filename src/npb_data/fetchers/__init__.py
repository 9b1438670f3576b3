"""Scrapers for npb.jp roster and player pages."""

from .http import fetch_html, player_url, roster_url
from .player import get_player_detail, parse_player_detail_html
from .roster import get_team_roster, parse_roster_html

__all__ = [
    "fetch_html",
    "roster_url",
    "player_url",
    "get_team_roster",
    "parse_roster_html",
    "get_player_detail",
    "parse_player_detail_html",
]
