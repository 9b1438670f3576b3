"""Canonical team registry

Single source of truth for the 12 NPB clubs. Codes and names are part of
the external tool contract and appear in roster URLs (rst_{code}.html).
"""

from __future__ import annotations

from .exceptions import UnknownTeamError
from .models import CENTRAL, PACIFIC, Team

# Order matters: cross-team search walks the registry in this order
TEAMS: tuple[Team, ...] = (
    Team(code="g", name="読売ジャイアンツ", league=CENTRAL),
    Team(code="t", name="阪神タイガース", league=CENTRAL),
    Team(code="db", name="横浜DeNAベイスターズ", league=CENTRAL),
    Team(code="c", name="広島東洋カープ", league=CENTRAL),
    Team(code="s", name="東京ヤクルトスワローズ", league=CENTRAL),
    Team(code="d", name="中日ドラゴンズ", league=CENTRAL),
    Team(code="h", name="福岡ソフトバンクホークス", league=PACIFIC),
    Team(code="f", name="北海道日本ハムファイターズ", league=PACIFIC),
    Team(code="m", name="千葉ロッテマリーンズ", league=PACIFIC),
    Team(code="e", name="東北楽天ゴールデンイーグルス", league=PACIFIC),
    Team(code="b", name="オリックス・バファローズ", league=PACIFIC),
    Team(code="l", name="埼玉西武ライオンズ", league=PACIFIC),
)

TEAM_CODES: tuple[str, ...] = tuple(t.code for t in TEAMS)

_BY_CODE: dict[str, Team] = {t.code: t for t in TEAMS}


def list_teams() -> list[Team]:
    """Return all teams in registry order."""
    return list(TEAMS)


def teams_by_league(league: str) -> list[Team]:
    """Return the teams of one league (セントラル or パシフィック) in registry order."""
    return [t for t in TEAMS if t.league == league]


def find_team(code: str) -> Team | None:
    return _BY_CODE.get(code)


def get_team(code: str) -> Team:
    """Look up a team by code.

    Raises:
        UnknownTeamError: If the code is not one of TEAM_CODES
    """
    team = _BY_CODE.get(code)
    if team is None:
        raise UnknownTeamError(code)
    return team
