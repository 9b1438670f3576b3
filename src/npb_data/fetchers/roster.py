"""Team roster scraper

Parses https://npb.jp/bis/teams/rst_{code}.html into PlayerSummary records.

Page structure (as of the current site layout):
    <table class="rosterlisttbl">            first table: 支配下 (registered)
      <tr class="rosterMainHead"><th class="rosterPos">投手</th>...</tr>
      <tr class="rosterPlayer">
        <td>11</td>
        <td><a href="/bis/players/11215114.html">田中　将大</a></td>
        <td>1988.11.01</td><td>188</td><td>97</td><td>右</td><td>右</td>
        <td>note (optional)</td>
      </tr>
      <tr class="rosterRetire">...same cells...</tr>
    </table>
    <table class="rosterlisttbl">            second table: 育成 (developmental)

Section headers set the position group for the rows that follow. The 監督
(manager) header is ignored, and manager rows carry no profile link, so they
fall out of the result.
"""

from __future__ import annotations

import logging
import re

import httpx
from bs4 import BeautifulSoup, Tag

from ..models import ROSTER_ACTIVE, ROSTER_DEVELOPMENTAL, PlayerSummary, RosterType, Team
from ..teams import get_team
from .http import fetch_html, roster_url

logger = logging.getLogger(__name__)

ROSTER_TABLE_SELECTOR = "table.rosterlisttbl"
HEADER_ROW_CLASS = "rosterMainHead"
PLAYER_ROW_CLASSES = ("rosterPlayer", "rosterRetire")
MANAGER_LABEL = "監督"
MIN_PLAYER_CELLS = 7

PLAYER_LINK_RE = re.compile(r"/bis/players/(\w+)\.html")
_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text.strip())


def roster_type_for_table(index: int, table: Tag) -> RosterType:
    """
    Decide whether a roster table lists registered or developmental players.

    The site prints no machine-readable label, so table order decides:
    the first table is 支配下, anything after it is 育成.
    """
    return ROSTER_ACTIVE if index == 0 else ROSTER_DEVELOPMENTAL


def extract_player_id(href: str) -> str:
    """Pull the player ID out of a profile link, or "" if it doesn't match."""
    match = PLAYER_LINK_RE.search(href)
    return match.group(1) if match else ""


def _cell_text(cell: Tag) -> str:
    return cell.get_text().strip()


def _header_position(row: Tag) -> str:
    pos_cell = row.select_one("th.rosterPos")
    return _cell_text(pos_cell) if pos_cell else ""


def _parse_player_row(
    row: Tag, team: Team, position: str, roster_type: RosterType
) -> PlayerSummary | None:
    cells = row.find_all("td")
    if len(cells) < MIN_PLAYER_CELLS:
        return None

    name_cell = cells[1]
    link = name_cell.find("a")
    href = link.get("href", "") if link else ""
    player_id = extract_player_id(href)

    # No link at all: informational row (manager listed without a profile)
    if not player_id and not href:
        return None

    number = _cell_text(cells[0])
    name = collapse_whitespace(name_cell.get_text())

    if not (number and name and position and player_id):
        logger.debug(
            f"Dropping incomplete roster row for {team.code}: "
            f"number={number!r} name={name!r} position={position!r} href={href!r}"
        )
        return None

    return PlayerSummary(
        number=number,
        name=name,
        position=position,
        team=team.name,
        team_code=team.code,
        player_id=player_id,
        birthday=_cell_text(cells[2]),
        height=_cell_text(cells[3]),
        weight=_cell_text(cells[4]),
        throw_hand=_cell_text(cells[5]),
        bat_hand=_cell_text(cells[6]),
        note=_cell_text(cells[7]) if len(cells) > 7 else "",
        roster_type=roster_type,
    )


def _parse_table(table: Tag, team: Team, roster_type: RosterType) -> list[PlayerSummary]:
    players: list[PlayerSummary] = []
    current_position = ""

    for row in table.find_all("tr"):
        classes = row.get("class") or []

        if HEADER_ROW_CLASS in classes:
            label = _header_position(row)
            if label and label != MANAGER_LABEL:
                current_position = label
            continue

        if any(c in classes for c in PLAYER_ROW_CLASSES):
            player = _parse_player_row(row, team, current_position, roster_type)
            if player is not None:
                players.append(player)

    return players


def parse_roster_html(html: str, team: Team) -> list[PlayerSummary]:
    """
    Extract every player from a roster page.

    Args:
        html: Roster page markup
        team: Team the page belongs to (denormalized onto each record)

    Returns:
        Players in document order: registered table first, then
        developmental, section by section. Empty if no roster table matched.
    """
    soup = BeautifulSoup(html, "html.parser")
    tables = soup.select(ROSTER_TABLE_SELECTOR)
    if not tables:
        logger.warning(f"No roster tables found for team {team.code}")
        return []

    players: list[PlayerSummary] = []
    for index, table in enumerate(tables):
        players.extend(_parse_table(table, team, roster_type_for_table(index, table)))

    logger.debug(f"Parsed {len(players)} players from {len(tables)} tables for {team.code}")
    return players


async def get_team_roster(
    team_code: str, client: httpx.AsyncClient | None = None
) -> list[PlayerSummary]:
    """
    Fetch and parse a team's current roster.

    Args:
        team_code: Registry code (g, t, db, c, s, d, h, f, m, e, b, l)
        client: Optional httpx client to send the request through

    Returns:
        PlayerSummary list in page order

    Raises:
        UnknownTeamError: Unknown team code (raised before any request)
        FetchError: Roster page could not be fetched

    Example:
        >>> players = await get_team_roster("g")
        >>> players[0].position
        '投手'
    """
    team = get_team(team_code)
    html = await fetch_html(roster_url(team.code), client=client)
    return parse_roster_html(html, team)
