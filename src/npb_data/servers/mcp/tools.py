"""
MCP Tool definitions for NPB roster and player data.

Each tool wraps one library call and renders the result as Japanese text
for the LLM (or as column/row arrays with ``compact=True``). Errors never
escape a tool: they come back as ``{"success": False, "error": ...}``.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import pandas as pd

from ...api.search import search_players
from ...exceptions import NPBDataError
from ...fetchers.player import get_player_detail
from ...fetchers.roster import get_team_roster
from ...models import CENTRAL, PACIFIC, ROSTER_DEVELOPMENTAL, PlayerDetail, PlayerSummary, Team
from ...teams import TEAM_CODES, find_team, list_teams
from ..logging import log_error, log_tool_call

logger = logging.getLogger(__name__)

# Columns returned in compact mode, in display order
COMPACT_COLUMNS = [
    "number",
    "name",
    "position",
    "team",
    "teamCode",
    "playerId",
    "birthday",
    "height",
    "weight",
    "throwHand",
    "batHand",
    "note",
    "rosterType",
]


# ============================================================================
# Helper Functions
# ============================================================================


def _players_to_frame(players: list[PlayerSummary]) -> pd.DataFrame:
    records = [p.model_dump(by_alias=True) for p in players]
    return pd.DataFrame.from_records(records, columns=COMPACT_COLUMNS)


def _compact(players: list[PlayerSummary]) -> dict[str, Any]:
    df = _players_to_frame(players)
    return {"columns": df.columns.tolist(), "rows": df.values.tolist()}


def format_team_list(teams: list[Team]) -> str:
    central = [t for t in teams if t.league == CENTRAL]
    pacific = [t for t in teams if t.league == PACIFIC]

    lines = [
        "【セントラル・リーグ】",
        *[f"  {t.name} (code: {t.code})" for t in central],
        "",
        "【パシフィック・リーグ】",
        *[f"  {t.name} (code: {t.code})" for t in pacific],
    ]
    return "\n".join(lines)


def format_roster(team_name: str, players: list[PlayerSummary]) -> str:
    """Group players under a ■ line each time the position changes."""
    lines = [f"【{team_name}】選手一覧 ({len(players)}名)", ""]
    current_pos = ""
    for p in players:
        if p.position != current_pos:
            current_pos = p.position
            lines.append(f"■ {current_pos}")
        roster_tag = " [育成]" if p.roster_type == ROSTER_DEVELOPMENTAL else ""
        lines.append(f"  #{p.number} {p.name}{roster_tag}")
    return "\n".join(lines)


def format_player_detail(detail: PlayerDetail) -> str:
    return "\n".join(
        [
            f"選手名: {detail.name}",
            f"ふりがな: {detail.kana}",
            f"所属: {detail.team}",
            f"背番号: {detail.number}",
        ]
    )


def format_search_results(query: str, results: list[PlayerSummary]) -> str:
    if not results:
        return f"「{query}」に該当する選手は見つかりませんでした"

    lines = [f"「{query}」の検索結果 ({len(results)}件)", ""]
    for p in results:
        lines.append(f"#{p.number} {p.name} - {p.team} ({p.position}) [ID: {p.player_id}]")
    return "\n".join(lines)


def _error_result(tool_name: str, e: Exception, start: float, **kwargs: Any) -> dict[str, Any]:
    duration_ms = (time.perf_counter() - start) * 1000
    log_error(service="mcp", error=str(e), error_type=type(e).__name__, tool=tool_name, **kwargs)
    log_tool_call(tool=tool_name, duration_ms=duration_ms, success=False, **kwargs)
    return {"success": False, "error": str(e), "error_type": type(e).__name__}


async def _safe_execute(
    tool_name: str, func: Callable[..., Awaitable[dict[str, Any]]], **kwargs: Any
) -> dict[str, Any]:
    """
    Run a tool body and turn any exception into a structured error result.

    Args:
        tool_name: Name of tool being executed (for logging)
        func: Coroutine function returning the success payload
        **kwargs: Arguments to pass to function

    Returns:
        Dict with 'success' plus 'data'/'row_count', or 'error'/'error_type'
    """
    start = time.perf_counter()
    try:
        payload = await func(**kwargs)
    except NPBDataError as e:
        # Expected failures such as a bad team code or an HTTP error; no traceback
        logger.warning(f"{tool_name} failed: {e}")
        return _error_result(tool_name, e, start, **kwargs)
    except Exception as e:
        logger.error(f"Error in {tool_name}: {e}", exc_info=True)
        return _error_result(tool_name, e, start, **kwargs)

    duration_ms = (time.perf_counter() - start) * 1000
    log_tool_call(tool=tool_name, duration_ms=duration_ms, rows=payload.get("row_count"), **kwargs)
    return {"success": True, **payload}


# ============================================================================
# MCP Tools
# ============================================================================


async def _list_teams() -> dict[str, Any]:
    teams = list_teams()
    return {"data": format_team_list(teams), "row_count": len(teams)}


async def _team_roster(team_code: str, compact: bool = False) -> dict[str, Any]:
    players = await get_team_roster(team_code)
    if compact:
        return {"data": _compact(players), "row_count": len(players)}

    team = find_team(team_code)
    team_name = team.name if team else team_code
    return {"data": format_roster(team_name, players), "row_count": len(players)}


async def _player_detail(player_id: str) -> dict[str, Any]:
    detail = await get_player_detail(player_id)
    return {"data": format_player_detail(detail), "row_count": 1}


async def _search(query: str, compact: bool = False) -> dict[str, Any]:
    results = await search_players(query)
    if compact:
        return {"data": _compact(results), "row_count": len(results)}
    return {"data": format_search_results(query, results), "row_count": len(results)}


async def tool_list_teams() -> dict[str, Any]:
    """
    List the 12 NPB teams grouped by league.

    Examples:
        >>> await tool_list_teams()
        {"success": True, "data": "【セントラル・リーグ】\\n  読売ジャイアンツ (code: g)...", "row_count": 12}
    """
    return await _safe_execute("list_teams", _list_teams)


async def tool_get_team_roster(team_code: str, compact: bool = False) -> dict[str, Any]:
    """
    Get a team's current roster (支配下 and 育成).

    LLM Usage Examples:
        • "巨人の選手一覧" → get_team_roster(team_code="g")
        • "阪神の投手は？" → get_team_roster(team_code="t")

    Args:
        team_code: 球団コード (g, t, db, c, s, d, h, f, m, e, b, l)
        compact: Return columns/rows arrays instead of text

    Returns:
        Structured result; data is grouped text by position
    """
    return await _safe_execute("get_team_roster", _team_roster, team_code=team_code, compact=compact)


async def tool_get_player_detail(player_id: str) -> dict[str, Any]:
    """
    Get a player's full name, kana reading, team and jersey number.

    Args:
        player_id: ID from a roster or search result (e.g. "11215114")
    """
    return await _safe_execute("get_player_detail", _player_detail, player_id=player_id)


async def tool_search_players(query: str, compact: bool = False) -> dict[str, Any]:
    """
    Search all 12 rosters for players whose name contains ``query``.

    Fetches every roster page in turn, so expect a few seconds.

    LLM Usage Examples:
        • "田中という選手を探して" → search_players(query="田中")
    """
    return await _safe_execute("search_players", _search, query=query, compact=compact)


# ============================================================================
# Tool Registry
# ============================================================================

TOOLS = [
    {
        "name": "list_teams",
        "description": "NPB全12球団の一覧を取得します",
        "inputSchema": {"type": "object", "properties": {}},
        "handler": tool_list_teams,
    },
    {
        "name": "get_team_roster",
        "description": "指定した球団の選手一覧を取得します（所属、選手名、背番号、ポジション等）",
        "inputSchema": {
            "type": "object",
            "properties": {
                "team_code": {
                    "type": "string",
                    "enum": list(TEAM_CODES),
                    "description": "球団コード (g, t, db, c, s, d, h, f, m, e, b, l)",
                },
                "compact": {
                    "type": "boolean",
                    "description": "Return columns/rows arrays instead of text",
                    "default": False,
                },
            },
            "required": ["team_code"],
        },
        "handler": tool_get_team_roster,
    },
    {
        "name": "get_player_detail",
        "description": "選手の詳細情報（フルネーム、ふりがな、所属球団、背番号）を取得します",
        "inputSchema": {
            "type": "object",
            "properties": {
                "player_id": {"type": "string", "description": "選手ID（例: 11215114）"},
            },
            "required": ["player_id"],
        },
        "handler": tool_get_player_detail,
    },
    {
        "name": "search_players",
        "description": "選手名で検索します（全球団を横断検索）",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "検索する選手名（部分一致）"},
                "compact": {
                    "type": "boolean",
                    "description": "Return columns/rows arrays instead of text",
                    "default": False,
                },
            },
            "required": ["query"],
        },
        "handler": tool_search_players,
    },
]
