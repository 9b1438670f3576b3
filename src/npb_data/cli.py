#!/usr/bin/env python3
"""
Command-line interface for NPB roster data.

Usage:
    npb teams                         # List all 12 teams
    npb teams --league central        # Central League only
    npb roster g                      # Giants roster, grouped by position
    npb roster t --output table       # Tigers roster as a table
    npb player 11215114               # Player profile
    npb search 田中 --output json      # Cross-team name search
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import pandas as pd

from npb_data.api.search import search_players
from npb_data.exceptions import NPBDataError
from npb_data.fetchers.player import get_player_detail
from npb_data.fetchers.roster import get_team_roster
from npb_data.models import CENTRAL, PACIFIC, PlayerSummary
from npb_data.servers.mcp.tools import (
    format_player_detail,
    format_roster,
    format_search_results,
    format_team_list,
)
from npb_data.teams import get_team, list_teams, teams_by_league

LEAGUE_CHOICES = {"central": CENTRAL, "pacific": PACIFIC}

# ============================================================================
# Helper Functions
# ============================================================================


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as formatted JSON."""
    print(json.dumps(data, indent=indent, ensure_ascii=False, default=str))


def print_players(players: list[PlayerSummary], output: str, text: str) -> None:
    if output == "json":
        print_json([p.model_dump(by_alias=True) for p in players])
    elif output == "table":
        df = pd.DataFrame.from_records([p.model_dump(by_alias=True) for p in players])
        if df.empty:
            print("(no players)")
        else:
            print(df[["number", "name", "position", "team", "playerId", "rosterType"]].to_string(index=False))
    else:
        print(text)


# ============================================================================
# Commands
# ============================================================================


def cmd_teams(args: argparse.Namespace) -> None:
    """List teams, optionally limited to one league."""
    if args.league:
        for t in teams_by_league(LEAGUE_CHOICES[args.league]):
            print(f"{t.code}\t{t.name}")
    else:
        print(format_team_list(list_teams()))


def cmd_roster(args: argparse.Namespace) -> None:
    """Print a team's roster."""
    team = get_team(args.team_code)
    players = asyncio.run(get_team_roster(team.code))
    print_players(players, args.output, format_roster(team.name, players))


def cmd_player(args: argparse.Namespace) -> None:
    """Print a player's profile."""
    detail = asyncio.run(get_player_detail(args.player_id))
    if args.output == "json":
        print_json(detail.model_dump(by_alias=True))
    else:
        print(format_player_detail(detail))


def cmd_search(args: argparse.Namespace) -> None:
    """Search every roster for a name fragment."""
    results = asyncio.run(search_players(args.query))
    print_players(results, args.output, format_search_results(args.query, results))


# ============================================================================
# Main CLI Entry Point
# ============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npb",
        description="NPB roster and player data from npb.jp",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")
    subparsers.required = True

    parser_teams = subparsers.add_parser("teams", help="List the 12 NPB teams")
    parser_teams.add_argument("--league", choices=sorted(LEAGUE_CHOICES), help="Filter by league")
    parser_teams.set_defaults(func=cmd_teams)

    parser_roster = subparsers.add_parser("roster", help="Show a team's roster")
    parser_roster.add_argument("team_code", help="Team code (g, t, db, c, s, d, h, f, m, e, b, l)")
    parser_roster.add_argument("--output", choices=["text", "json", "table"], default="text")
    parser_roster.set_defaults(func=cmd_roster)

    parser_player = subparsers.add_parser("player", help="Show a player's profile")
    parser_player.add_argument("player_id", help="Player ID (e.g. 11215114)")
    parser_player.add_argument("--output", choices=["text", "json"], default="text")
    parser_player.set_defaults(func=cmd_player)

    parser_search = subparsers.add_parser("search", help="Search all rosters by name")
    parser_search.add_argument("query", help="Name fragment (substring match)")
    parser_search.add_argument("--output", choices=["text", "json", "table"], default="text")
    parser_search.set_defaults(func=cmd_search)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        args.func(args)
    except NPBDataError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
