"""NPB Roster & Player Data

Async scrapers for Japanese professional baseball (NPB) team rosters and
player profiles from npb.jp, plus an MCP server exposing them as tools.
"""

__version__ = "0.1.0"

from .api.search import search_players
from .exceptions import FetchError, NPBDataError, UnknownTeamError
from .fetchers.player import get_player_detail
from .fetchers.roster import get_team_roster
from .models import PlayerDetail, PlayerSummary, Team
from .teams import TEAMS, get_team, list_teams, teams_by_league

__all__ = [
    "TEAMS",
    "list_teams",
    "get_team",
    "teams_by_league",
    "get_team_roster",
    "get_player_detail",
    "search_players",
    "Team",
    "PlayerSummary",
    "PlayerDetail",
    "NPBDataError",
    "UnknownTeamError",
    "FetchError",
]
