"""
MCP Resource definitions for the team catalog.

Lets an LLM browse the 12 team codes without spending a tool call.
"""

import json
import logging
from typing import Any

from ...teams import find_team, list_teams

logger = logging.getLogger(__name__)

TEAMS_URI = "npb://teams"


def resource_list_teams() -> dict[str, Any]:
    """All teams as a JSON array."""
    teams = [t.model_dump() for t in list_teams()]
    return {
        "uri": TEAMS_URI,
        "mimeType": "application/json",
        "text": json.dumps(teams, ensure_ascii=False, indent=2),
    }


def resource_get_team(code: str) -> dict[str, Any]:
    uri = f"{TEAMS_URI}/{code}"
    team = find_team(code)
    if team is None:
        return {"uri": uri, "mimeType": "text/plain", "text": f"Team '{code}' not found"}

    return {
        "uri": uri,
        "mimeType": "application/json",
        "text": json.dumps(team.model_dump(), ensure_ascii=False, indent=2),
    }


def read_resource_uri(uri: str) -> str:
    """Resolve an npb:// URI to its text body."""
    if uri == TEAMS_URI:
        return resource_list_teams()["text"]

    if uri.startswith(TEAMS_URI + "/"):
        code = uri[len(TEAMS_URI) + 1 :]
        return resource_get_team(code)["text"]

    logger.warning(f"Unknown resource requested: {uri}")
    return f"Resource not found: {uri}"


RESOURCES = [
    {
        "uri": TEAMS_URI,
        "name": "NPB Teams",
        "description": "NPB全12球団の一覧 (code, name, league)",
        "mimeType": "application/json",
        "handler": resource_list_teams,
    },
    {
        "uri": TEAMS_URI + "/{code}",
        "name": "NPB Team",
        "description": "球団コードで指定した1球団の情報",
        "mimeType": "application/json",
        "handler": resource_get_team,
    },
]

# Concrete URIs advertised by list_resources
STATIC_RESOURCES = [
    {
        "uri": TEAMS_URI,
        "name": "NPB Teams",
        "description": "NPB全12球団の一覧",
        "mimeType": "application/json",
    },
] + [
    {
        "uri": f"{TEAMS_URI}/{t.code}",
        "name": t.name,
        "description": f"{t.name} ({t.league}・リーグ)",
        "mimeType": "application/json",
    }
    for t in list_teams()
]
