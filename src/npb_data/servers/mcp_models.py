"""
Pydantic models for MCP tool parameter validation.

Arguments arrive from an LLM as loose JSON; these models reject missing or
mistyped parameters before any scraping starts.
"""

from pydantic import BaseModel, Field, ValidationError, field_validator


class ListTeamsArgs(BaseModel):
    """Parameters for list_teams tool (none)."""


class GetTeamRosterArgs(BaseModel):
    """Parameters for get_team_roster tool."""

    team_code: str = Field(..., description="球団コード (g, t, db, c, s, d, h, f, m, e, b, l)")

    compact: bool = Field(default=False, description="Return columns/rows arrays instead of text")

    @field_validator("team_code")
    @classmethod
    def normalize_team_code(cls, v: str) -> str:
        # Unknown codes are left for the scraper to reject with UnknownTeamError
        return v.strip()


class GetPlayerDetailArgs(BaseModel):
    """Parameters for get_player_detail tool."""

    player_id: str = Field(..., min_length=1, description="選手ID（例: 11215114）")

    @field_validator("player_id")
    @classmethod
    def validate_player_id(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("player_id must not be blank")
        return v


class SearchPlayersArgs(BaseModel):
    """Parameters for search_players tool."""

    query: str = Field(..., description="検索する選手名（部分一致）")

    compact: bool = Field(default=False, description="Return columns/rows arrays instead of text")


TOOL_MODELS: dict[str, type[BaseModel]] = {
    "list_teams": ListTeamsArgs,
    "get_team_roster": GetTeamRosterArgs,
    "get_player_detail": GetPlayerDetailArgs,
    "search_players": SearchPlayersArgs,
}


def validate_tool_args(tool_name: str, args: dict) -> dict:
    """
    Validate tool arguments using Pydantic models.

    Returns:
        Validated arguments dictionary

    Raises:
        ValueError: If validation fails with detailed error message

    Examples:
        >>> validate_tool_args("get_team_roster", {"team_code": " g "})
        {'team_code': 'g', 'compact': False}
    """
    if tool_name not in TOOL_MODELS:
        return args

    try:
        validated = TOOL_MODELS[tool_name](**args)
    except ValidationError as e:
        raise ValueError(f"Validation failed for {tool_name}: {e}") from e
    return validated.model_dump()


__all__ = [
    "TOOL_MODELS",
    "validate_tool_args",
    "GetTeamRosterArgs",
    "GetPlayerDetailArgs",
    "SearchPlayersArgs",
]
