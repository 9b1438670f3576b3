"""
Pydantic record types for teams and players.

Attributes are snake_case; dumping with ``by_alias=True`` yields the camelCase
keys used by tool consumers (``teamCode``, ``playerId``, ``rosterType`` ...).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CENTRAL = "セントラル"
PACIFIC = "パシフィック"

ROSTER_ACTIVE = "支配下"
ROSTER_DEVELOPMENTAL = "育成"

LeagueType = Literal["セントラル", "パシフィック"]
RosterType = Literal["支配下", "育成"]


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Team(_Record):
    """One of the 12 NPB clubs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    code: str = Field(..., description="Short lowercase team code (e.g. 'g')")
    name: str = Field(..., description="Japanese display name")
    league: LeagueType = Field(..., description="セントラル or パシフィック")


class PlayerSummary(_Record):
    """A single player row from a team roster page."""

    number: str = Field(..., description="Jersey number as shown on the page")
    name: str = Field(..., description="Display name, whitespace collapsed")
    position: str = Field(..., description="Position group from the preceding section header")
    team: str
    team_code: str
    player_id: str
    birthday: str = ""
    height: str = ""
    weight: str = ""
    throw_hand: str = ""
    bat_hand: str = ""
    note: str = ""
    roster_type: RosterType = ROSTER_ACTIVE


class PlayerDetail(_Record):
    """Profile fields scraped from a player's page."""

    player_id: str
    number: str = ""
    name: str = ""
    kana: str = Field(default="", description="Phonetic (hiragana) reading of the name")
    team: str = Field(default="", description="Team label as printed on the profile page")

    def is_blank(self) -> bool:
        """True when the page yielded none of the profile fields."""
        return not (self.number or self.name or self.kana or self.team)
