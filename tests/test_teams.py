"""Tests for the static team registry."""

import pytest

from npb_data.exceptions import UnknownTeamError
from npb_data.models import CENTRAL, PACIFIC, Team
from npb_data.teams import TEAM_CODES, TEAMS, find_team, get_team, list_teams, teams_by_league


class TestTeamRegistry:
    def test_has_twelve_teams(self) -> None:
        assert len(list_teams()) == 12

    def test_six_teams_per_league(self) -> None:
        assert len(teams_by_league(CENTRAL)) == 6
        assert len(teams_by_league(PACIFIC)) == 6

    def test_codes_are_unique_and_in_contract_order(self) -> None:
        assert TEAM_CODES == ("g", "t", "db", "c", "s", "d", "h", "f", "m", "e", "b", "l")
        assert len(set(TEAM_CODES)) == 12

    def test_central_teams_precede_pacific(self) -> None:
        leagues = [t.league for t in TEAMS]
        assert leagues == [CENTRAL] * 6 + [PACIFIC] * 6

    @pytest.mark.parametrize(
        "code,name",
        [
            ("g", "読売ジャイアンツ"),
            ("db", "横浜DeNAベイスターズ"),
            ("e", "東北楽天ゴールデンイーグルス"),
            ("b", "オリックス・バファローズ"),
            ("l", "埼玉西武ライオンズ"),
        ],
    )
    def test_get_team_by_code(self, code: str, name: str) -> None:
        assert get_team(code).name == name

    def test_get_unknown_team_raises(self) -> None:
        with pytest.raises(UnknownTeamError, match="Unknown team code: x") as exc_info:
            get_team("x")
        assert exc_info.value.team_code == "x"

    def test_lookup_is_case_sensitive(self) -> None:
        assert find_team("G") is None
        assert find_team("g") is not None

    def test_list_teams_returns_a_copy(self) -> None:
        teams = list_teams()
        teams.clear()
        assert len(list_teams()) == 12

    def test_teams_are_frozen(self) -> None:
        with pytest.raises(Exception):
            TEAMS[0].name = "changed"  # type: ignore[misc]

    def test_team_dump_uses_contract_keys(self) -> None:
        assert Team(code="g", name="読売ジャイアンツ", league=CENTRAL).model_dump(by_alias=True) == {
            "code": "g",
            "name": "読売ジャイアンツ",
            "league": "セントラル",
        }
