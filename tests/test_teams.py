"""Tests for the team reference table."""
import pytest
from pydantic import ValidationError

from homecourt.reference.teams import (
    DEFAULT_LOGO_ID,
    TEAMS,
    code_to_name,
    name_to_code,
    name_to_logo_id,
    team_names,
)


class TestTeamReferenceTable:
    def test_has_thirty_unique_teams(self):
        assert len(TEAMS) == 30
        assert len({team.full_name for team in TEAMS}) == 30
        assert len({team.code for team in TEAMS}) == 30

    @pytest.mark.parametrize("name", team_names())
    def test_name_code_round_trip(self, name):
        """codeToName(nameToCode(name)) is the identity for every known team."""
        assert code_to_name(name_to_code(name)) == name

    def test_known_lookups(self):
        assert name_to_code("Los Angeles Lakers") == "LAL"
        assert name_to_code("LA Clippers") == "LAC"
        assert code_to_name("MIA") == "Miami Heat"
        assert name_to_logo_id("Philadelphia 76ers") == "sixers"

    def test_unknown_name_has_no_code(self):
        assert name_to_code("Seattle SuperSonics") is None

    def test_unknown_code_falls_back_to_itself(self):
        assert code_to_name("SEA") == "SEA"

    def test_unknown_name_gets_default_logo(self):
        assert name_to_logo_id("Seattle SuperSonics") == DEFAULT_LOGO_ID == "default-logo"

    def test_every_team_has_a_logo(self):
        for team in TEAMS:
            assert name_to_logo_id(team.full_name) != DEFAULT_LOGO_ID

    def test_team_identity_is_immutable(self):
        with pytest.raises(ValidationError):
            TEAMS[0].code = "XXX"

    def test_team_names_follow_selector_order(self):
        names = team_names()
        assert names[0] == "Atlanta Hawks"
        assert names[-1] == "Washington Wizards"
