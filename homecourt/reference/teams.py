# homecourt/reference/teams.py
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

DEFAULT_LOGO_ID = "default-logo"


class TeamIdentity(BaseModel):
    """One franchise: canonical name, upstream code and logo asset key."""

    model_config = ConfigDict(frozen=True)

    full_name: str
    code: str  # 3-letter upstream identifier
    logo_id: str


TEAMS: Tuple[TeamIdentity, ...] = tuple(
    TeamIdentity(full_name=full_name, code=code, logo_id=logo_id)
    for full_name, code, logo_id in (
        ("Atlanta Hawks", "ATL", "hawks"),
        ("Boston Celtics", "BOS", "celtics"),
        ("Brooklyn Nets", "BKN", "nets"),
        ("Charlotte Hornets", "CHA", "hornets"),
        ("Chicago Bulls", "CHI", "bulls"),
        ("Cleveland Cavaliers", "CLE", "cavs"),
        ("Dallas Mavericks", "DAL", "mavs"),
        ("Denver Nuggets", "DEN", "nuggets"),
        ("Detroit Pistons", "DET", "pistons"),
        ("Golden State Warriors", "GSW", "warriors"),
        ("Houston Rockets", "HOU", "rockets"),
        ("Indiana Pacers", "IND", "pacers"),
        ("LA Clippers", "LAC", "clippers"),
        ("Los Angeles Lakers", "LAL", "lakers"),
        ("Memphis Grizzlies", "MEM", "grizzlies"),
        ("Miami Heat", "MIA", "heat"),
        ("Milwaukee Bucks", "MIL", "bucks"),
        ("Minnesota Timberwolves", "MIN", "wolves"),
        ("New Orleans Pelicans", "NOP", "pelicans"),
        ("New York Knicks", "NYK", "knicks"),
        ("Oklahoma City Thunder", "OKC", "thunder"),
        ("Orlando Magic", "ORL", "magic"),
        ("Philadelphia 76ers", "PHI", "sixers"),
        ("Phoenix Suns", "PHX", "suns"),
        ("Portland Trail Blazers", "POR", "blazers"),
        ("Sacramento Kings", "SAC", "kings"),
        ("San Antonio Spurs", "SAS", "spurs"),
        ("Toronto Raptors", "TOR", "raptors"),
        ("Utah Jazz", "UTA", "jazz"),
        ("Washington Wizards", "WAS", "wizards"),
    )
)

_BY_NAME: Mapping[str, TeamIdentity] = MappingProxyType(
    {team.full_name: team for team in TEAMS}
)
_BY_CODE: Mapping[str, TeamIdentity] = MappingProxyType(
    {team.code: team for team in TEAMS}
)


def name_to_code(full_name: str) -> Optional[str]:
    """Returns the upstream code for a full team name, or None if unknown."""
    team = _BY_NAME.get(full_name)
    return team.code if team else None


def code_to_name(code: str) -> str:
    """Returns the full name for an upstream code; unknown codes come back unchanged."""
    team = _BY_CODE.get(code)
    return team.full_name if team else code


def name_to_logo_id(full_name: str) -> str:
    team = _BY_NAME.get(full_name)
    return team.logo_id if team else DEFAULT_LOGO_ID


def team_names() -> Tuple[str, ...]:
    """Full names in selector order."""
    return tuple(team.full_name for team in TEAMS)
