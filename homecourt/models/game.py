from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, computed_field

from homecourt.reference.teams import name_to_logo_id


class DisplayGame(BaseModel):
    """A scheduled game as seen from the selected team, ready for display."""

    model_config = ConfigDict(frozen=True)

    opponent_name: str
    home_team_name: str
    away_team_name: str
    start_time: datetime
    venue_name: str
    lowest_ticket_price: str
    win_odds: Optional[float] = None
    injured_players: Optional[Tuple[str, ...]] = None

    @computed_field  # type: ignore[misc]
    @property
    def opponent_logo_id(self) -> str:
        return name_to_logo_id(self.opponent_name)

    @computed_field  # type: ignore[misc]
    @property
    def description(self) -> str:
        """A human-readable description of the game."""
        return f"{self.away_team_name} @ {self.home_team_name}"
