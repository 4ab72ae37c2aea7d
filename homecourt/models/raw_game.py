from datetime import datetime
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InjuredPlayer(BaseModel):
    """Injury entry as stored by the upstream service."""

    team: Optional[str] = None
    player_name: str
    status: Optional[str] = None


class RawGame(BaseModel):
    """One scheduled contest exactly as the schedule service returns it."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,  # prices sometimes arrive as JSON numbers
    )

    home_team: str  # upstream code
    away_team: str  # upstream code
    start_time: datetime
    venue_name: str = Field(..., alias="venueName")
    lowest_ticket_price: str
    win_odds: Optional[float] = Field(None, alias="winOdds", ge=0, le=100)
    injured_players: Optional[Tuple[str, ...]] = Field(None, alias="injuredPlayers")

    @field_validator("injured_players", mode="before")
    @classmethod
    def _player_names(cls, value: Any) -> Any:
        # Accept bare names as well as {team, player_name, status} objects
        if not isinstance(value, list):
            return value
        return [
            InjuredPlayer.model_validate(item).player_name
            if isinstance(item, dict)
            else item
            for item in value
        ]


class ScheduleResponse(BaseModel):
    """Body of a successful schedule request."""

    model_config = ConfigDict(extra="ignore")

    games: List[RawGame]

    @field_validator("games", mode="before")
    @classmethod
    def _null_means_no_games(cls, value: Any) -> Any:
        # The service encodes an empty schedule as null
        return [] if value is None else value
