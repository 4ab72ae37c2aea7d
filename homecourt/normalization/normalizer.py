from typing import Iterable, List

from loguru import logger

from homecourt.models.game import DisplayGame
from homecourt.models.raw_game import RawGame
from homecourt.reference.teams import code_to_name, name_to_code


class Normalizer:
    """Turns raw schedule entries into DisplayGames relative to a selected team.

    Holds no state: the output depends only on the selected team and the raw
    games, so identical responses always normalize to identical lists.
    """

    def normalize(
        self, selected_team: str, raw_games: Iterable[RawGame]
    ) -> List[DisplayGame]:
        """Normalizes raw games in upstream order.

        Args:
            selected_team: Full team name (or an upstream code) the user picked.
            raw_games: Games as returned by the schedule service.

        Returns:
            A list of DisplayGame objects, one per raw game, same order.
        """
        display_games = [
            self.normalize_game(selected_team, raw_game) for raw_game in raw_games
        ]
        logger.debug(
            f"Normalized {len(display_games)} games for '{selected_team}'"
        )
        return display_games

    def normalize_game(self, selected_team: str, raw_game: RawGame) -> DisplayGame:
        home_team_name = code_to_name(raw_game.home_team)
        away_team_name = code_to_name(raw_game.away_team)

        return DisplayGame(
            opponent_name=self._resolve_opponent(
                selected_team, raw_game, home_team_name, away_team_name
            ),
            home_team_name=home_team_name,
            away_team_name=away_team_name,
            start_time=raw_game.start_time,
            venue_name=raw_game.venue_name,
            lowest_ticket_price=raw_game.lowest_ticket_price,
            win_odds=raw_game.win_odds,
            injured_players=raw_game.injured_players,
        )

    def _resolve_opponent(
        self,
        selected_team: str,
        raw_game: RawGame,
        home_team_name: str,
        away_team_name: str,
    ) -> str:
        """Picks whichever side of the game is not the selected team."""
        selected_code = name_to_code(selected_team) or selected_team

        if selected_code == raw_game.home_team:
            return away_team_name
        if selected_code == raw_game.away_team:
            return home_team_name

        logger.warning(
            f"Selected team '{selected_team}' ({selected_code}) plays neither side of "
            f"{raw_game.away_team} @ {raw_game.home_team}; using away team as opponent."
        )
        return away_team_name
