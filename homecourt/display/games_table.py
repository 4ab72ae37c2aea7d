from typing import Sequence

from rich.table import Table

from homecourt.models.game import DisplayGame

NO_ODDS_TEXT = "n/a"
NO_INJURIES_TEXT = "none reported"


def format_win_odds(game: DisplayGame) -> str:
    if game.win_odds is None:
        return NO_ODDS_TEXT
    return f"~{game.win_odds:g}% to win"


def format_injuries(game: DisplayGame) -> str:
    if not game.injured_players:
        return NO_INJURIES_TEXT
    return ", ".join(game.injured_players)


def build_games_table(team: str, games: Sequence[DisplayGame]) -> Table:
    """One row per game, with fallback text for missing odds and injuries."""
    table = Table(title=f"Upcoming games: {team}", show_lines=True)
    table.add_column("Matchup", style="bold")
    table.add_column("Opponent")
    table.add_column("Date")
    table.add_column("Venue")
    table.add_column("Min ticket price", justify="right")
    table.add_column("Home team moneyline", justify="center")
    table.add_column("Injury report")

    for game in games:
        table.add_row(
            game.description,
            f"{game.opponent_name} ({game.opponent_logo_id})",
            game.start_time.strftime("%B %d, %Y at %I:%M %p"),
            game.venue_name,
            game.lowest_ticket_price,
            format_win_odds(game),
            format_injuries(game),
        )
    return table
