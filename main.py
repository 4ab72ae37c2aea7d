import sys
import asyncio
from typing import Tuple

# --- Settings/Logging ---
from homecourt.logging.setup import setup_logging
from homecourt.config.settings import settings

setup_logging()

from loguru import logger

from homecourt.display.games_table import build_games_table
from homecourt.models.game import DisplayGame
from homecourt.reference.teams import team_names
from homecourt.sync.synchronizer import GameFeedSynchronizer, InvalidTeamError

from rich import print
from rich.panel import Panel


async def main(team: str) -> None:
    """Polls the schedule service for a team and prints every refreshed list."""
    logger.info(f"Starting homecourt game feed for {team}")
    if team not in team_names():
        logger.warning(
            f"'{team}' is not a known team name; it will be sent to the schedule service unchanged."
        )

    def render(games: Tuple[DisplayGame, ...]) -> None:
        if games:
            print(build_games_table(team, games))
        else:
            print(Panel(f"No upcoming games for {team}.", title="homecourt"))

    async with GameFeedSynchronizer() as sync:
        sync.subscribe(render)
        await sync.start(team)
        # Runs until interrupted; the context manager stops the timer on exit
        await asyncio.Event().wait()


if __name__ == "__main__":
    selected_team = " ".join(sys.argv[1:]) or settings.default_team
    try:
        asyncio.run(main(selected_team))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except InvalidTeamError as e:
        logger.error(str(e))
        sys.exit(2)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
