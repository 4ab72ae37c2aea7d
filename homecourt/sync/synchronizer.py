import asyncio
from typing import Callable, List, Optional, Tuple

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from loguru import logger

from homecourt.config.settings import settings
from homecourt.models.game import DisplayGame
from homecourt.normalization.normalizer import Normalizer
from homecourt.reference.teams import name_to_code
from homecourt.scrapers.base_scraper import ScraperError
from homecourt.scrapers.schedule_scraper import ScheduleScraper
from homecourt.sync.session import SyncSession

GamesCallback = Callable[[Tuple[DisplayGame, ...]], None]

# Ticks may overlap a slow fetch; the session's cycle guard keeps the newest result
MAX_OVERLAPPING_CYCLES = 3


class InvalidTeamError(ValueError):
    """Raised when a sync is requested without a team."""

    pass


class GameFeedSynchronizer:
    """Keeps the upcoming games of one selected team current.

    Usage:
        async with GameFeedSynchronizer() as sync:
            sync.subscribe(render)
            await sync.start("Miami Heat")
            ...

    At most one session is active at a time; starting a new team tears the
    previous session's refresh job down first.
    """

    def __init__(
        self,
        scraper: Optional[ScheduleScraper] = None,
        normalizer: Optional[Normalizer] = None,
        refresh_interval_ms: Optional[int] = None,
    ):
        if refresh_interval_ms is None:
            refresh_interval_ms = settings.refresh_interval_ms
        if refresh_interval_ms <= 0:
            raise ValueError(
                f"refresh_interval_ms must be positive, got {refresh_interval_ms}"
            )

        self.scraper = scraper or ScheduleScraper()
        self.normalizer = normalizer or Normalizer()
        self.refresh_interval_ms = refresh_interval_ms
        self.scheduler = AsyncIOScheduler(
            timezone="UTC",
            job_defaults={
                "coalesce": True,  # Combine missed runs into one
                "max_instances": MAX_OVERLAPPING_CYCLES,
            },
        )
        self._session: Optional[SyncSession] = None
        self._subscribers: List[GamesCallback] = []

    @property
    def session(self) -> Optional[SyncSession]:
        return self._session

    @property
    def is_running(self) -> bool:
        return self._session is not None

    @property
    def team(self) -> Optional[str]:
        return self._session.team if self._session else None

    @property
    def last_games(self) -> Tuple[DisplayGame, ...]:
        return self._session.last_games if self._session else ()

    def subscribe(self, callback: GamesCallback) -> Callable[[], None]:
        """Registers a callback for every published list; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def start(self, team: str) -> None:
        """Starts polling for a team, replacing any running session.

        Runs the first fetch cycle before returning, then schedules the refresh job.
        """
        team = (team or "").strip()
        if not team:
            raise InvalidTeamError("A team must be selected before syncing games.")

        replacing = self._session is not None
        if replacing:
            self.stop()

        team_key = name_to_code(team)
        if team_key is None:
            logger.warning(f"No code known for '{team}'; sending it upstream as-is.")
            team_key = team

        session = SyncSession(team, team_key, self.refresh_interval_ms)
        self._session = session
        logger.info(
            f"Starting game sync for {team} ({team_key}) every {session.refresh_interval_ms} ms"
        )
        if replacing:
            # Subscribers must not keep showing the previous team's games
            self._notify(session.last_games)

        try:
            await self._run_cycle(session)
        except asyncio.CancelledError:
            if session is self._session:
                logger.info(f"Start of game sync for {team} was cancelled")
                self.stop()
            raise

        # The caller may have switched teams or stopped while the first fetch ran
        if session is not self._session:
            logger.debug(f"{session!r} replaced before its refresh job was scheduled")
            return

        if not self.scheduler.running:
            self.scheduler.start()
        session.timer = self.scheduler.add_job(
            self._run_cycle,
            trigger=IntervalTrigger(seconds=session.refresh_interval_seconds),
            args=[session],
            id=f"game-sync-{team_key}",
            name=f"Refresh games for {team}",
            replace_existing=True,
        )

    async def refresh(self) -> None:
        """Runs one fetch cycle for the active session right away; no-op when idle."""
        if self._session is None:
            return
        await self._run_cycle(self._session)

    def stop(self) -> None:
        """Removes the refresh job of the active session, if any."""
        session = self._session
        if session is None:
            return
        self._session = None
        session.close()
        logger.info(f"Stopped game sync for {session.team}")

    async def aclose(self) -> None:
        """Stops syncing, shuts the scheduler down, and closes the HTTP client."""
        self.stop()
        if self.scheduler.running:
            self.scheduler.shutdown(wait=True)
        await self.scraper.close()

    async def __aenter__(self) -> "GameFeedSynchronizer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _run_cycle(self, session: SyncSession) -> None:
        """Fetches, normalizes and publishes once. Failures keep the previous list."""
        cycle_id = session.next_cycle_id()
        try:
            schedule = await self.scraper.fetch_schedule(session.team_key)
            games = tuple(self.normalizer.normalize(session.team, schedule.games))
        except ScraperError as e:
            logger.error(f"Schedule refresh for {session.team} failed: {e}")
            return
        except Exception as e:
            logger.exception(
                f"Unexpected error refreshing schedule for {session.team}: {e}"
            )
            return

        if not session.publish(cycle_id, games):
            logger.debug(
                f"Discarding cycle {cycle_id} result for {session.team} (stale or stopped)"
            )
            return

        logger.info(f"Published {len(games)} games for {session.team}")
        self._notify(games)

    def _notify(self, games: Tuple[DisplayGame, ...]) -> None:
        for callback in list(self._subscribers):
            try:
                callback(games)
            except Exception:
                logger.exception(f"Games subscriber {callback!r} failed")
