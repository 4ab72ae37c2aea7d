from typing import Optional, Tuple

from apscheduler.job import Job
from apscheduler.jobstores.base import JobLookupError
from loguru import logger

from homecourt.models.game import DisplayGame


class SyncSession:
    """One active subscription to a team's game feed.

    Owns the scheduled refresh job. Once closed, the session never publishes
    again, so responses still in flight for it are dropped.
    """

    def __init__(self, team: str, team_key: str, refresh_interval_ms: int):
        self.team = team
        self.team_key = team_key  # value sent upstream
        self.refresh_interval_ms = refresh_interval_ms
        self.last_games: Tuple[DisplayGame, ...] = ()
        self.timer: Optional[Job] = None
        self.active = True
        self._cycles_started = 0
        self._last_published_cycle = 0

    @property
    def refresh_interval_seconds(self) -> float:
        return self.refresh_interval_ms / 1000

    def next_cycle_id(self) -> int:
        self._cycles_started += 1
        return self._cycles_started

    def publish(self, cycle_id: int, games: Tuple[DisplayGame, ...]) -> bool:
        """Replaces last_games unless the session is closed or a newer cycle already published."""
        if not self.active or cycle_id <= self._last_published_cycle:
            return False
        self._last_published_cycle = cycle_id
        self.last_games = games
        return True

    def close(self) -> None:
        self.active = False
        if self.timer is not None:
            job, self.timer = self.timer, None
            try:
                job.remove()
            except JobLookupError:
                logger.debug(f"Refresh job {job.id} was already removed")

    def __repr__(self) -> str:
        return (
            f"SyncSession(team={self.team!r}, team_key={self.team_key!r}, "
            f"refresh_interval_ms={self.refresh_interval_ms}, active={self.active})"
        )
