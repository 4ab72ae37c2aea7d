# homecourt/scrapers/schedule_scraper.py

from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from homecourt.config.settings import settings
from homecourt.models.raw_game import ScheduleResponse
from .base_scraper import BaseScraper, ScheduleDecodeError

# Key the schedule service reads the team identifier from
TEAM_REQUEST_KEY = "Team"


class ScheduleScraper(BaseScraper):
    """Client for the upcoming-games endpoint of the schedule service."""

    source: str = "schedule service"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        url: Optional[str] = None,
    ):
        super().__init__(client)
        self.url = url or settings.schedule_api_url

    async def fetch_schedule(self, team_key: str) -> ScheduleResponse:
        """Fetch the upcoming games for a team code (or raw team string).

        Raises:
            ScheduleTransportError: network failure or non-2xx status.
            ScheduleDecodeError: the body is not JSON or lacks the expected shape.
        """
        logger.debug(f"Fetching schedule for '{team_key}' from {self.url}")
        response = await self._make_request(
            method="POST",
            url=self.url,
            json_data={TEAM_REQUEST_KEY: team_key},
        )

        try:
            payload = response.json()
        except ValueError as e:
            logger.debug(f"Raw schedule response content: {response.text[:500]}")
            raise ScheduleDecodeError(f"Schedule response is not JSON: {e}") from e

        try:
            schedule = ScheduleResponse.model_validate(payload)
        except ValidationError as e:
            logger.debug(f"Unexpected schedule payload: {payload!r}")
            raise ScheduleDecodeError(
                f"Schedule response has unexpected shape ({e.error_count()} errors)"
            ) from e

        logger.info(f"Fetched {len(schedule.games)} games for '{team_key}'")
        return schedule
