"""Shared pytest fixtures for homecourt tests."""
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from homecourt.models.raw_game import RawGame
from homecourt.scrapers.schedule_scraper import ScheduleScraper

TEST_URL = "http://schedule.test/get"

BOS_VS_MIA = {
    "home_team": "BOS",
    "away_team": "MIA",
    "start_time": "2024-11-07T20:00:00Z",
    "venueName": "TD Garden",
    "lowest_ticket_price": "45",
}


@pytest.fixture
def game_payload() -> Dict[str, Any]:
    """One upstream game: Miami at Boston."""
    return dict(BOS_VS_MIA)


@pytest.fixture
def make_raw_game(game_payload: Dict[str, Any]) -> Callable[..., RawGame]:
    """Builds a RawGame from the sample game with upstream keys overridden."""

    def factory(**overrides) -> RawGame:
        return RawGame.model_validate({**game_payload, **overrides})

    return factory


@pytest.fixture
def schedule_payload(game_payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"games": [game_payload]}


@pytest.fixture
def sent_teams() -> List[str]:
    """Team identifiers received by the fake schedule service, in order."""
    return []


@pytest.fixture
def make_scraper(sent_teams: List[str]) -> Callable[..., ScheduleScraper]:
    """Builds a ScheduleScraper whose requests are answered by `handler`.

    The handler receives the decoded request body and returns an httpx.Response
    (sync or async).
    """

    def factory(handler) -> ScheduleScraper:
        async def transport_handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            sent_teams.append(body["Team"])
            response = handler(body)
            if not isinstance(response, httpx.Response):
                response = await response
            return response

        client = httpx.AsyncClient(transport=httpx.MockTransport(transport_handler))
        return ScheduleScraper(client=client, url=TEST_URL)

    return factory
