from typing import Any, Dict, Optional

import httpx
from loguru import logger

from homecourt.config.settings import settings


class ScraperError(Exception):
    """Custom exception for upstream fetch errors."""

    pass


class ScheduleTransportError(ScraperError):
    """Network failure or non-success HTTP status from the schedule service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ScheduleDecodeError(ScraperError):
    """Response body is not JSON or does not have the expected shape."""

    pass


class BaseScraper:
    """Shared HTTP plumbing for clients of upstream services."""

    source: str = "upstream"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.request_timeout_seconds),
            follow_redirects=True,
            headers={"Content-Type": "application/json"},
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes an asynchronous HTTP request; failures surface as ScheduleTransportError.

        No retry happens here: callers poll on a fixed interval and the next
        tick is the retry.
        """
        log_context = {
            "method": method,
            "url": url,
            "params": params,
            "has_json": json_data is not None,
        }
        logger.debug(f"Making request", **log_context)
        try:
            response = await self.client.request(
                method,
                url,
                headers=headers,
                params=params,
                json=json_data,
                **kwargs,
            )
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            logger.debug(f"Request successful: {response.status_code} for {url}")
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                f"HTTP error during request to {self.source}: {status_code} - {url}"
            )
            raise ScheduleTransportError(
                f"HTTP error: {status_code}", status_code=status_code
            ) from e
        except httpx.RequestError as e:
            # Network errors, timeouts etc.
            logger.warning(f"Request error for {self.source} at {url}: {e!r}")
            raise ScheduleTransportError(f"Request failed: {e!r}") from e

    async def close(self):
        """Closes the underlying HTTP client."""
        await self.client.aclose()
        logger.info(f"Closed HTTP client for {self.source}")
