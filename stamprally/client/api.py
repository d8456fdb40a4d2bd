"""Async HTTP client for the venue completion API."""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


@dataclass
class ApiResult:
    """Outcome of an API call; failures are reported, not raised."""

    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None


class RallyClient:
    """Client for the /venues endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport)

    async def get_venues(self, user_id: str) -> ApiResult:
        """Fetch a user's completion summary."""
        try:
            async with self._client() as client:
                response = await client.get(f"/venues/{quote(user_id, safe='')}")
                response.raise_for_status()
                return ApiResult(success=True, data=response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"API error fetching venues for {user_id}: {e.response.status_code}")
            return ApiResult(success=False, error=f"HTTP Error: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching venues for {user_id}: {e}")
            return ApiResult(success=False, error=str(e))

    async def complete(self, venue_id: str, user_id: str, completed: bool = True) -> ApiResult:
        """Record a check-in for a venue."""
        payload = {"venuesid": venue_id, "userid": user_id, "complate": 1 if completed else 0}
        try:
            async with self._client() as client:
                response = await client.post("/venues/complete", json=payload)
                response.raise_for_status()
                return ApiResult(success=True, data=response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"API error completing {venue_id} for {user_id}: {e.response.status_code}")
            return ApiResult(success=False, error=f"HTTP Error: {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Transport error completing {venue_id} for {user_id}: {e}")
            return ApiResult(success=False, error=str(e))
