"""IP 기반 기기 위치 클라이언트.

브라우저 위치 API가 없는 환경에서 공인 IP로 현재 위치를 추정합니다.
응답 예: {"status": "success", "lat": 41.9, "lon": 12.4}
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from store_locator.application.ports.geolocation import GeolocationPort
from store_locator.domain.exceptions import (
    GeolocationDeniedError,
    GeolocationUnavailableError,
)
from store_locator.domain.value_objects import Location

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://ip-api.com/json"
DEFAULT_TIMEOUT = 5.0


class IpGeolocationClient(GeolocationPort):
    """IP 위치 조회 HTTP 클라이언트."""

    def __init__(self, url: str = DEFAULT_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._url = url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def get_current_position(self) -> Location:
        client = await self._get_client()

        try:
            response = await client.get(self._url, params={"fields": "status,message,lat,lon"})
        except httpx.HTTPError as e:
            logger.error("Geolocation request failed", extra={"error": str(e)})
            raise GeolocationUnavailableError(f"geolocation lookup failed: {e}") from e

        if response.status_code in (401, 403):
            raise GeolocationDeniedError()
        if response.status_code != 200:
            raise GeolocationUnavailableError(f"geolocation lookup failed: HTTP {response.status_code}")

        return self._parse_response(response.json())

    @staticmethod
    def _parse_response(data: dict[str, Any]) -> Location:
        if data.get("status") != "success":
            logger.warning("Geolocation refused", extra={"reason": data.get("message")})
            raise GeolocationDeniedError(data.get("message") or "user denied request for position")
        try:
            return Location(lat=float(data["lat"]), lng=float(data["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise GeolocationUnavailableError("malformed geolocation response") from e

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
