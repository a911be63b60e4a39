"""Google Maps HTTP 클라이언트 공통부."""

from __future__ import annotations

import asyncio

import httpx

DEFAULT_TIMEOUT = 10.0


class GoogleMapsHttpClient:
    """지연 생성되는 httpx.AsyncClient를 공유하는 베이스 클래스."""

    BASE_URL = "https://maps.googleapis.com/maps/api"

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.BASE_URL,
                        timeout=self._timeout,
                    )
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
