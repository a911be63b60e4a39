"""Google Distance Matrix HTTP 클라이언트.

- 경로 거리: GET /distancematrix/json?origins=..&destinations=..&mode=..&units=..
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from store_locator.application.ports.distance_matrix import (
    DistanceMatrixElement,
    DistanceMatrixPort,
)
from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.value_objects import Location
from store_locator.infrastructure.integrations.google.base import GoogleMapsHttpClient

logger = logging.getLogger(__name__)

STATUS_OK = "OK"


class GoogleDistanceMatrixClient(GoogleMapsHttpClient, DistanceMatrixPort):
    """Google Distance Matrix API 클라이언트 (1:1 요청)."""

    async def get_distance(
        self,
        origin: Location,
        destination: Location,
        travel_mode: TravelMode,
        unit_system: UnitSystem,
    ) -> DistanceMatrixElement:
        """경로 거리를 조회합니다. HTTP 오류는 그대로 전파합니다."""
        client = await self._get_client()

        params: dict[str, Any] = {
            "origins": f"{origin.lat},{origin.lng}",
            "destinations": f"{destination.lat},{destination.lng}",
            "mode": travel_mode.value.lower(),
            "units": unit_system.value.lower(),
            "key": self._api_key,
        }
        if travel_mode is TravelMode.DRIVING:
            params["departure_time"] = "now"

        try:
            response = await client.get("/distancematrix/json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Google distance matrix HTTP error",
                extra={"status_code": e.response.status_code},
            )
            raise
        except httpx.TimeoutException:
            logger.error("Google distance matrix timeout")
            raise

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: dict[str, Any]) -> DistanceMatrixElement:
        status = data.get("status", "UNKNOWN_ERROR")
        if status != STATUS_OK:
            return DistanceMatrixElement(status=status)

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError):
            return DistanceMatrixElement(status="NOT_FOUND")

        element_status = element.get("status", "UNKNOWN_ERROR")
        if element_status != STATUS_OK:
            return DistanceMatrixElement(status=element_status)

        distance = element.get("distance") or {}
        duration = element.get("duration_in_traffic") or element.get("duration") or {}
        return DistanceMatrixElement(
            status=element_status,
            distance_meters=distance.get("value"),
            duration_text=duration.get("text"),
        )
