"""Google Geocoding HTTP 클라이언트.

- 주소 검색: GET /geocode/json?address=...
- 역지오코딩: GET /geocode/json?latlng=lat,lng
- 인증: key 쿼리 파라미터
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from store_locator.application.ports.geocoder import (
    GeocodeRequest,
    GeocodeResponse,
    GeocodeResultDTO,
    GeocoderPort,
)
from store_locator.domain.value_objects import BoundingBox, Location
from store_locator.infrastructure.integrations.google.base import GoogleMapsHttpClient

logger = logging.getLogger(__name__)

REQUEST_FAILED = "REQUEST_FAILED"


class GoogleGeocodingClient(GoogleMapsHttpClient, GeocoderPort):
    """Google Geocoding API 클라이언트.

    전송 오류는 로그를 남기고 REQUEST_FAILED 상태 응답으로 돌려줍니다.
    """

    async def geocode(self, request: GeocodeRequest) -> GeocodeResponse:
        client = await self._get_client()

        params: dict[str, Any] = {"key": self._api_key}
        if request.address is not None:
            params["address"] = request.address
        else:
            params["latlng"] = f"{request.location.lat},{request.location.lng}"

        try:
            response = await client.get("/geocode/json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Google geocoding HTTP error",
                extra={"status_code": e.response.status_code, "address": request.address},
            )
            return GeocodeResponse(status=REQUEST_FAILED)
        except httpx.TimeoutException:
            logger.error("Google geocoding timeout", extra={"address": request.address})
            return GeocodeResponse(status=REQUEST_FAILED)
        except httpx.HTTPError as e:
            logger.error(
                "Google geocoding failed",
                extra={"address": request.address, "error": str(e)},
            )
            return GeocodeResponse(status=REQUEST_FAILED)

        return self._parse_response(data)

    def _parse_response(self, data: dict[str, Any]) -> GeocodeResponse:
        status = data.get("status", REQUEST_FAILED)
        results: list[GeocodeResultDTO] = []

        for doc in data.get("results", []):
            geometry = doc.get("geometry") or {}
            location = geometry.get("location")
            if not location:
                continue
            results.append(
                GeocodeResultDTO(
                    formatted_address=doc.get("formatted_address", ""),
                    location=Location(lat=float(location["lat"]), lng=float(location["lng"])),
                    place_types=tuple(doc.get("types", [])),
                    viewport=self._parse_bounds(geometry.get("bounds") or geometry.get("viewport")),
                )
            )

        return GeocodeResponse(status=status, results=results)

    @staticmethod
    def _parse_bounds(raw: dict[str, Any] | None) -> BoundingBox | None:
        if not raw:
            return None
        try:
            return BoundingBox(
                southwest=Location(lat=raw["southwest"]["lat"], lng=raw["southwest"]["lng"]),
                northeast=Location(lat=raw["northeast"]["lat"], lng=raw["northeast"]["lng"]),
            )
        except (KeyError, TypeError):
            return None
