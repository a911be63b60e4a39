"""Location Resolver Service.

주소 문자열, 좌표, 기기 위치를 ResolvedLocation 하나로 해석합니다.
공유 상태는 바꾸지 않으며 세션 시작은 호출자의 몫입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from store_locator.application.ports.geocoder import GeocodeRequest
from store_locator.application.search.dto import (
    AddressInput,
    CoordinatesInput,
    DeviceLocationInput,
    PlaceInput,
    ResolvedLocation,
    to_location_input,
)
from store_locator.domain.exceptions import (
    GeolocationUnavailableError,
    NoGeocodingResultError,
)

if TYPE_CHECKING:
    from store_locator.application.ports import (
        GeocodeResultDTO,
        GeocoderPort,
        GeolocationPort,
    )
    from store_locator.domain.value_objects import Location

logger = logging.getLogger(__name__)

# 행정구역 분류 (도시, 국가 등)
ADMINISTRATIVE_PLACE_TYPES = frozenset(
    {
        "political",
        "country",
        "administrative_area_level_1",
        "administrative_area_level_2",
        "administrative_area_level_3",
        "locality",
    }
)


class LocationResolver:
    """위치 해석 서비스."""

    def __init__(
        self,
        geocoder: "GeocoderPort",
        geolocation: "GeolocationPort | None" = None,
    ) -> None:
        """Initialize.

        Args:
            geocoder: 지오코딩 Port
            geolocation: 기기 위치 Port (없으면 기기 위치 요청 시 GeolocationUnavailableError)
        """
        self._geocoder = geocoder
        self._geolocation = geolocation

    async def resolve(self, location_input: object) -> ResolvedLocation:
        """입력을 정규화된 위치로 해석합니다.

        Raises:
            NoGeocodingResultError: 후보 없음 또는 실패 상태
            GeolocationUnavailableError: 기기 위치 기능 없음
            GeolocationDeniedError: 기기 위치 요청 거부
        """
        value = to_location_input(location_input)

        if isinstance(value, DeviceLocationInput):
            position = await self._current_position()
            return await self._geocode(GeocodeRequest(location=position))

        if isinstance(value, PlaceInput):
            if value.location is None:
                return await self._geocode(GeocodeRequest(address=value.name))
            return ResolvedLocation(
                location=value.location,
                formatted_address=value.formatted_address or value.name,
                is_specific=self.is_specific(value.place_types),
                viewport=value.viewport,
            )

        if isinstance(value, CoordinatesInput):
            return await self._geocode(GeocodeRequest(location=value.location))

        if isinstance(value, AddressInput):
            return await self._geocode(GeocodeRequest(address=value.address))

        raise TypeError(f"Unsupported location input: {value!r}")

    @staticmethod
    def is_specific(place_types: tuple[str, ...] | list[str]) -> bool:
        """행정구역이 아니면 True (거리/POI 수준 결과)."""
        return ADMINISTRATIVE_PLACE_TYPES.isdisjoint(place_types)

    async def _current_position(self) -> "Location":
        if self._geolocation is None:
            raise GeolocationUnavailableError()
        position = await self._geolocation.get_current_position()
        logger.info("Device position acquired", extra={"lat": position.lat, "lng": position.lng})
        return position

    async def _geocode(self, request: GeocodeRequest) -> ResolvedLocation:
        response = await self._geocoder.geocode(request)
        if not response.is_ok:
            logger.info(
                "Geocoding returned no result",
                extra={"status": response.status, "address": request.address},
            )
            raise NoGeocodingResultError(response.status)

        return self._to_resolved(response.results[0])

    def _to_resolved(self, result: "GeocodeResultDTO") -> ResolvedLocation:
        return ResolvedLocation(
            location=result.location,
            formatted_address=result.formatted_address,
            is_specific=self.is_specific(result.place_types),
            viewport=result.viewport,
        )
