"""Dependency wiring.

외부 서비스 어댑터를 싱글톤으로 만들고 엔진 구성요소를 조립합니다.
"""

from __future__ import annotations

import logging
from typing import Sequence

from store_locator.application.common.exceptions import GoogleApiUnavailableError
from store_locator.application.ports import DistanceMatrixPort, GeocoderPort, GeolocationPort
from store_locator.application.search import (
    DistanceEngine,
    FilterEngine,
    LocationResolver,
    MarkerSyncEngine,
    SearchOptions,
    SearchSessionController,
)
from store_locator.application.search.dto import FilterDefinition
from store_locator.domain.entities import Store
from store_locator.setup.config import Settings, get_settings

logger = logging.getLogger(__name__)

_geocoder: GeocoderPort | None = None
_distance_matrix: DistanceMatrixPort | None = None
_geolocation: GeolocationPort | None = None


def get_geocoder(settings: Settings | None = None) -> GeocoderPort:
    """Google Geocoding 클라이언트 싱글톤을 반환합니다."""
    global _geocoder  # noqa: PLW0603
    if _geocoder is None:
        settings = settings or get_settings()
        if not settings.google_maps_api_key:
            raise GoogleApiUnavailableError()

        from store_locator.infrastructure.integrations.google import GoogleGeocodingClient

        _geocoder = GoogleGeocodingClient(
            api_key=settings.google_maps_api_key,
            timeout=settings.google_api_timeout,
        )
        logger.info("Google geocoding client created")
    return _geocoder


def get_distance_matrix_client(settings: Settings | None = None) -> DistanceMatrixPort | None:
    """Google Distance Matrix 클라이언트 싱글톤. 키가 없으면 None."""
    global _distance_matrix  # noqa: PLW0603
    if _distance_matrix is None:
        settings = settings or get_settings()
        if settings.google_maps_api_key:
            from store_locator.infrastructure.integrations.google import GoogleDistanceMatrixClient

            _distance_matrix = GoogleDistanceMatrixClient(
                api_key=settings.google_maps_api_key,
                timeout=settings.google_api_timeout,
            )
            logger.info("Google distance matrix client created")
        else:
            logger.warning("GOOGLE_MAPS_API_KEY not set, precise distances disabled")
    return _distance_matrix


def get_geolocation(settings: Settings | None = None) -> GeolocationPort | None:
    """기기 위치 클라이언트 싱글톤. 비활성화면 None."""
    global _geolocation  # noqa: PLW0603
    if _geolocation is None:
        settings = settings or get_settings()
        if settings.geolocation_enabled:
            from store_locator.infrastructure.geolocation import IpGeolocationClient

            _geolocation = IpGeolocationClient(
                url=settings.geolocation_url,
                timeout=settings.geolocation_timeout,
            )
            logger.info("Geolocation client created")
    return _geolocation


async def close_clients() -> None:
    """생성된 어댑터를 모두 닫습니다."""
    global _geocoder, _distance_matrix, _geolocation  # noqa: PLW0603
    for client in (_geocoder, _distance_matrix, _geolocation):
        if client is not None:
            await client.close()
    _geocoder = None
    _distance_matrix = None
    _geolocation = None


def build_controller(
    stores: Sequence[Store],
    filters: Sequence[FilterDefinition],
    options: SearchOptions,
    *,
    geocoder: GeocoderPort,
    distance_matrix: DistanceMatrixPort | None = None,
    geolocation: GeolocationPort | None = None,
    max_concurrent: int = 5,
) -> SearchSessionController:
    """엔진 구성요소를 조립합니다."""
    resolver = LocationResolver(geocoder=geocoder, geolocation=geolocation)
    distance_engine = DistanceEngine(
        distance_matrix if options.show_store_distance else None,
        unit_system=options.unit_system,
        travel_mode=options.travel_mode,
        order_by_distance=options.order_by_store_distance,
        labels=options.labels,
        max_concurrent=max_concurrent,
    )
    return SearchSessionController(
        stores=stores,
        resolver=resolver,
        distance_engine=distance_engine,
        filter_engine=FilterEngine(filters),
        marker_sync=MarkerSyncEngine(
            nearest_stores=options.nearest_stores,
            far_stores_opacity=options.far_stores_opacity,
        ),
        options=options,
    )
