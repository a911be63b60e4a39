"""Store Locator - engine entry point.

설정 객체 하나로 검색 엔진을 생성합니다. 렌더링 계층은
SearchSessionController의 이벤트 진입점과 subscribe 피드를 사용합니다.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any

from store_locator.application.ports import DistanceMatrixPort, GeocoderPort, GeolocationPort
from store_locator.application.search import SearchSessionController
from store_locator.domain.exceptions import DomainError
from store_locator.presentation.schemas import LocatorConfig, PublishedStateSchema
from store_locator.setup.config import Settings, get_settings
from store_locator.setup.dependencies import (
    build_controller,
    close_clients,
    get_distance_matrix_client,
    get_geocoder,
    get_geolocation,
)
from store_locator.setup.logging import setup_logging

logger = logging.getLogger(__name__)


def create_locator(
    config: LocatorConfig | dict[str, Any],
    *,
    settings: Settings | None = None,
    geocoder: GeocoderPort | None = None,
    distance_matrix: DistanceMatrixPort | None = None,
    geolocation: GeolocationPort | None = None,
) -> SearchSessionController:
    """검색 엔진을 생성합니다.

    어댑터를 넘기지 않으면 설정에 따라 Google/IP 클라이언트를 사용합니다.
    """
    settings = settings or get_settings()
    if not isinstance(config, LocatorConfig):
        config = LocatorConfig.model_validate(config)

    stores = config.build_stores()
    controller = build_controller(
        stores,
        config.build_filters(),
        config.build_options(),
        geocoder=geocoder or get_geocoder(settings),
        distance_matrix=distance_matrix or get_distance_matrix_client(settings),
        geolocation=geolocation or get_geolocation(settings),
        max_concurrent=settings.precise_concurrency,
    )
    logger.info(
        f"Created {settings.service_name}",
        extra={"stores_count": len(stores), "filters_count": len(config.filters)},
    )
    return controller


async def run(
    config_path: str,
    query: str | None = None,
    *,
    settings: Settings | None = None,
    geocoder: GeocoderPort | None = None,
    distance_matrix: DistanceMatrixPort | None = None,
    geolocation: GeolocationPort | None = None,
) -> PublishedStateSchema:
    """설정 파일로 엔진을 만들고 초기 로딩 후 query로 한 번 검색합니다.

    위치 해석 실패는 로그만 남기고 직전 발행 상태를 그대로 반환합니다.
    """
    with open(config_path, encoding="utf-8") as f:
        controller = create_locator(
            json.load(f),
            settings=settings,
            geocoder=geocoder,
            distance_matrix=distance_matrix,
            geolocation=geolocation,
        )
    try:
        await controller.start()
        if query:
            try:
                await controller.on_location_input(query)
            except DomainError as e:
                logger.warning(
                    "Query could not be resolved",
                    extra={"query": query, "error": e.message},
                )
        return PublishedStateSchema.from_state(controller.published)
    finally:
        await close_clients()


if __name__ == "__main__":
    settings = get_settings()
    setup_logging(
        settings.log_level,
        engine_level=settings.engine_log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    state = asyncio.run(run(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
    print(state.model_dump_json(indent=2))
