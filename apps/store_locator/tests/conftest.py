"""Test fixtures for store locator tests."""

from __future__ import annotations

import asyncio
import math
from unittest.mock import AsyncMock

import pytest

from store_locator.application.ports import (
    DistanceMatrixElement,
    DistanceMatrixPort,
    GeocodeResponse,
    GeocodeResultDTO,
)
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
from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.services import EARTH_RADIUS_KM
from store_locator.domain.value_objects import BoundingBox, Location

REFERENCE = Location(lat=45.0, lng=9.0)
SECOND_REFERENCE = Location(lat=40.0, lng=-3.0)


def point_north(origin: Location, km: float) -> Location:
    """origin에서 정북 방향으로 km 떨어진 좌표."""
    return Location(lat=origin.lat + math.degrees(km / EARTH_RADIUS_KM), lng=origin.lng)


def geocode_result(
    location: Location,
    formatted_address: str = "Via Roma 1, Milano",
    place_types: tuple[str, ...] = ("street_address",),
    viewport: BoundingBox | None = None,
) -> GeocodeResponse:
    return GeocodeResponse(
        status="OK",
        results=[
            GeocodeResultDTO(
                formatted_address=formatted_address,
                location=location,
                place_types=place_types,
                viewport=viewport,
            )
        ],
    )


class FakeDistanceMatrix(DistanceMatrixPort):
    """목적지별 거리(m)를 돌려주는 테스트용 거리 행렬.

    gates에 등록된 출발지 요청은 이벤트가 set될 때까지 대기합니다.
    """

    def __init__(self, distances: dict[Location, int] | None = None) -> None:
        self.distances = distances or {}
        self.failures: dict[Location, str] = {}
        self.errors: set[Location] = set()
        self.gates: dict[Location, asyncio.Event] = {}
        self.delay = 0.0
        self.calls: list[tuple[Location, Location]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_distance(
        self,
        origin: Location,
        destination: Location,
        travel_mode: TravelMode,
        unit_system: UnitSystem,
    ) -> DistanceMatrixElement:
        self.calls.append((origin, destination))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            gate = self.gates.get(origin)
            if gate is not None:
                await gate.wait()
            if self.delay:
                await asyncio.sleep(self.delay)
            if destination in self.errors:
                raise RuntimeError("provider exploded")
            if destination in self.failures:
                return DistanceMatrixElement(status=self.failures[destination])
            meters = self.distances.get(destination)
            if meters is None:
                return DistanceMatrixElement(status="NOT_FOUND")
            return DistanceMatrixElement(status="OK", distance_meters=meters, duration_text="15 mins")
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        return None


@pytest.fixture
def store_a() -> Store:
    return Store(
        id=0,
        name="Store A",
        location=point_north(REFERENCE, 10),
        tags=frozenset({"bakery"}),
        address="Via A 1",
    )


@pytest.fixture
def store_b() -> Store:
    return Store(
        id=1,
        name="Store B",
        location=point_north(REFERENCE, 40),
        tags=frozenset({"cafe"}),
        address="Via B 2",
    )


@pytest.fixture
def store_c() -> Store:
    return Store(
        id=2,
        name="Store C",
        location=point_north(REFERENCE, 60),
        tags=frozenset({"bakery", "cafe"}),
        address="Via C 3",
    )


@pytest.fixture
def stores(store_a: Store, store_b: Store, store_c: Store) -> list[Store]:
    return [store_a, store_b, store_c]


@pytest.fixture
def filters() -> list[FilterDefinition]:
    return [FilterDefinition(tag="bakery", label="Bakery"), FilterDefinition(tag="cafe", label="Cafe")]


@pytest.fixture
def mock_geocoder() -> AsyncMock:
    """GeocoderPort mock. 기본으로 REFERENCE 거리 주소를 반환합니다."""
    geocoder = AsyncMock()
    geocoder.geocode = AsyncMock(return_value=geocode_result(REFERENCE))
    return geocoder


@pytest.fixture
def mock_geolocation() -> AsyncMock:
    geolocation = AsyncMock()
    geolocation.get_current_position = AsyncMock(return_value=REFERENCE)
    return geolocation


@pytest.fixture
def distance_matrix(store_a: Store, store_b: Store, store_c: Store) -> FakeDistanceMatrix:
    """A는 45km, B는 12km로 근사 순위와 반대 순서."""
    return FakeDistanceMatrix(
        {
            store_a.location: 45_000,
            store_b.location: 12_000,
            store_c.location: 70_000,
        }
    )


@pytest.fixture
def options() -> SearchOptions:
    return SearchOptions(search_radius=50, unit_system=UnitSystem.METRIC, order_by_store_distance=True)


def build_controller(
    stores: list[Store],
    geocoder: AsyncMock,
    distance_matrix: DistanceMatrixPort | None,
    options: SearchOptions,
    filters: list[FilterDefinition] | None = None,
    geolocation: AsyncMock | None = None,
    nearest_stores: int | None = None,
    marker_sync: MarkerSyncEngine | None = None,
) -> SearchSessionController:
    return SearchSessionController(
        stores=stores,
        resolver=LocationResolver(geocoder=geocoder, geolocation=geolocation),
        distance_engine=DistanceEngine(
            distance_matrix,
            unit_system=options.unit_system,
            travel_mode=options.travel_mode,
            order_by_distance=options.order_by_store_distance,
            labels=options.labels,
            max_concurrent=2,
        ),
        filter_engine=FilterEngine(filters or []),
        marker_sync=marker_sync or MarkerSyncEngine(nearest_stores=nearest_stores),
        options=options,
    )


@pytest.fixture
def controller(
    stores: list[Store],
    mock_geocoder: AsyncMock,
    distance_matrix: FakeDistanceMatrix,
    options: SearchOptions,
    filters: list[FilterDefinition],
) -> SearchSessionController:
    return build_controller(stores, mock_geocoder, distance_matrix, options, filters)
