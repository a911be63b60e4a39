"""Search Options DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.value_objects import Location

DEFAULT_MAP_CENTER = Location(lat=41.9102415, lng=12.3959168)


@dataclass(frozen=True)
class DistanceLabels:
    """거리/소요 시간 표시 문구."""

    distance_text: str = "{{distance}}"
    by_car: str = "by car"
    by_walk: str = "by walk"


@dataclass(frozen=True)
class SearchOptions:
    """엔진 생성 시 한 번 소비되는 검색 옵션."""

    search_radius: float = 30.0
    show_store_distance: bool = True
    order_by_store_distance: bool = True
    unit_system: UnitSystem = UnitSystem.METRIC
    travel_mode: TravelMode = TravelMode.DRIVING
    map_address: str = ""
    map_center: Location = DEFAULT_MAP_CENTER
    map_zoom: int = 6
    find_user_location: bool = False
    nearest_stores: int | None = None
    far_stores_opacity: float = 0.65
    labels: DistanceLabels = field(default_factory=DistanceLabels)
