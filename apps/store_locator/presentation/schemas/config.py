"""Locator Configuration Schemas.

호출자가 넘기는 설정 객체를 검증하고 도메인/애플리케이션 타입으로 변환합니다.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from store_locator.application.search.dto import DistanceLabels, FilterDefinition, SearchOptions
from store_locator.domain.entities import Store
from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.value_objects import Location


class LocationConfig(BaseModel):
    """좌표 스키마."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Location:
        return Location(lat=self.lat, lng=self.lng)


class StoreConfig(BaseModel):
    """매장 입력 스키마. id는 받지 않고 목록 위치로 부여합니다."""

    name: str
    location: LocationConfig
    tags: list[str] = Field(default_factory=list)
    address: str | None = None
    summary: str | None = None
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    thumbnail: str | None = None
    marker: dict[str, Any] | None = None

    model_config = {"extra": "ignore"}

    def to_domain(self, store_id: int) -> Store:
        return Store(
            id=store_id,
            name=self.name,
            location=self.location.to_domain(),
            tags=frozenset(self.tags),
            address=self.address,
            summary=self.summary,
            description=self.description,
            phone=self.phone,
            email=self.email,
            website=self.website,
            thumbnail=self.thumbnail,
            marker_icon=self.marker,
        )


class FilterConfig(BaseModel):
    """필터 입력 스키마."""

    tag: str
    label: str = ""

    def to_domain(self) -> FilterDefinition:
        return FilterDefinition(tag=self.tag, label=self.label)


class LabelsConfig(BaseModel):
    """거리 문구 스키마."""

    distance_text: str = "{{distance}}"
    by_car: str = "by car"
    by_walk: str = "by walk"


class LocatorConfig(BaseModel):
    """엔진 생성 시 한 번 소비되는 설정 객체."""

    stores: list[StoreConfig] = Field(default_factory=list)
    filters: list[FilterConfig] = Field(default_factory=list)

    search_radius: float = Field(30.0, gt=0, description="Search radius in kilometres")
    show_store_distance: bool = True
    order_by_store_distance: bool = True

    map_address: str = ""
    map_center: LocationConfig = Field(
        default_factory=lambda: LocationConfig(lat=41.9102415, lng=12.3959168)
    )
    map_zoom: int = Field(6, ge=0, le=22)
    find_user_location: bool = False

    unit_system: UnitSystem = UnitSystem.METRIC
    travel_mode: TravelMode = TravelMode.DRIVING

    nearest_stores: int | None = Field(None, ge=1)
    far_stores_opacity: float = Field(0.65, ge=0, le=1)
    labels: LabelsConfig = Field(default_factory=LabelsConfig)

    @field_validator("unit_system", mode="before")
    @classmethod
    def _parse_unit_system(cls, value: Any) -> UnitSystem:
        return UnitSystem.parse(value)

    @field_validator("travel_mode", mode="before")
    @classmethod
    def _parse_travel_mode(cls, value: Any) -> TravelMode:
        return TravelMode.parse(value)

    def build_stores(self) -> list[Store]:
        """목록 위치(0부터)를 id로 부여한 매장 엔티티 목록."""
        return [store.to_domain(store_id=i) for i, store in enumerate(self.stores)]

    def build_filters(self) -> list[FilterDefinition]:
        return [f.to_domain() for f in self.filters]

    def build_options(self) -> SearchOptions:
        return SearchOptions(
            search_radius=self.search_radius,
            show_store_distance=self.show_store_distance,
            order_by_store_distance=self.order_by_store_distance,
            unit_system=self.unit_system,
            travel_mode=self.travel_mode,
            map_address=self.map_address,
            map_center=self.map_center.to_domain(),
            map_zoom=self.map_zoom,
            find_user_location=self.find_user_location,
            nearest_stores=self.nearest_stores,
            far_stores_opacity=self.far_stores_opacity,
            labels=DistanceLabels(
                distance_text=self.labels.distance_text,
                by_car=self.labels.by_car,
                by_walk=self.labels.by_walk,
            ),
        )
