"""Published State Schemas.

렌더링 계층이 소비하는 발행 상태 직렬화 스키마.
"""

from __future__ import annotations

from pydantic import BaseModel

from store_locator.application.search.dto import MapView, PublishedState, RankedStore
from store_locator.application.search.services import build_directions_url
from store_locator.domain.value_objects import BoundingBox, Location
from store_locator.presentation.schemas.config import LocationConfig


def _location(value: Location | None) -> LocationConfig | None:
    if value is None:
        return None
    return LocationConfig(lat=value.lat, lng=value.lng)


class BoundsSchema(BaseModel):
    southwest: LocationConfig
    northeast: LocationConfig

    @classmethod
    def from_domain(cls, bounds: BoundingBox | None) -> BoundsSchema | None:
        if bounds is None:
            return None
        return cls(southwest=_location(bounds.southwest), northeast=_location(bounds.northeast))


class MapViewSchema(BaseModel):
    """지도 화면 스키마."""

    center: LocationConfig
    zoom: int
    bounds: BoundsSchema | None = None

    @classmethod
    def from_domain(cls, view: MapView) -> MapViewSchema:
        return cls(
            center=_location(view.center),
            zoom=view.zoom,
            bounds=BoundsSchema.from_domain(view.bounds),
        )


class ResolvedLocationSchema(BaseModel):
    """해석된 위치 스키마."""

    location: LocationConfig
    formatted_address: str
    is_specific: bool


class RankedStoreSchema(BaseModel):
    """목록 항목 스키마."""

    id: int
    name: str
    location: LocationConfig
    tags: list[str]
    address: str | None
    phone: str | None
    email: str | None
    website: str | None
    approximate_distance: float | None
    precise_distance: float | None
    distance_text: str | None
    duration_text: str | None
    hidden: bool
    selected: bool
    directions_url: str

    @classmethod
    def from_domain(
        cls,
        ranked: RankedStore,
        search_location: Location | None,
        active_store_id: int | None,
    ) -> RankedStoreSchema:
        store = ranked.store
        return cls(
            id=store.id,
            name=store.name,
            location=_location(store.location),
            tags=sorted(store.tags),
            address=store.address,
            phone=store.phone,
            email=store.email,
            website=store.website,
            approximate_distance=ranked.approximate_distance,
            precise_distance=ranked.precise_distance,
            distance_text=ranked.distance_text,
            duration_text=ranked.duration_text,
            hidden=ranked.hidden,
            selected=store.id == active_store_id,
            directions_url=build_directions_url(search_location, store.location),
        )


class PublishedStateSchema(BaseModel):
    """발행 상태 스키마."""

    stores: list[RankedStoreSchema]
    active_store_id: int | None
    resolved_location: ResolvedLocationSchema | None
    current_position: LocationConfig | None
    map_view: MapViewSchema
    session_id: int | None
    is_empty: bool

    @classmethod
    def from_state(cls, state: PublishedState) -> PublishedStateSchema:
        resolved = state.resolved_location
        search_location = resolved.location if resolved else None
        return cls(
            stores=[
                RankedStoreSchema.from_domain(s, search_location, state.active_store_id)
                for s in state.stores
            ],
            active_store_id=state.active_store_id,
            resolved_location=(
                ResolvedLocationSchema(
                    location=_location(resolved.location),
                    formatted_address=resolved.formatted_address,
                    is_specific=resolved.is_specific,
                )
                if resolved
                else None
            ),
            current_position=_location(state.current_position),
            map_view=MapViewSchema.from_domain(state.map_view),
            session_id=state.session_id,
            is_empty=state.is_empty,
        )
