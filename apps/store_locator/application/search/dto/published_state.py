"""Published State DTO."""

from __future__ import annotations

from dataclasses import dataclass

from store_locator.application.search.dto.ranked_store import RankedStore
from store_locator.application.search.dto.resolved_location import ResolvedLocation
from store_locator.domain.value_objects import BoundingBox, Location


@dataclass(frozen=True)
class MapView:
    """렌더링 계층이 맞출 지도 화면."""

    center: Location
    zoom: int
    bounds: BoundingBox | None = None


@dataclass(frozen=True)
class PublishedState:
    """렌더링 계층에 발행되는 상태 스냅샷.

    항상 통째로 교체되며 부분 갱신되지 않습니다.
    """

    stores: tuple[RankedStore, ...]
    map_view: MapView
    active_store_id: int | None = None
    resolved_location: ResolvedLocation | None = None
    current_position: Location | None = None
    session_id: int | None = None

    @property
    def visible_stores(self) -> tuple[RankedStore, ...]:
        return tuple(s for s in self.stores if not s.hidden)

    @property
    def is_empty(self) -> bool:
        """표시할 결과가 없으면 True ("no results" 상태)."""
        return not self.visible_stores

    @property
    def store_ids(self) -> list[int]:
        return [s.id for s in self.stores]
