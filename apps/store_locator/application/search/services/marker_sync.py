"""Marker Sync Engine.

Store.id → Marker 매핑의 유일한 쓰기 주체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from store_locator.domain.entities import Marker
from store_locator.domain.entities.marker import DEFAULT_OPACITY
from store_locator.domain.exceptions import MarkerNotFoundError

if TYPE_CHECKING:
    from store_locator.application.search.dto import RankedStore
    from store_locator.domain.entities import Store

logger = logging.getLogger(__name__)


class MarkerSyncEngine:
    """마커 동기화 서비스.

    선택은 배타적입니다. 새 마커를 선택하기 전에 기존 선택과 정보 창을 닫습니다.
    """

    def __init__(
        self,
        nearest_stores: int | None = None,
        far_stores_opacity: float = 0.65,
    ) -> None:
        """초기화.

        Args:
            nearest_stores: 이 순위 밖의 마커는 흐리게 표시 (None이면 모두 불투명)
            far_stores_opacity: 먼 매장 마커 투명도
        """
        self._markers: dict[int, Marker] = {}
        self._nearest_stores = nearest_stores
        self._far_opacity = far_stores_opacity

    @property
    def markers(self) -> dict[int, Marker]:
        return dict(self._markers)

    @property
    def selected_id(self) -> int | None:
        for store_id, marker in self._markers.items():
            if marker.selected:
                return store_id
        return None

    def get(self, store_id: int) -> Marker:
        try:
            return self._markers[store_id]
        except KeyError:
            raise MarkerNotFoundError(store_id) from None

    def sync(self, published: Sequence["RankedStore"]) -> None:
        """발행 목록에 맞춰 마커를 생성/갱신합니다.

        목록에 없는 매장의 마커는 제거하지 않고 숨깁니다.
        마커 제거는 reset_to_full_set으로 매장 집합이 교체될 때만 일어납니다.
        """
        present = {s.id for s in published}
        for store_id, marker in self._markers.items():
            if store_id not in present:
                self._hide(marker)

        rank = 0
        for ranked in published:
            marker = self._markers.get(ranked.id)
            if marker is None:
                marker = Marker(store_id=ranked.id)
                self._markers[ranked.id] = marker

            marker.visible = not ranked.hidden
            if marker.visible:
                marker.opacity = self._opacity_for(rank)
                rank += 1
            else:
                self._hide(marker)

        logger.debug(
            "Markers synchronized",
            extra={"markers": len(self._markers), "visible": rank},
        )

    def select(self, store_id: int) -> Marker:
        """store_id 마커를 선택하고 정보 창을 엽니다."""
        marker = self.get(store_id)
        self.deselect()
        marker.selected = True
        marker.info_open = True
        return marker

    def deselect(self) -> None:
        for marker in self._markers.values():
            marker.selected = False
            marker.info_open = False

    def close_info(self) -> None:
        """열린 정보 창만 닫습니다. 선택은 유지합니다."""
        for marker in self._markers.values():
            marker.info_open = False

    def reset_to_full_set(self, stores: Sequence["Store"]) -> None:
        """전체 매장 마커를 다시 만들고 모두 표시, 선택 해제."""
        self._markers = {store.id: Marker(store_id=store.id) for store in stores}

    @staticmethod
    def _hide(marker: Marker) -> None:
        marker.visible = False
        marker.selected = False
        marker.info_open = False

    def _opacity_for(self, rank: int) -> float:
        if self._nearest_stores is not None and rank >= self._nearest_stores:
            return self._far_opacity
        return DEFAULT_OPACITY
