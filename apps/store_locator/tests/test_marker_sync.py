"""MarkerSyncEngine 단위 테스트."""

from __future__ import annotations

import pytest

from store_locator.application.search import MarkerSyncEngine, RankedStore
from store_locator.domain.entities import Store
from store_locator.domain.exceptions import MarkerNotFoundError


class TestMarkerSyncEngine:
    """MarkerSyncEngine 테스트."""

    def test_reset_creates_all_visible(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)

        assert set(engine.markers) == {0, 1, 2}
        assert all(m.visible and not m.selected for m in engine.markers.values())

    def test_sync_keeps_absent_markers_hidden(self, stores: list[Store]) -> None:
        """발행 목록에 없는 마커도 유지하고 숨김 (매장-마커 1:1 유지)."""
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)

        engine.sync([RankedStore(store=stores[1]), RankedStore(store=stores[0], hidden=True)])

        assert set(engine.markers) == {0, 1, 2}
        assert engine.get(1).visible
        assert not engine.get(0).visible
        assert not engine.get(2).visible

    def test_absent_marker_reappears_when_listed(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)
        engine.sync([RankedStore(store=stores[0])])

        engine.sync([RankedStore(store=s) for s in stores])

        assert all(m.visible for m in engine.markers.values())

    def test_absent_selected_marker_is_deselected(self, stores: list[Store]) -> None:
        """선택된 매장이 목록에서 빠지면 선택과 정보 창 해제."""
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)
        engine.select(2)

        engine.sync([RankedStore(store=stores[0]), RankedStore(store=stores[1])])

        assert engine.selected_id is None
        assert not engine.get(2).info_open

    def test_reset_replaces_store_set(self, stores: list[Store]) -> None:
        """매장 집합이 교체될 때만 마커가 제거됨."""
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)

        engine.reset_to_full_set(stores[:1])

        assert set(engine.markers) == {0}

    def test_sync_creates_missing(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.sync([RankedStore(store=stores[2])])
        assert engine.get(2).visible

    def test_select_is_exclusive(self, stores: list[Store]) -> None:
        """한 번에 하나만 선택되고 정보 창도 하나만 열림."""
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)

        engine.select(0)
        engine.select(2)

        selected = [m for m in engine.markers.values() if m.selected]
        opened = [m for m in engine.markers.values() if m.info_open]
        assert [m.store_id for m in selected] == [2]
        assert [m.store_id for m in opened] == [2]
        assert engine.selected_id == 2

    def test_select_unknown(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)

        with pytest.raises(MarkerNotFoundError):
            engine.select(99)

    def test_hidden_marker_is_deselected(self, stores: list[Store]) -> None:
        """선택된 마커가 숨겨지면 선택 해제."""
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)
        engine.select(0)

        engine.sync([RankedStore(store=s, hidden=s.id == 0) for s in stores])

        assert engine.selected_id is None
        assert not engine.get(0).info_open

    def test_close_info_keeps_selection(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)
        engine.select(1)

        engine.close_info()

        assert engine.selected_id == 1
        assert not engine.get(1).info_open

    def test_reset_clears_selection(self, stores: list[Store]) -> None:
        engine = MarkerSyncEngine()
        engine.reset_to_full_set(stores)
        engine.select(1)

        engine.reset_to_full_set(stores)

        assert engine.selected_id is None

    def test_far_stores_opacity(self, stores: list[Store]) -> None:
        """가까운 N개 밖의 보이는 마커는 흐리게."""
        engine = MarkerSyncEngine(nearest_stores=1, far_stores_opacity=0.5)

        engine.sync(
            [
                RankedStore(store=stores[0], hidden=True),
                RankedStore(store=stores[1]),
                RankedStore(store=stores[2]),
            ]
        )

        assert engine.get(1).opacity == 1.0
        assert engine.get(2).opacity == 0.5
