"""Search Session Controller.

검색 한 주기를 지휘하는 Command입니다.
    1. 위치 해석 (LocationResolver)
    2. 근사 순위/반경 필터 후 중간 발행 (DistanceEngine.approximate)
    3. 정밀 보정 후 최종 발행 (DistanceEngine.precise)

가장 최근에 시작된 세션만 발행할 수 있습니다. 늦게 끝난 이전 세션의
결과는 폐기합니다 (요청 취소가 아니라 커밋 시점 폐기).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Sequence

from store_locator.application.search.dto import (
    DEVICE,
    AddressInput,
    MapView,
    PublishedState,
    RankedStore,
    ResolvedLocation,
    SearchOptions,
    SearchSession,
    to_location_input,
)
from store_locator.domain.enums import SessionState
from store_locator.domain.exceptions import DomainError
from store_locator.domain.services import convert
from store_locator.domain.value_objects import BoundingBox

if TYPE_CHECKING:
    from store_locator.application.search.dto import FilterState
    from store_locator.application.search.services import (
        DistanceEngine,
        FilterEngine,
        LocationResolver,
        MarkerSyncEngine,
    )
    from store_locator.domain.entities import Store

logger = logging.getLogger(__name__)

StateListener = Callable[[PublishedState], None]


class SearchSessionController:
    """검색 세션 지휘자.

    모든 상태 변경은 단일 이벤트 루프의 await 지점 사이에서 일어나므로 잠금이 없습니다.
    """

    def __init__(
        self,
        stores: Sequence["Store"],
        resolver: "LocationResolver",
        distance_engine: "DistanceEngine",
        filter_engine: "FilterEngine",
        marker_sync: "MarkerSyncEngine",
        options: SearchOptions | None = None,
    ) -> None:
        self._stores = tuple(stores)
        self._resolver = resolver
        self._distance_engine = distance_engine
        self._filter_engine = filter_engine
        self._marker_sync = marker_sync
        self._options = options or SearchOptions()

        self._filter_state = filter_engine.initial_state()
        self._session_counter = 0
        self._current: SearchSession | None = None
        self._ranked: tuple[RankedStore, ...] = self._full_set()
        self._listeners: list[StateListener] = []

        self._marker_sync.reset_to_full_set(self._stores)
        self._published = PublishedState(stores=self._ranked, map_view=self._initial_map_view())

    @property
    def published(self) -> PublishedState:
        return self._published

    @property
    def current_session(self) -> SearchSession | None:
        return self._current

    @property
    def filter_state(self) -> "FilterState":
        return self._filter_state

    @property
    def stores(self) -> tuple["Store", ...]:
        return self._stores

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """발행 상태 구독. 해지 함수를 반환합니다."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def start(self) -> PublishedState:
        """전체 매장을 발행한 뒤 초기 위치로 검색합니다.

        기기 위치가 실패하면 설정된 초기 주소로 대체합니다.
        """
        self._publish(self._full_set())

        if self._options.find_user_location:
            try:
                await self.on_location_input(DEVICE)
                return self._published
            except DomainError as e:
                logger.warning(
                    "Device location failed, falling back to initial address",
                    extra={"error": e.message},
                )

        if self._options.map_address:
            try:
                await self.on_location_input(AddressInput(address=self._options.map_address))
            except DomainError as e:
                logger.warning(
                    "Initial address could not be resolved",
                    extra={"address": self._options.map_address, "error": e.message},
                )

        return self._published

    async def on_location_input(self, value: object) -> SearchSession:
        """위치 변경 이벤트로 새 세션을 실행합니다.

        Raises:
            DomainError: 위치 해석 실패 (세션은 IDLE로 돌아가고 발행 상태는 유지)
        """
        location_input = to_location_input(value)
        session = self._begin_session()
        session.transition(SessionState.RESOLVING)

        try:
            resolved = await self._resolver.resolve(location_input)
        except DomainError as e:
            session.transition(SessionState.IDLE)
            logger.warning(
                "Location resolution failed",
                extra={"session_id": session.session_id, "error": e.message},
            )
            raise

        if not self._is_current(session):
            return self._abort(session, "resolving")

        session.reference_location = resolved.location

        if not resolved.is_specific:
            self._commit_viewport(session, resolved)
            return session

        session.transition(SessionState.RANKING_APPROX)
        ranked = self._distance_engine.approximate(
            resolved.location,
            self._stores,
            session.radius,
            self._distance_engine.unit_system,
        )
        self._ranked = tuple(ranked)
        self._publish_ranking(session, resolved)
        logger.info(
            "Approximate ranking published",
            extra={"session_id": session.session_id, "results_count": len(ranked)},
        )

        if not (self._options.show_store_distance and ranked):
            session.transition(SessionState.COMMITTED)
            return session

        session.transition(SessionState.REFINING_PRECISE)
        refined = await self._distance_engine.precise(resolved.location, ranked)

        if not self._is_current(session):
            return self._abort(session, "refining")

        self._ranked = tuple(refined)
        self._publish_ranking(session, resolved)
        session.transition(SessionState.COMMITTED)
        logger.info(
            "Search session committed",
            extra={"session_id": session.session_id, "results_count": len(refined)},
        )
        return session

    def on_filter_toggle(self, tag: str, intended_on: bool) -> PublishedState:
        """필터 토글 후 현재 목록에 다시 적용합니다."""
        self._marker_sync.close_info()
        self._filter_state = self._filter_engine.toggle(self._filter_state, tag, intended_on)
        self._publish(self._filter_engine.apply(self._ranked, self._filter_state))
        return self._published

    def on_store_select(self, store_id: int) -> PublishedState:
        """매장(목록 항목 또는 마커)을 선택하고 지도를 그 위치로 옮깁니다.

        현재 목록에 없는 매장(반경 밖)의 마커를 고르면 전체 매장 목록을 복원한 뒤 선택합니다.
        """
        self._marker_sync.get(store_id)
        if store_id not in self._published.store_ids:
            self.on_reset()
        self._marker_sync.select(store_id)
        store = next(s for s in self._stores if s.id == store_id)
        map_view = replace(self._published.map_view, center=store.location)
        self._publish(self._published.stores, map_view=map_view)
        return self._published

    def on_reset(self) -> PublishedState:
        """검색어가 지워졌을 때 전체 매장을 선택 없이 모두 표시합니다.

        필터 상태는 그대로 두며 다음 토글이나 검색부터 다시 적용됩니다.
        진행 중인 세션은 더 이상 현재 세션이 아니므로 결과가 폐기됩니다.
        """
        self._current = None
        self._ranked = self._full_set()
        self._marker_sync.reset_to_full_set(self._stores)
        self._publish(
            self._ranked,
            map_view=self._initial_map_view(),
            resolved_location=None,
            current_position=None,
            session_id=None,
        )
        logger.info("Search reset to full store set", extra={"stores_count": len(self._stores)})
        return self._published

    def _begin_session(self) -> SearchSession:
        self._session_counter += 1
        radius = convert(self._options.search_radius, self._distance_engine.unit_system)
        session = SearchSession(session_id=self._session_counter, radius=radius)
        self._current = session
        logger.info("Search session started", extra={"session_id": session.session_id})
        return session

    def _is_current(self, session: SearchSession) -> bool:
        return self._current is session

    def _abort(self, session: SearchSession, phase: str) -> SearchSession:
        session.transition(SessionState.ABORTED)
        logger.info(
            "Discarded stale session result",
            extra={"session_id": session.session_id, "phase": phase},
        )
        return session

    def _commit_viewport(self, session: SearchSession, resolved: ResolvedLocation) -> None:
        map_view = MapView(
            center=resolved.location,
            zoom=self._published.map_view.zoom,
            bounds=resolved.viewport,
        )
        self._publish(
            self._published.stores,
            map_view=map_view,
            resolved_location=resolved,
            current_position=None,
            session_id=session.session_id,
        )
        session.transition(SessionState.COMMITTED)
        logger.info(
            "Administrative area selected, viewport only",
            extra={"session_id": session.session_id, "address": resolved.formatted_address},
        )

    def _publish_ranking(self, session: SearchSession, resolved: ResolvedLocation) -> None:
        bounds = BoundingBox.around(resolved.location)
        for ranked in self._ranked:
            bounds = bounds.extend(ranked.store.location)

        self._publish(
            self._filter_engine.apply(self._ranked, self._filter_state),
            map_view=MapView(center=bounds.center, zoom=self._published.map_view.zoom, bounds=bounds),
            resolved_location=resolved,
            current_position=resolved.location,
            session_id=session.session_id,
        )

    def _publish(self, stores: Sequence[RankedStore], **changes: object) -> None:
        self._marker_sync.sync(stores)
        self._published = replace(
            self._published,
            stores=tuple(stores),
            active_store_id=self._marker_sync.selected_id,
            **changes,
        )
        for listener in list(self._listeners):
            listener(self._published)

    def _full_set(self) -> tuple[RankedStore, ...]:
        return tuple(RankedStore(store=store) for store in self._stores)

    def _initial_map_view(self) -> MapView:
        return MapView(center=self._options.map_center, zoom=self._options.map_zoom)
