"""Filter Engine Service."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from store_locator.application.common.exceptions import InvalidFilterTagError
from store_locator.application.search.dto import FilterDefinition, FilterState, RankedStore


class FilterEngine:
    """태그 필터 서비스.

    필터가 하나도 설정되지 않았으면 apply는 아무것도 숨기지 않습니다.
    """

    def __init__(self, filters: Sequence[FilterDefinition] = ()) -> None:
        self._filters = tuple(filters)
        self._tags = frozenset(f.tag for f in self._filters)

    @property
    def filters(self) -> tuple[FilterDefinition, ...]:
        return self._filters

    @property
    def enabled(self) -> bool:
        return bool(self._filters)

    def initial_state(self) -> FilterState:
        """모든 필터가 켜진 초기 상태."""
        return FilterState(active_tags=self._tags)

    def toggle(self, state: FilterState, tag: str, intended_on: bool) -> FilterState:
        """UI 의도(켜짐/꺼짐)에 맞춰 새 상태를 반환합니다.

        이전 포함 여부를 뒤집는 것이 아니라 intended_on을 그대로 반영합니다.
        """
        if tag not in self._tags:
            raise InvalidFilterTagError(tag, sorted(self._tags))
        if intended_on:
            return FilterState(active_tags=state.active_tags | {tag})
        return FilterState(active_tags=state.active_tags - {tag})

    def apply(self, stores: Sequence[RankedStore], state: FilterState) -> list[RankedStore]:
        """순서와 원소를 그대로 두고 hidden만 다시 계산합니다."""
        if not self.enabled:
            return [s if not s.hidden else replace(s, hidden=False) for s in stores]

        results: list[RankedStore] = []
        for store in stores:
            hidden = not store.store.has_any_tag(state.active_tags)
            results.append(store if store.hidden == hidden else replace(store, hidden=hidden))
        return results
