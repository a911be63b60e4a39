"""Ranked Store DTO."""

from __future__ import annotations

from dataclasses import dataclass

from store_locator.domain.entities import Store


@dataclass(frozen=True)
class RankedStore:
    """검색 결과 작업 사본.

    원본 Store는 건드리지 않고 계산 값만 덧붙입니다.
    """

    store: Store
    approximate_distance: float | None = None
    precise_distance: float | None = None
    distance_text: str | None = None
    duration_text: str | None = None
    hidden: bool = False

    @property
    def id(self) -> int:
        return self.store.id

    @property
    def sort_distance(self) -> float:
        """정밀 거리가 있으면 정밀 거리, 없으면 근사 거리."""
        if self.precise_distance is not None:
            return self.precise_distance
        if self.approximate_distance is not None:
            return self.approximate_distance
        return float("inf")
