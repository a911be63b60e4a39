"""Distance Engine Service.

2단계 거리 계산:
    A. approximate - 대원 거리로 반경 필터 및 정렬 (동기, 네트워크 없음)
    B. precise - 살아남은 매장만 외부 거리 행렬 서비스로 보정 (비동기, 동시성 제한)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Sequence

from store_locator.application.search.dto import DistanceLabels, RankedStore
from store_locator.application.search.services.distance_formatter import DistanceFormatter
from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.exceptions import PreciseDistanceUnavailableError
from store_locator.domain.services import convert, haversine_distance

if TYPE_CHECKING:
    from store_locator.application.ports import DistanceMatrixPort
    from store_locator.domain.entities import Store
    from store_locator.domain.value_objects import Location

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENT = 5


class DistanceEngine:
    """2단계 거리 계산 서비스."""

    def __init__(
        self,
        distance_matrix: "DistanceMatrixPort | None" = None,
        *,
        unit_system: UnitSystem = UnitSystem.METRIC,
        travel_mode: TravelMode = TravelMode.DRIVING,
        order_by_distance: bool = True,
        labels: DistanceLabels | None = None,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> None:
        """초기화.

        Args:
            distance_matrix: 정밀 거리 Port (없으면 precise는 입력을 그대로 반환)
            unit_system: 거리 단위 체계
            travel_mode: 이동 수단
            order_by_distance: 거리순 정렬 여부
            labels: 거리/소요 시간 문구
            max_concurrent: 동시 외부 요청 수 제한
        """
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self._distance_matrix = distance_matrix
        self._unit_system = unit_system
        self._travel_mode = travel_mode
        self._order_by_distance = order_by_distance
        self._formatter = DistanceFormatter(unit_system, labels)
        self._semaphore = asyncio.Semaphore(max_concurrent)

    @property
    def unit_system(self) -> UnitSystem:
        return self._unit_system

    def approximate(
        self,
        ref: "Location",
        stores: Sequence["Store"],
        radius: float,
        unit: UnitSystem | None = None,
    ) -> list[RankedStore]:
        """근사 거리로 반경 내 매장을 골라 정렬합니다.

        radius와 같거나 먼 매장은 제외합니다 (strict <).
        정렬은 안정 정렬이라 같은 거리는 입력 순서를 유지합니다.
        """
        unit = unit or self._unit_system
        formatter = self._formatter if unit is self._unit_system else DistanceFormatter(unit)

        results: list[RankedStore] = []
        for store in stores:
            distance = convert(haversine_distance(ref, store.location), unit)
            if distance >= radius:
                continue
            results.append(
                RankedStore(
                    store=store,
                    approximate_distance=distance,
                    distance_text=formatter.approximate_text(distance),
                )
            )

        if self._order_by_distance:
            results.sort(key=lambda s: s.approximate_distance)
        return results

    async def precise(self, ref: "Location", stores: Sequence[RankedStore]) -> list[RankedStore]:
        """외부 서비스로 정밀 거리를 계산합니다.

        요소 하나의 실패는 그 요소의 근사 값으로 대체하며 전체를 실패시키지 않습니다.
        """
        if self._distance_matrix is None or not stores:
            return list(stores)

        logger.info("Precise distance refinement started", extra={"count": len(stores)})

        tasks = [self._refine(ref, store) for store in stores]
        results = list(await asyncio.gather(*tasks))

        if self._order_by_distance:
            results.sort(key=lambda s: s.sort_distance)

        refined_count = sum(1 for s in results if s.precise_distance is not None)
        logger.info(
            "Precise distance refinement completed",
            extra={"total": len(results), "refined": refined_count},
        )
        return results

    async def _refine(self, ref: "Location", ranked: RankedStore) -> RankedStore:
        async with self._semaphore:
            try:
                element = await self._distance_matrix.get_distance(
                    ref,
                    ranked.store.location,
                    self._travel_mode,
                    self._unit_system,
                )
                if not element.is_ok:
                    raise PreciseDistanceUnavailableError(ranked.id, element.status)
            except Exception as e:
                logger.debug(
                    "Precise distance fell back to approximate: %s",
                    e,
                    extra={"store_id": ranked.id},
                )
                return ranked

        return replace(
            ranked,
            precise_distance=self._formatter.precise_value(element.distance_meters),
            distance_text=self._formatter.precise_text(element.distance_meters),
            duration_text=self._formatter.duration_text(element.duration_text, self._travel_mode),
        )
