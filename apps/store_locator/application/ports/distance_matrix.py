"""Distance Matrix Port.

출발지-목적지 한 쌍의 실제 경로 거리/소요 시간을 계산하는 외부 서비스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.value_objects import Location

ELEMENT_OK = "OK"


@dataclass(frozen=True)
class DistanceMatrixElement:
    """거리 행렬 요소 하나."""

    status: str
    distance_meters: int | None = None
    duration_text: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.status == ELEMENT_OK and self.distance_meters is not None


class DistanceMatrixPort(ABC):
    """정밀 거리 포트."""

    @abstractmethod
    async def get_distance(
        self,
        origin: Location,
        destination: Location,
        travel_mode: TravelMode,
        unit_system: UnitSystem,
    ) -> DistanceMatrixElement:
        """두 지점 사이의 경로 거리를 조회합니다."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
