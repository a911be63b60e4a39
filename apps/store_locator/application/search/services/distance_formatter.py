"""Distance Formatter Service.

거리/소요 시간 표시 문자열을 만듭니다. Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from store_locator.application.search.dto import DistanceLabels
from store_locator.domain.enums import TravelMode, UnitSystem
from store_locator.domain.services import convert

DISTANCE_PLACEHOLDER = "{{distance}}"


class DistanceFormatter:
    """거리 표시 서비스."""

    def __init__(self, unit_system: UnitSystem, labels: DistanceLabels | None = None) -> None:
        self._unit = unit_system
        self._labels = labels or DistanceLabels()

    def approximate_text(self, distance: float) -> str:
        """근사 거리 (이미 현재 단위로 변환된 값) 표시."""
        return f"{distance:.2f} {self._unit.label}"

    def precise_value(self, distance_meters: int) -> float:
        """미터 값을 현재 단위의 소수 둘째 자리 값으로 변환합니다."""
        return round(convert(distance_meters / 1000, self._unit), 2)

    def precise_text(self, distance_meters: int) -> str:
        value = f"{self.precise_value(distance_meters):.2f}"
        text = self._labels.distance_text.replace(DISTANCE_PLACEHOLDER, value)
        return f"{text} {self._unit.label}"

    def duration_text(self, duration_text: str | None, travel_mode: TravelMode) -> str | None:
        if not duration_text:
            return None
        suffix = self._labels.by_car if travel_mode is TravelMode.DRIVING else self._labels.by_walk
        return f"{duration_text} {suffix}"
