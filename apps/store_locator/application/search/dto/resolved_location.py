"""Resolved Location DTO."""

from __future__ import annotations

from dataclasses import dataclass

from store_locator.domain.value_objects import BoundingBox, Location


@dataclass(frozen=True)
class ResolvedLocation:
    """해석이 끝난 검색 기준 위치.

    is_specific이 False면 행정구역(도시, 국가 등) 결과로,
    거리 순위 없이 뷰포트만 맞춥니다.
    """

    location: Location
    formatted_address: str
    is_specific: bool
    viewport: BoundingBox | None = None
