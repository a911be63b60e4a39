"""Directions URL Builder."""

from __future__ import annotations

from store_locator.domain.value_objects import Location

DIRECTIONS_BASE_URL = "https://www.google.com/maps"


def build_directions_url(from_point: Location | None, to_point: Location | None) -> str:
    """길찾기 URL을 만듭니다. 출발지가 없으면 saddr을 생략합니다."""
    query: list[str] = []
    if from_point is not None:
        query.append(f"saddr=@{from_point.lat},{from_point.lng}")
    if to_point is not None:
        query.append(f"daddr=@{to_point.lat},{to_point.lng}")
    return f"{DIRECTIONS_BASE_URL}?{'&'.join(query)}"
