"""Geometry.

네트워크 비용 없는 대원 거리 계산과 단위 변환.
"""

from __future__ import annotations

import math

from store_locator.domain.enums import UnitSystem
from store_locator.domain.value_objects import Location

EARTH_RADIUS_KM = 6371.0
KM_PER_MILE = 1.609


def haversine_distance(a: Location, b: Location) -> float:
    """두 좌표 사이 대원 거리 (km).

    같은 좌표면 정확히 0을 반환합니다.
    부동소수점 오차로 cos 값이 1을 넘는 경우를 막기 위해 [-1, 1]로 자릅니다.
    """
    if a == b:
        return 0.0

    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lng = math.radians(a.lng - b.lng)

    cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(lat2) * math.cos(d_lng)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return EARTH_RADIUS_KM * math.acos(cos_angle)


def convert(km: float, unit: UnitSystem) -> float:
    """km 값을 주어진 단위 체계로 변환합니다."""
    if unit is UnitSystem.IMPERIAL:
        return km / KM_PER_MILE
    return km


def to_kilometers(value: float, unit: UnitSystem) -> float:
    """convert의 역변환."""
    if unit is UnitSystem.IMPERIAL:
        return value * KM_PER_MILE
    return value
