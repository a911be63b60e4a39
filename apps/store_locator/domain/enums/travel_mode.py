"""Travel Mode Enum."""

from __future__ import annotations

from enum import Enum


class TravelMode(str, Enum):
    """정밀 거리 계산 이동 수단."""

    DRIVING = "DRIVING"
    WALKING = "WALKING"
    BICYCLING = "BICYCLING"
    TRANSIT = "TRANSIT"

    @classmethod
    def parse(cls, value: str | TravelMode) -> TravelMode:
        if isinstance(value, TravelMode):
            return value
        return cls(str(value).strip().upper())
