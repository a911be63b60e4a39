"""Location Value Object."""

from __future__ import annotations

from dataclasses import dataclass

# 좌표 동등성 비교 정밀도 (소수점 자릿수)
COORDINATE_PRECISION = 9


@dataclass(frozen=True, eq=False)
class Location:
    """위경도 좌표 Value Object.

    두 좌표는 소수점 9자리까지 일치하면 같은 위치로 취급합니다.
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not -180 <= self.lng <= 180:
            raise ValueError(f"Invalid longitude: {self.lng}")

    def _key(self) -> tuple[float, float]:
        return (round(self.lat, COORDINATE_PRECISION), round(self.lng, COORDINATE_PRECISION))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}
