"""BoundingBox Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from store_locator.domain.value_objects.location import Location


@dataclass(frozen=True)
class BoundingBox:
    """지도 뷰포트 영역 (남서/북동 모서리)."""

    southwest: Location
    northeast: Location

    @classmethod
    def around(cls, location: Location) -> BoundingBox:
        """한 점만 포함하는 영역을 만듭니다."""
        return cls(southwest=location, northeast=location)

    def extend(self, location: Location) -> BoundingBox:
        """주어진 점을 포함하도록 확장한 새 영역을 반환합니다."""
        return BoundingBox(
            southwest=Location(
                lat=min(self.southwest.lat, location.lat),
                lng=min(self.southwest.lng, location.lng),
            ),
            northeast=Location(
                lat=max(self.northeast.lat, location.lat),
                lng=max(self.northeast.lng, location.lng),
            ),
        )

    def contains(self, location: Location) -> bool:
        return (
            self.southwest.lat <= location.lat <= self.northeast.lat
            and self.southwest.lng <= location.lng <= self.northeast.lng
        )

    @property
    def center(self) -> Location:
        return Location(
            lat=(self.southwest.lat + self.northeast.lat) / 2,
            lng=(self.southwest.lng + self.northeast.lng) / 2,
        )
