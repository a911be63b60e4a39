"""Geocoder Port.

주소 또는 좌표를 정규화된 장소 후보 목록으로 바꾸는 외부 지오코딩 서비스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from store_locator.domain.value_objects import BoundingBox, Location

STATUS_OK = "OK"


@dataclass(frozen=True)
class GeocodeRequest:
    """지오코딩 요청. address 또는 location 중 하나만 지정합니다."""

    address: str | None = None
    location: Location | None = None

    def __post_init__(self) -> None:
        if (self.address is None) == (self.location is None):
            raise ValueError("GeocodeRequest needs exactly one of address or location")


@dataclass(frozen=True)
class GeocodeResultDTO:
    """지오코딩 후보."""

    formatted_address: str
    location: Location
    place_types: tuple[str, ...] = ()
    viewport: BoundingBox | None = None


@dataclass
class GeocodeResponse:
    """지오코딩 응답."""

    status: str
    results: list[GeocodeResultDTO] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return self.status == STATUS_OK and bool(self.results)


class GeocoderPort(ABC):
    """지오코딩 포트."""

    @abstractmethod
    async def geocode(self, request: GeocodeRequest) -> GeocodeResponse:
        """주소/좌표를 지오코딩합니다."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
