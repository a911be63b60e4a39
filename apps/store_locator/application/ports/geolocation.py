"""Device Geolocation Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from store_locator.domain.value_objects import Location


class GeolocationPort(ABC):
    """기기 위치 조회 포트.

    구현체는 기능이 없으면 GeolocationUnavailableError,
    거부되면 GeolocationDeniedError를 발생시킵니다.
    """

    @abstractmethod
    async def get_current_position(self) -> Location:
        """현재 위치를 반환합니다."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
