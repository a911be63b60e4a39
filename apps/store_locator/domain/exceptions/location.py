"""위치 해석 관련 도메인 예외."""

from store_locator.domain.exceptions.base import DomainError


class NoGeocodingResultError(DomainError):
    """지오코딩 결과 없음 또는 실패 상태."""

    def __init__(self, status: str = "ZERO_RESULTS") -> None:
        self.status = status
        super().__init__(f"No geocoding result (status={status})")


class GeolocationUnavailableError(DomainError):
    """기기 위치 기능을 사용할 수 없음."""

    def __init__(self, reason: str = "no geolocation support") -> None:
        super().__init__(reason)


class GeolocationDeniedError(DomainError):
    """사용자 또는 환경이 위치 요청을 거부함."""

    def __init__(self, reason: str = "user denied request for position") -> None:
        super().__init__(reason)
