"""정밀 거리 관련 도메인 예외."""

from store_locator.domain.exceptions.base import DomainError


class PreciseDistanceUnavailableError(DomainError):
    """매장 하나에 대한 정밀 거리 계산 실패.

    DistanceEngine 내부에서만 발생하며 근사 값으로 대체됩니다.
    """

    def __init__(self, store_id: int, status: str) -> None:
        self.store_id = store_id
        self.status = status
        super().__init__(f"Precise distance unavailable for store {store_id} (status={status})")
