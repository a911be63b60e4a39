"""마커 관련 도메인 예외."""

from store_locator.domain.exceptions.base import DomainError


class MarkerNotFoundError(DomainError):
    """해당 매장의 마커가 없음."""

    def __init__(self, store_id: int) -> None:
        self.store_id = store_id
        super().__init__(f"Marker not found for store {store_id}")
