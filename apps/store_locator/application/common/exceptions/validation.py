"""검증 관련 예외."""

from store_locator.application.common.exceptions.base import ApplicationError


class GoogleApiUnavailableError(ApplicationError):
    """Google Maps API 키가 설정되지 않음."""

    def __init__(self) -> None:
        super().__init__("Google Maps API key not configured")


class InvalidFilterTagError(ApplicationError):
    """설정되지 않은 필터 태그."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid filter tag '{value}'. Allowed values: {allowed}.")
