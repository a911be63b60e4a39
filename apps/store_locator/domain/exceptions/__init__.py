"""도메인 예외."""

from store_locator.domain.exceptions.base import DomainError
from store_locator.domain.exceptions.distance import PreciseDistanceUnavailableError
from store_locator.domain.exceptions.location import (
    GeolocationDeniedError,
    GeolocationUnavailableError,
    NoGeocodingResultError,
)
from store_locator.domain.exceptions.marker import MarkerNotFoundError

__all__ = [
    "DomainError",
    "NoGeocodingResultError",
    "GeolocationUnavailableError",
    "GeolocationDeniedError",
    "PreciseDistanceUnavailableError",
    "MarkerNotFoundError",
]
