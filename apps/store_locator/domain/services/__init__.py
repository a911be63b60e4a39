"""Domain Services."""

from store_locator.domain.services.geometry import (
    EARTH_RADIUS_KM,
    KM_PER_MILE,
    convert,
    haversine_distance,
    to_kilometers,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "KM_PER_MILE",
    "convert",
    "haversine_distance",
    "to_kilometers",
]
