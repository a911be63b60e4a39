"""Store Locator Domain Layer."""

from store_locator.domain.entities import Marker, Store
from store_locator.domain.enums import SessionState, TravelMode, UnitSystem
from store_locator.domain.value_objects import BoundingBox, Location

__all__ = [
    "Store",
    "Marker",
    "Location",
    "BoundingBox",
    "UnitSystem",
    "TravelMode",
    "SessionState",
]
