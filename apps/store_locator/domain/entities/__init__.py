"""Domain Entities."""

from store_locator.domain.entities.marker import Marker
from store_locator.domain.entities.store import Store

__all__ = ["Store", "Marker"]
