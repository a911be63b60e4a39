"""Store Search Application Layer."""

from store_locator.application.search.dto import (
    PublishedState,
    RankedStore,
    ResolvedLocation,
    SearchOptions,
)
from store_locator.application.search.services import (
    DistanceEngine,
    FilterEngine,
    LocationResolver,
    MarkerSyncEngine,
)
from store_locator.application.search.commands import SearchSessionController

__all__ = [
    "PublishedState",
    "RankedStore",
    "ResolvedLocation",
    "SearchOptions",
    "DistanceEngine",
    "FilterEngine",
    "LocationResolver",
    "MarkerSyncEngine",
    "SearchSessionController",
]
