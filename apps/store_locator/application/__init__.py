"""Store Locator Application Layer."""

from store_locator.application.search import (
    DistanceEngine,
    FilterEngine,
    LocationResolver,
    MarkerSyncEngine,
    PublishedState,
    RankedStore,
    ResolvedLocation,
    SearchOptions,
    SearchSessionController,
)

__all__ = [
    "LocationResolver",
    "FilterEngine",
    "DistanceEngine",
    "MarkerSyncEngine",
    "SearchSessionController",
    "SearchOptions",
    "PublishedState",
    "RankedStore",
    "ResolvedLocation",
]
