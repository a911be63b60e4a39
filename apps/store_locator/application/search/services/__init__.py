"""Application Services."""

from store_locator.application.search.services.directions import build_directions_url
from store_locator.application.search.services.distance_engine import DistanceEngine
from store_locator.application.search.services.distance_formatter import DistanceFormatter
from store_locator.application.search.services.filter_engine import FilterEngine
from store_locator.application.search.services.location_resolver import LocationResolver
from store_locator.application.search.services.marker_sync import MarkerSyncEngine

__all__ = [
    "DistanceEngine",
    "DistanceFormatter",
    "FilterEngine",
    "LocationResolver",
    "MarkerSyncEngine",
    "build_directions_url",
]
