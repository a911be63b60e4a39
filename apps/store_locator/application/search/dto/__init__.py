"""Application DTOs."""

from store_locator.application.search.dto.filter_state import FilterDefinition, FilterState
from store_locator.application.search.dto.location_input import (
    DEVICE,
    AddressInput,
    CoordinatesInput,
    DeviceLocationInput,
    LocationInput,
    PlaceInput,
    to_location_input,
)
from store_locator.application.search.dto.published_state import MapView, PublishedState
from store_locator.application.search.dto.ranked_store import RankedStore
from store_locator.application.search.dto.resolved_location import ResolvedLocation
from store_locator.application.search.dto.search_options import DistanceLabels, SearchOptions
from store_locator.application.search.dto.search_session import SearchSession

__all__ = [
    "AddressInput",
    "CoordinatesInput",
    "DEVICE",
    "DeviceLocationInput",
    "DistanceLabels",
    "FilterDefinition",
    "FilterState",
    "LocationInput",
    "MapView",
    "PlaceInput",
    "PublishedState",
    "RankedStore",
    "ResolvedLocation",
    "SearchOptions",
    "SearchSession",
    "to_location_input",
]
