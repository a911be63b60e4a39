"""Presentation Schemas."""

from store_locator.presentation.schemas.config import (
    FilterConfig,
    LabelsConfig,
    LocationConfig,
    LocatorConfig,
    StoreConfig,
)
from store_locator.presentation.schemas.published_state import (
    MapViewSchema,
    PublishedStateSchema,
    RankedStoreSchema,
    ResolvedLocationSchema,
)

__all__ = [
    "FilterConfig",
    "LabelsConfig",
    "LocationConfig",
    "LocatorConfig",
    "StoreConfig",
    "MapViewSchema",
    "PublishedStateSchema",
    "RankedStoreSchema",
    "ResolvedLocationSchema",
]
