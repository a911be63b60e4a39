"""Setup Module."""

from store_locator.setup.config import Settings, get_settings
from store_locator.setup.dependencies import (
    build_controller,
    close_clients,
    get_distance_matrix_client,
    get_geocoder,
    get_geolocation,
)
from store_locator.setup.logging import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "build_controller",
    "close_clients",
    "get_distance_matrix_client",
    "get_geocoder",
    "get_geolocation",
]
