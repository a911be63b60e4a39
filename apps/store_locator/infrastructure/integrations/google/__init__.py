"""Google Maps Platform Integrations."""

from store_locator.infrastructure.integrations.google.distance_matrix_client import (
    GoogleDistanceMatrixClient,
)
from store_locator.infrastructure.integrations.google.geocoding_client import (
    GoogleGeocodingClient,
)

__all__ = ["GoogleGeocodingClient", "GoogleDistanceMatrixClient"]
