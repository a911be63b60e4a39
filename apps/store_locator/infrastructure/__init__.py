"""Store Locator Infrastructure Layer."""

from store_locator.infrastructure.geolocation import IpGeolocationClient
from store_locator.infrastructure.integrations.google import (
    GoogleDistanceMatrixClient,
    GoogleGeocodingClient,
)

__all__ = ["GoogleGeocodingClient", "GoogleDistanceMatrixClient", "IpGeolocationClient"]
