"""Application Ports."""

from store_locator.application.ports.distance_matrix import (
    DistanceMatrixElement,
    DistanceMatrixPort,
)
from store_locator.application.ports.geocoder import (
    GeocodeRequest,
    GeocodeResponse,
    GeocodeResultDTO,
    GeocoderPort,
)
from store_locator.application.ports.geolocation import GeolocationPort

__all__ = [
    "GeocoderPort",
    "GeocodeRequest",
    "GeocodeResponse",
    "GeocodeResultDTO",
    "GeolocationPort",
    "DistanceMatrixPort",
    "DistanceMatrixElement",
]
