"""Device Geolocation Adapters."""

from store_locator.infrastructure.geolocation.ip_geolocation_client import IpGeolocationClient

__all__ = ["IpGeolocationClient"]
