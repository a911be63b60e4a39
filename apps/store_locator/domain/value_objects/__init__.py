"""Domain Value Objects."""

from store_locator.domain.value_objects.bounding_box import BoundingBox
from store_locator.domain.value_objects.location import Location

__all__ = ["Location", "BoundingBox"]
