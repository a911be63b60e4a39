"""Domain Enums."""

from store_locator.domain.enums.session_state import SessionState
from store_locator.domain.enums.travel_mode import TravelMode
from store_locator.domain.enums.unit_system import UnitSystem

__all__ = ["UnitSystem", "TravelMode", "SessionState"]
