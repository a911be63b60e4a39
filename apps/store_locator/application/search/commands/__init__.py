"""Application Commands."""

from store_locator.application.search.commands.search_session_controller import (
    SearchSessionController,
    StateListener,
)

__all__ = ["SearchSessionController", "StateListener"]
