"""Per-buyer screen registry for the Offers API.

The HTTP surface is a headless stand-in for the buyer's app, so each user
id gets one long-lived OffersScreen until it is dismissed.
"""

from offers.screen import OffersScreen
from offers.service import get_service

_screens: dict[str, OffersScreen] = {}


def get_screen(user_id: str) -> OffersScreen:
    """Return the buyer's screen, opening one against the current service if needed."""
    screen = _screens.get(user_id)
    if screen is None:
        screen = OffersScreen(user_id=user_id, service=get_service())
        _screens[user_id] = screen
    return screen


def close_screen(user_id: str) -> bool:
    screen = _screens.pop(user_id, None)
    if screen is None:
        return False
    screen.dismiss()
    return True


def reset_screens() -> None:
    """Dismiss and forget every screen (useful for tests)."""
    for screen in _screens.values():
        screen.dismiss()
    _screens.clear()
