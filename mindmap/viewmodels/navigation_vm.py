from __future__ import annotations

import logging

from ..domain.screens import ScreenId
from .base import ViewModel


class NavigationState(ViewModel[ScreenId]):
    """Shared holder of the active screen id.

    One instance is built by ``compose_app`` and handed to every presenter;
    the view manager is its only subscriber in the running app.
    """

    def __init__(self, initial: ScreenId = ScreenId.SIGNUP) -> None:
        super().__init__("navigation", initial)
        self._log = logging.getLogger(__name__)

    @property
    def active_screen(self) -> ScreenId:
        return self.get_state()

    def navigate_to(self, screen: ScreenId) -> None:
        """Set the active screen and notify subscribers."""
        previous = self.get_state()
        self.set_state(screen)
        self._log.debug("Navigation %s -> %s", previous.value, screen.value)
        self.notify()
