"""Observable state container shared by every screen view model.

Call context:
    Presenters mutate state through ``set_state``/``get_state`` and then call
    ``notify`` once; Tk views register a callback through ``subscribe``.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

S = TypeVar("S")
Subscriber = Callable[[S], None]


class ViewModel(Generic[S]):
    """Holds the current state of one screen plus an ordered subscriber registry.

    ``set_state`` replaces the state without notifying so a presenter can batch
    several field changes before a single ``notify``.
    """

    def __init__(self, view_name: str, state: S) -> None:
        self.view_name = view_name
        self._state = state
        self._subscribers: List[Subscriber] = []
        self._log = logging.getLogger(__name__)

    def get_state(self) -> S:
        return self._state

    def set_state(self, state: S) -> None:
        self._state = state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; returns a function that unregisters it."""
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def notify(self) -> None:
        """Call every subscriber with the current state, in registration order."""
        state = self._state
        self._log.debug("%s: notifying %d subscriber(s)", self.view_name, len(self._subscribers))
        for callback in list(self._subscribers):
            callback(state)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
