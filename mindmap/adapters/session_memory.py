from __future__ import annotations
from typing import Optional
from mindmap.domain.ports import SessionPort


class InMemorySession(SessionPort):
    """Process-local holder for the logged-in username."""

    def __init__(self) -> None:
        self._username: Optional[str] = None

    @property
    def current_username(self) -> Optional[str]:
        return self._username

    def set_current_username(self, username: str) -> None:
        self._username = username

    def clear(self) -> Optional[str]:
        previous, self._username = self._username, None
        return previous
