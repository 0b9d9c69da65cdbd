from __future__ import annotations

"""Domain entities shared by use cases and store adapters."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """Registered account identified by its unique username."""

    username: str
    """Non-empty login name; uniqueness is enforced by the user store."""

    password: str
    """Non-empty secret compared verbatim on login."""

    creation_time: datetime = field(default_factory=_utc_now)
    """Timestamp assigned by :class:`UserFactory` when the account is created."""

    def __post_init__(self) -> None:
        if not isinstance(self.username, str) or not self.username.strip():
            raise ValueError("User.username must be a non-empty string.")
        if not isinstance(self.password, str) or not self.password:
            raise ValueError("User.password must be a non-empty string.")

    def with_password(self, password: str) -> "User":
        """Return a copy carrying ``password`` and the original creation time."""
        return User(username=self.username, password=password, creation_time=self.creation_time)


class UserFactory:
    """Create :class:`User` instances with a clock that tests can pin."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or _utc_now

    def create(self, username: str, password: str) -> User:
        return User(username=username, password=password, creation_time=self._clock())


__all__ = ["User", "UserFactory"]
