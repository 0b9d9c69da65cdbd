from __future__ import annotations
from typing import Optional, Protocol

from .entities import User

Username = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class UserStoreError(Exception):
    """Raised by store adapters when the backing storage misbehaves."""


# ---- Ports (Hexagonal boundaries) ----
class UserStorePort(Protocol):
    """Persistence for user records, keyed by username. No business rules."""

    def exists_by_name(self, username: Username) -> bool: ...
    def save(self, user: User) -> None: ...
    def get(self, username: Username) -> Optional[User]: ...
    def update_password(self, username: Username, new_password: str) -> None: ...


class SessionPort(Protocol):
    """Holds the username of the account that is currently logged in."""

    @property
    def current_username(self) -> Optional[Username]: ...
    def set_current_username(self, username: Username) -> None: ...
    def clear(self) -> Optional[Username]: ...  # returns the username that was cleared
