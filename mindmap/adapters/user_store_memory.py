from __future__ import annotations

import logging
from typing import Dict, Optional

from mindmap.domain.entities import User
from mindmap.domain.ports import UserStoreError, UserStorePort


class InMemoryUserStore(UserStorePort):
    """Dict-backed user store; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._users: Dict[str, User] = {}

    def exists_by_name(self, username: str) -> bool:
        return username in self._users

    def save(self, user: User) -> None:
        self._users[user.username] = user
        self._log.debug("Saved user %s", user.username)

    def get(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def update_password(self, username: str, new_password: str) -> None:
        user = self._users.get(username)
        if user is None:
            raise UserStoreError(f"Cannot update password of unknown user '{username}'.")
        self._users[username] = user.with_password(new_password)
        self._log.debug("Updated password for %s", username)

