"""Use case for replacing the password of the logged-in user.

The new password is checked against the configured ``PasswordPolicy`` before
the store is consulted, so an empty password is reported even for an unknown
user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from ..domain.errors import NotFoundFailure
from ..domain.ports import UseCaseError, UserStoreError, UserStorePort
from .error_mapping import map_store_error
from .password_policy import PasswordPolicy


@dataclass(frozen=True)
class ChangePasswordInputData:
    username: str
    new_password: str


@dataclass(frozen=True)
class ChangePasswordOutputData:
    username: str


class ChangePasswordOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: ChangePasswordOutputData) -> None: ...
    def prepare_fail_view(self, error_message: str) -> None: ...


@dataclass
class ChangePasswordInteractor:
    """Use-case object for password changes.

    Attributes:
        user_store: Port used to read the current password and write the new one.
        presenter: Output boundary receiving the single outcome.
        policy: Emptiness/length/reuse rules applied to the new password.
    """

    user_store: UserStorePort
    presenter: ChangePasswordOutputBoundary
    policy: PasswordPolicy = field(default_factory=PasswordPolicy)

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def execute(self, input_data: ChangePasswordInputData) -> None:
        """Validate and store the new password.

        Raises:
            Nothing. Failures are routed to ``prepare_fail_view``.
        """
        username = input_data.username
        try:
            self.policy.check_new(input_data.new_password)
            user = self.user_store.get(username)
            if user is None:
                raise NotFoundFailure()
            self.policy.check_change(user.password, input_data.new_password)
            self.user_store.update_password(username, input_data.new_password)
        except UserStoreError as exc:
            self._log.warning("Password change storage failure for %s: %s", username, exc)
            self.presenter.prepare_fail_view(map_store_error(exc).message)
            return
        except UseCaseError as err:
            self._log.info("Password change rejected (%s) for %s", err.code, username)
            self.presenter.prepare_fail_view(err.message)
            return

        self._log.info("Password changed for %s", username)
        self.presenter.prepare_success_view(ChangePasswordOutputData(username=username))
