"""Signup use case: create an account and open the mind-map workspace.

The interactor validates the raw form fields in a fixed order, asks the user
store whether the name is taken, persists the new user and reports exactly
one outcome to its output boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

from ..domain.entities import UserFactory
from ..domain.errors import ConflictFailure, MismatchFailure, ValidationFailure
from ..domain.ports import SessionPort, UseCaseError, UserStoreError, UserStorePort
from .error_mapping import map_store_error


@dataclass(frozen=True)
class SignupInputData:
    username: str
    password: str
    repeat_password: Optional[str] = None  # None skips the confirmation check


@dataclass(frozen=True)
class SignupOutputData:
    username: str
    creation_time: datetime


class SignupOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: SignupOutputData) -> None: ...
    def prepare_fail_view(self, error_message: str) -> None: ...
    def switch_to_login_view(self) -> None: ...


@dataclass
class SignupInteractor:
    """Use-case object for account creation.

    Attributes:
        user_store: Port used for the existence check and ``save``.
        presenter: Output boundary receiving the single outcome.
        user_factory: Builds the ``User`` entity with its creation time.
        session: Optional session updated with the new username on success.
    """

    user_store: UserStorePort
    presenter: SignupOutputBoundary
    user_factory: UserFactory = field(default_factory=UserFactory)
    session: Optional[SessionPort] = None

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def execute(self, input_data: SignupInputData) -> None:
        """Run signup and report success or failure to the presenter.

        Side Effects:
            Saves a new user in the store and sets the session on success.

        Call Chain:
            Signup view -> ``SignupController.execute`` ->
            ``SignupInteractor.execute`` -> ``SignupOutputBoundary``.
        """
        try:
            self._validate(input_data)
            user = self.user_factory.create(input_data.username, input_data.password)
            self.user_store.save(user)
        except UserStoreError as exc:
            self._log.warning("Signup storage failure for %s: %s", input_data.username, exc)
            self.presenter.prepare_fail_view(map_store_error(exc).message)
            return
        except UseCaseError as err:
            self._log.info("Signup rejected (%s): %s", err.code, err.message)
            self.presenter.prepare_fail_view(err.message)
            return

        if self.session is not None:
            self.session.set_current_username(user.username)
        self._log.info("Signed up %s", user.username)
        self.presenter.prepare_success_view(
            SignupOutputData(username=user.username, creation_time=user.creation_time)
        )

    def switch_to_login_view(self) -> None:
        self.presenter.switch_to_login_view()

    def _validate(self, input_data: SignupInputData) -> None:
        if not input_data.username or not input_data.username.strip():
            raise ValidationFailure("username must not be empty")
        if self.user_store.exists_by_name(input_data.username):
            raise ConflictFailure()
        if not input_data.password:
            raise ValidationFailure("password must not be empty")
        if (
            input_data.repeat_password is not None
            and input_data.password != input_data.repeat_password
        ):
            raise MismatchFailure("passwords don't match")
