from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ..domain.entities import User
from ..domain.errors import MismatchFailure, NotFoundFailure
from ..domain.ports import SessionPort, UseCaseError, UserStoreError, UserStorePort
from .error_mapping import map_store_error


@dataclass(frozen=True)
class LoginInputData:
    username: str
    password: str


@dataclass(frozen=True)
class LoginOutputData:
    username: str


class LoginOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: LoginOutputData) -> None: ...
    def prepare_fail_view(self, error_message: str) -> None: ...
    def switch_to_signup_view(self) -> None: ...


@dataclass
class LoginInteractor:
    """Check credentials; existence is tested before the password."""

    user_store: UserStorePort
    presenter: LoginOutputBoundary
    session: Optional[SessionPort] = None

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def execute(self, input_data: LoginInputData) -> None:
        try:
            user = self._authenticate(input_data)
        except UserStoreError as exc:
            self._log.warning("Login storage failure for %s: %s", input_data.username, exc)
            self.presenter.prepare_fail_view(map_store_error(exc).message)
            return
        except UseCaseError as err:
            self._log.info("Login rejected (%s) for %s", err.code, input_data.username)
            self.presenter.prepare_fail_view(err.message)
            return

        if self.session is not None:
            self.session.set_current_username(user.username)
        self._log.info("Logged in %s", user.username)
        self.presenter.prepare_success_view(LoginOutputData(username=user.username))

    def switch_to_signup_view(self) -> None:
        self.presenter.switch_to_signup_view()

    def _authenticate(self, input_data: LoginInputData) -> User:
        if not self.user_store.exists_by_name(input_data.username):
            raise NotFoundFailure()
        user = self.user_store.get(input_data.username)
        if user is None:
            raise NotFoundFailure()
        if user.password != input_data.password:
            raise MismatchFailure("incorrect password")
        return user
