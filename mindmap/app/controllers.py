"""Thin controllers translating view actions into interactor calls.

Call chain:
    Tk view button -> controller method -> ``Interactor.execute``. Outcomes
    flow back through presenters only; controllers return nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..usecases.change_password import ChangePasswordInputData, ChangePasswordInteractor
from ..usecases.login import LoginInputData, LoginInteractor
from ..usecases.logout import LogoutInputData, LogoutInteractor
from ..usecases.signup import SignupInputData, SignupInteractor


@dataclass(frozen=True)
class SignupController:
    interactor: SignupInteractor

    def execute(self, username: str, password: str, repeat_password: Optional[str] = None) -> None:
        self.interactor.execute(SignupInputData(username, password, repeat_password))

    def switch_to_login_view(self) -> None:
        self.interactor.switch_to_login_view()


@dataclass(frozen=True)
class LoginController:
    interactor: LoginInteractor

    def execute(self, username: str, password: str) -> None:
        self.interactor.execute(LoginInputData(username, password))

    def switch_to_signup_view(self) -> None:
        self.interactor.switch_to_signup_view()


@dataclass(frozen=True)
class ChangePasswordController:
    interactor: ChangePasswordInteractor

    def execute(self, username: str, new_password: str) -> None:
        self.interactor.execute(ChangePasswordInputData(username, new_password))


@dataclass(frozen=True)
class LogoutController:
    interactor: LogoutInteractor

    def execute(self, username: Optional[str] = None) -> None:
        self.interactor.execute(LogoutInputData(username))
