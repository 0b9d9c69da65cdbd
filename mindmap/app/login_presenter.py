"""Presenter for the login use case."""

from __future__ import annotations

from ..domain.screens import ScreenId
from ..usecases.login import LoginOutputData
from ..viewmodels.logged_in_vm import LoggedInState, LoggedInViewModel
from ..viewmodels.login_vm import LoginState, LoginViewModel
from ..viewmodels.navigation_vm import NavigationState
from ..viewmodels.signup_vm import SignupViewModel


class LoginPresenter:
    def __init__(
        self,
        *,
        navigation: NavigationState,
        login_vm: LoginViewModel,
        logged_in_vm: LoggedInViewModel,
        signup_vm: SignupViewModel,
    ) -> None:
        self.navigation = navigation
        self.login_vm = login_vm
        self.logged_in_vm = logged_in_vm
        self.signup_vm = signup_vm

    def prepare_success_view(self, output_data: LoginOutputData) -> None:
        self.logged_in_vm.set_state(LoggedInState(username=output_data.username))
        self.logged_in_vm.notify()

        # Drop the typed password and any earlier error.
        self.login_vm.set_state(LoginState())
        self.login_vm.notify()

        self.navigation.navigate_to(ScreenId.LOGGED_IN)

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.login_vm.get_state()
        state.error = error_message
        self.login_vm.set_state(state)
        self.login_vm.notify()

    def switch_to_signup_view(self) -> None:
        state = self.signup_vm.get_state()
        state.error = None
        self.signup_vm.set_state(state)
        self.signup_vm.notify()

        self.navigation.navigate_to(ScreenId.SIGNUP)
