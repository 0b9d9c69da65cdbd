"""Presenter for the signup use case."""

from __future__ import annotations

from ..domain.screens import ScreenId
from ..usecases.signup import SignupOutputData
from ..viewmodels.logged_in_vm import LoggedInState, LoggedInViewModel
from ..viewmodels.login_vm import LoginViewModel
from ..viewmodels.navigation_vm import NavigationState
from ..viewmodels.signup_vm import SignupState, SignupViewModel


class SignupPresenter:
    """Success opens the logged-in screen; failure stays on signup."""

    def __init__(
        self,
        *,
        navigation: NavigationState,
        signup_vm: SignupViewModel,
        logged_in_vm: LoggedInViewModel,
        login_vm: LoginViewModel,
    ) -> None:
        self.navigation = navigation
        self.signup_vm = signup_vm
        self.logged_in_vm = logged_in_vm
        self.login_vm = login_vm

    def prepare_success_view(self, output_data: SignupOutputData) -> None:
        self.logged_in_vm.set_state(LoggedInState(username=output_data.username))
        self.logged_in_vm.notify()

        self.signup_vm.set_state(SignupState())
        self.signup_vm.notify()

        self.navigation.navigate_to(ScreenId.LOGGED_IN)

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.signup_vm.get_state()
        state.error = error_message
        self.signup_vm.set_state(state)
        self.signup_vm.notify()

    def switch_to_login_view(self) -> None:
        # Login errors are cleared on entry.
        state = self.login_vm.get_state()
        state.error = None
        self.login_vm.set_state(state)
        self.login_vm.notify()

        self.navigation.navigate_to(ScreenId.LOGIN)
