"""Presenter for the logout use case."""

from __future__ import annotations

import logging

from ..domain.screens import ScreenId
from ..usecases.logout import LogoutOutputData
from ..viewmodels.logged_in_vm import LoggedInState, LoggedInViewModel
from ..viewmodels.login_vm import LoginState, LoginViewModel
from ..viewmodels.navigation_vm import NavigationState


class LogoutPresenter:
    """Reset the logged-in and login screens, then return to login."""

    def __init__(
        self,
        *,
        navigation: NavigationState,
        logged_in_vm: LoggedInViewModel,
        login_vm: LoginViewModel,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.navigation = navigation
        self.logged_in_vm = logged_in_vm
        self.login_vm = login_vm

    def prepare_success_view(self, output_data: LogoutOutputData) -> None:
        self.logged_in_vm.set_state(LoggedInState())
        self.logged_in_vm.notify()

        self.login_vm.set_state(LoginState())
        self.login_vm.notify()

        self.navigation.navigate_to(ScreenId.LOGIN)

    def prepare_fail_view(self, error_message: str) -> None:
        # Logout has no failure outcome of its own.
        self._log.error("Unexpected logout failure: %s", error_message)
        state = self.logged_in_vm.get_state()
        state.error = error_message
        self.logged_in_vm.set_state(state)
        self.logged_in_vm.notify()
