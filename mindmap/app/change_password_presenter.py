"""Presenter for the change-password use case (never navigates)."""

from __future__ import annotations

from ..usecases.change_password import ChangePasswordOutputData
from ..viewmodels.logged_in_vm import LoggedInViewModel


class ChangePasswordPresenter:
    def __init__(self, *, logged_in_vm: LoggedInViewModel) -> None:
        self.logged_in_vm = logged_in_vm

    def prepare_success_view(self, output_data: ChangePasswordOutputData) -> None:
        state = self.logged_in_vm.get_state()
        state.username = output_data.username
        state.password = ""
        state.error = None
        self.logged_in_vm.set_state(state)
        self.logged_in_vm.notify()

    def prepare_fail_view(self, error_message: str) -> None:
        state = self.logged_in_vm.get_state()
        state.error = error_message
        self.logged_in_vm.set_state(state)
        self.logged_in_vm.notify()
