from __future__ import annotations

from dataclasses import replace
from typing import List

from mindmap.viewmodels.base import ViewModel
from mindmap.viewmodels.login_vm import LoginState, LoginViewModel


def test_notify_without_subscribers_is_noop() -> None:
    vm = LoginViewModel()
    vm.notify()
    assert vm.get_state() == LoginState()


def test_set_state_does_not_notify() -> None:
    vm = LoginViewModel()
    seen: List[LoginState] = []
    vm.subscribe(seen.append)

    vm.set_state(LoginState(username="bob"))

    assert seen == []
    assert vm.get_state().username == "bob"


def test_set_state_replaces_without_merge() -> None:
    vm = LoginViewModel()
    vm.set_state(LoginState(username="bob", error="boom"))
    vm.set_state(LoginState(password="x"))
    assert vm.get_state() == LoginState(password="x")


def test_notify_twice_calls_subscribers_twice_with_same_values() -> None:
    vm = LoginViewModel()
    snapshots: List[LoginState] = []
    vm.subscribe(lambda state: snapshots.append(replace(state)))
    vm.set_state(LoginState(username="bob"))

    vm.notify()
    vm.notify()

    assert snapshots == [LoginState(username="bob"), LoginState(username="bob")]


def test_subscribers_called_in_registration_order() -> None:
    vm: ViewModel[int] = ViewModel("counter", 0)
    order: List[str] = []
    vm.subscribe(lambda s: order.append("first"))
    vm.subscribe(lambda s: order.append("second"))
    vm.subscribe(lambda s: order.append("third"))

    vm.notify()

    assert order == ["first", "second", "third"]


def test_unsubscribe_stops_notifications() -> None:
    vm: ViewModel[int] = ViewModel("counter", 0)
    seen: List[int] = []
    unsubscribe = vm.subscribe(seen.append)
    vm.notify()

    unsubscribe()
    vm.set_state(1)
    vm.notify()

    assert seen == [0]
    assert vm.subscriber_count == 0


def test_view_names_match_screen_ids() -> None:
    from mindmap.viewmodels import LoggedInViewModel, MindMapViewModel, SignupViewModel

    assert SignupViewModel().view_name == "signup"
    assert LoginViewModel().view_name == "login"
    assert LoggedInViewModel().view_name == "logged_in"
    assert MindMapViewModel().view_name == "mind_map"
