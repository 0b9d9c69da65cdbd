from __future__ import annotations

import pytest

from mindmap.tests.unit.stubs import BrokenUserStore, RecordingPresenter, seeded_store
from mindmap.domain.entities import User
from mindmap.usecases.change_password import (
    ChangePasswordInputData,
    ChangePasswordInteractor,
    ChangePasswordOutputData,
)
from mindmap.usecases.password_policy import PasswordPolicy


def _make(store, policy=None):
    presenter = RecordingPresenter()
    interactor = ChangePasswordInteractor(
        user_store=store,
        presenter=presenter,
        policy=policy or PasswordPolicy(),
    )
    return interactor, presenter


def test_change_password_updates_store() -> None:
    store = seeded_store(("alice", "pw1"))
    interactor, presenter = _make(store)

    interactor.execute(ChangePasswordInputData("alice", "pw2"))

    assert presenter.only_call == ("success", ChangePasswordOutputData(username="alice"))
    assert store.get("alice").password == "pw2"
    assert store.password_updates == [("alice", "pw2")]


def test_empty_password_rejected() -> None:
    store = seeded_store(("alice", "pw1"))
    interactor, presenter = _make(store)

    interactor.execute(ChangePasswordInputData("alice", ""))

    assert presenter.only_call == ("fail", "new password must not be empty")
    assert store.password_updates == []


def test_empty_password_reported_before_user_lookup() -> None:
    interactor, presenter = _make(seeded_store())

    interactor.execute(ChangePasswordInputData("ghost", ""))

    assert presenter.only_call == ("fail", "new password must not be empty")


def test_same_password_rejected() -> None:
    store = seeded_store(("alice", "pw1"))
    interactor, presenter = _make(store)

    interactor.execute(ChangePasswordInputData("alice", "pw1"))

    assert presenter.only_call == ("fail", "new password must differ from the old password")
    assert store.password_updates == []


def test_reuse_allowed_when_policy_permits() -> None:
    store = seeded_store(("alice", "pw1"))
    interactor, presenter = _make(store, PasswordPolicy(allow_reuse=True))

    interactor.execute(ChangePasswordInputData("alice", "pw1"))

    assert presenter.only_call[0] == "success"


def test_min_length_policy() -> None:
    store = seeded_store(("alice", "pw1"))
    interactor, presenter = _make(store, PasswordPolicy(min_length=8))

    interactor.execute(ChangePasswordInputData("alice", "short"))

    assert presenter.only_call == ("fail", "new password must be at least 8 characters")


def test_unknown_user_fails() -> None:
    interactor, presenter = _make(seeded_store())

    interactor.execute(ChangePasswordInputData("ghost", "pw"))

    assert presenter.only_call == ("fail", "user does not exist")


def test_store_write_failure_routes_to_fail_view() -> None:
    store = BrokenUserStore("read-only")
    store.get = lambda username: User(username=username, password="old")
    interactor, presenter = _make(store)

    interactor.execute(ChangePasswordInputData("alice", "new"))

    assert presenter.only_call == ("fail", "User storage unavailable: read-only")


@pytest.mark.parametrize("min_length", [1, 3])
def test_policy_accepts_long_enough_password(min_length: int) -> None:
    PasswordPolicy(min_length=min_length).check_new("abc")
