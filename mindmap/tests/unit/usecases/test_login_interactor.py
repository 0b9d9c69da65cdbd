from __future__ import annotations

from mindmap.adapters.session_memory import InMemorySession
from mindmap.domain.entities import User
from mindmap.tests.unit.stubs import RecordingPresenter, UnreadableUserStore, seeded_store
from mindmap.usecases.login import LoginInputData, LoginInteractor, LoginOutputData


def _make(store, session=None):
    presenter = RecordingPresenter()
    return LoginInteractor(user_store=store, presenter=presenter, session=session), presenter


def test_login_with_correct_password_succeeds() -> None:
    session = InMemorySession()
    interactor, presenter = _make(seeded_store(("bob", "right")), session)

    interactor.execute(LoginInputData("bob", "right"))

    assert presenter.only_call == ("success", LoginOutputData(username="bob"))
    assert session.current_username == "bob"


def test_login_with_wrong_password_fails() -> None:
    session = InMemorySession()
    interactor, presenter = _make(seeded_store(("bob", "right")), session)

    interactor.execute(LoginInputData("bob", "wrong"))

    assert presenter.only_call == ("fail", "incorrect password")
    assert session.current_username is None


def test_unknown_user_is_reported_before_password() -> None:
    interactor, presenter = _make(seeded_store(("bob", "right")))

    interactor.execute(LoginInputData("mallory", "right"))

    assert presenter.only_call == ("fail", "user does not exist")


def test_login_does_not_modify_store() -> None:
    store = seeded_store(("bob", "right"))
    interactor, _ = _make(store)

    interactor.execute(LoginInputData("bob", "right"))

    assert store.saved == []
    assert store.password_updates == []


def test_unreadable_store_routes_to_fail_view() -> None:
    store = UnreadableUserStore()
    store.save(User(username="bob", password="right"))
    interactor, presenter = _make(store)

    interactor.execute(LoginInputData("bob", "right"))

    assert presenter.only_call == ("fail", "User storage unavailable: index corrupted")


def test_switch_to_signup_is_forwarded() -> None:
    interactor, presenter = _make(seeded_store())
    interactor.switch_to_signup_view()
    assert presenter.calls == [("switch", "signup")]
