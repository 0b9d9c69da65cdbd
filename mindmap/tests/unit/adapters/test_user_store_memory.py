import pytest

from mindmap.adapters.session_memory import InMemorySession
from mindmap.adapters.user_store_memory import InMemoryUserStore
from mindmap.domain.entities import User, UserFactory
from mindmap.domain.ports import UserStoreError


def test_save_get_and_exists() -> None:
    store = InMemoryUserStore()
    assert store.exists_by_name("alice") is False
    assert store.get("alice") is None

    store.save(User(username="alice", password="pw1"))

    assert store.exists_by_name("alice") is True
    assert store.get("alice").password == "pw1"


def test_update_password_keeps_creation_time() -> None:
    store = InMemoryUserStore()
    user = UserFactory().create("alice", "pw1")
    store.save(user)

    store.update_password("alice", "pw2")

    updated = store.get("alice")
    assert updated.password == "pw2"
    assert updated.creation_time == user.creation_time


def test_update_password_of_unknown_user_raises() -> None:
    with pytest.raises(UserStoreError):
        InMemoryUserStore().update_password("ghost", "pw")


@pytest.mark.parametrize("username, password", [("", "pw"), ("alice", "")])
def test_user_requires_non_empty_fields(username: str, password: str) -> None:
    with pytest.raises(ValueError):
        User(username=username, password=password)


def test_session_clear_returns_previous_username() -> None:
    session = InMemorySession()
    session.set_current_username("alice")
    assert session.clear() == "alice"
    assert session.clear() is None
