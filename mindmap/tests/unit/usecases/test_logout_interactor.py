from __future__ import annotations

from mindmap.adapters.session_memory import InMemorySession
from mindmap.tests.unit.stubs import RecordingPresenter
from mindmap.usecases.logout import LogoutInputData, LogoutInteractor, LogoutOutputData


def test_logout_clears_session_and_reports_user() -> None:
    session = InMemorySession()
    session.set_current_username("alice")
    presenter = RecordingPresenter()

    LogoutInteractor(session=session, presenter=presenter).execute(LogoutInputData())

    assert session.current_username is None
    assert presenter.only_call == ("success", LogoutOutputData(username="alice"))


def test_logout_without_session_still_succeeds() -> None:
    presenter = RecordingPresenter()

    LogoutInteractor(session=InMemorySession(), presenter=presenter).execute(
        LogoutInputData(username="bob")
    )

    assert presenter.only_call == ("success", LogoutOutputData(username="bob"))


def test_logout_twice_succeeds_twice() -> None:
    session = InMemorySession()
    presenter = RecordingPresenter()
    interactor = LogoutInteractor(session=session, presenter=presenter)

    interactor.execute(LogoutInputData())
    interactor.execute(LogoutInputData())

    assert [kind for kind, _ in presenter.calls] == ["success", "success"]
