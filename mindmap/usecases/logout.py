from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ..domain.ports import SessionPort


@dataclass(frozen=True)
class LogoutInputData:
    username: Optional[str] = None


@dataclass(frozen=True)
class LogoutOutputData:
    username: Optional[str]


class LogoutOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: LogoutOutputData) -> None: ...
    def prepare_fail_view(self, error_message: str) -> None: ...


@dataclass
class LogoutInteractor:
    """Clear the session. Logout has no failure path."""

    session: SessionPort
    presenter: LogoutOutputBoundary

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def execute(self, input_data: LogoutInputData) -> None:
        cleared = self.session.clear()
        username = cleared or input_data.username
        self._log.info("Logged out %s", username or "<no session>")
        self.presenter.prepare_success_view(LogoutOutputData(username=username))
