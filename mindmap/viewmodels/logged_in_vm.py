from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.screens import ScreenId
from .base import ViewModel


@dataclass
class LoggedInState:
    """State of the logged-in screen.

    ``password`` is the new-password input of the change-password form;
    ``error`` carries the last change-password failure.
    """

    username: str = ""
    password: str = ""
    error: Optional[str] = None


class LoggedInViewModel(ViewModel[LoggedInState]):
    TITLE_LABEL = "Logged In"
    CHANGE_PASSWORD_BUTTON_LABEL = "Change password"
    LOGOUT_BUTTON_LABEL = "Log out"
    OPEN_MIND_MAP_BUTTON_LABEL = "Open mind map"

    def __init__(self) -> None:
        super().__init__(ScreenId.LOGGED_IN.value, LoggedInState())
