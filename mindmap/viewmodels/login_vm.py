from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.screens import ScreenId
from .base import ViewModel


@dataclass
class LoginState:
    username: str = ""
    password: str = ""
    error: Optional[str] = None


class LoginViewModel(ViewModel[LoginState]):
    TITLE_LABEL = "Log In"
    LOGIN_BUTTON_LABEL = "Log in"
    TO_SIGNUP_BUTTON_LABEL = "Create account"

    def __init__(self) -> None:
        super().__init__(ScreenId.LOGIN.value, LoginState())
