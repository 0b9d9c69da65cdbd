from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..domain.screens import ScreenId
from .base import ViewModel


@dataclass
class SignupState:
    """Form fields of the signup screen; ``error`` is set only after a failure."""

    username: str = ""
    password: str = ""
    repeat_password: str = ""
    error: Optional[str] = None


class SignupViewModel(ViewModel[SignupState]):
    TITLE_LABEL = "Sign Up"
    SIGNUP_BUTTON_LABEL = "Sign up"
    TO_LOGIN_BUTTON_LABEL = "Go to Login"

    def __init__(self) -> None:
        super().__init__(ScreenId.SIGNUP.value, SignupState())
