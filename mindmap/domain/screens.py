from __future__ import annotations

from enum import Enum


class ScreenId(str, Enum):
    """Identifiers of the screens the navigation state can activate."""

    SIGNUP = "signup"
    LOGIN = "login"
    LOGGED_IN = "logged_in"
    MIND_MAP = "mind_map"

    @classmethod
    def parse(cls, value: object) -> "ScreenId":
        """Coerce a settings value (enum or name/value string) into a ScreenId."""
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown screen id '{value}'.")


__all__ = ["ScreenId"]
