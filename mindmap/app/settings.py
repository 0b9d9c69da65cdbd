"""Typed runtime settings for the desktop app.

``SettingsLocal`` reads the flat dict produced by :meth:`AppSettings.to_dict`;
``apply_dict`` validates and coerces that shape.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from ..domain.screens import ScreenId
from ..usecases.password_policy import PasswordPolicy
from ..utils.logging import env_forces_debug


@dataclass(frozen=True)
class AppSettings:
    """Settings consumed by ``compose_app`` and the Tk shell."""

    initial_screen: ScreenId = ScreenId.SIGNUP
    password_min_length: int = 1
    allow_password_reuse: bool = False
    window_title: str = "MindMap"
    debug_logging: bool = False

    @classmethod
    def defaults(cls) -> "AppSettings":
        return cls(debug_logging=env_forces_debug())

    def password_policy(self) -> PasswordPolicy:
        return PasswordPolicy(
            min_length=self.password_min_length,
            allow_reuse=self.allow_password_reuse,
        )

    def apply_dict(self, payload: Mapping[str, Any]) -> "AppSettings":
        """Return a copy updated from persisted flat keys."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {f.name for f in fields(self)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: _coerce_value(key, payload[key]) for key in payload}
        return replace(self, **updates) if updates else self

    def to_dict(self) -> dict:
        snapshot = asdict(self)
        snapshot["initial_screen"] = self.initial_screen.value
        return snapshot


def _coerce_value(key: str, raw: Any) -> Any:
    if key == "initial_screen":
        return ScreenId.parse(raw)
    if key == "password_min_length":
        value = _coerce_int(key, raw)
        if value < 1:
            raise ValueError("password_min_length must be at least 1.")
        return value
    if key in {"allow_password_reuse", "debug_logging"}:
        return _coerce_bool(raw)
    if key == "window_title":
        text = "" if raw is None else str(raw).strip()
        return text or AppSettings.window_title
    raise ValueError(f"Unhandled settings field: {key}")


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{name} must be an integer.")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    raise ValueError(f"{name} must be an integer.")


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return AppSettings.defaults().to_dict()
