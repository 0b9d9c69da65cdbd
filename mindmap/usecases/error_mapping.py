"""Translate store errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from mindmap.domain.errors import StorageFailure
from mindmap.domain.ports import UserStoreError


def map_store_error(exc: UserStoreError) -> StorageFailure:
    """Map a store adapter failure to a stable ``StorageFailure``."""
    detail = str(exc).strip()
    return StorageFailure(_compose_error_message("User storage unavailable", detail))


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_store_error"]
