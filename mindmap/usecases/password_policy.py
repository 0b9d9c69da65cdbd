from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.errors import MismatchFailure, ValidationFailure


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a new password must satisfy when it replaces an old one."""

    min_length: int = 1
    allow_reuse: bool = False

    def check_new(self, new_password: str) -> None:
        """Raise ``ValidationFailure`` if ``new_password`` alone is unacceptable."""
        if not new_password:
            raise ValidationFailure("new password must not be empty")
        if len(new_password) < self.min_length:
            raise ValidationFailure(
                f"new password must be at least {self.min_length} characters"
            )

    def check_change(self, old_password: Optional[str], new_password: str) -> None:
        """Raise ``MismatchFailure`` if the change itself is not allowed."""
        if not self.allow_reuse and old_password == new_password:
            raise MismatchFailure("new password must differ from the old password")
