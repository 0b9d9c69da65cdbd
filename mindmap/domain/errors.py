"""User-facing failure types raised inside interactors.

Every failure maps to exactly one message that ends up in the error field of
the originating screen. None of them escape an interactor's ``execute``.
"""

from __future__ import annotations

from .ports import UseCaseError


class ValidationFailure(UseCaseError):
    """An input field is empty or rejected by policy."""

    def __init__(self, message: str):
        super().__init__("VALIDATION_FAILED", message)


class ConflictFailure(UseCaseError):
    """The username is already taken."""

    def __init__(self, message: str = "username already exists"):
        super().__init__("USERNAME_EXISTS", message)


class NotFoundFailure(UseCaseError):
    """The username is unknown to the store."""

    def __init__(self, message: str = "user does not exist"):
        super().__init__("USER_NOT_FOUND", message)


class MismatchFailure(UseCaseError):
    """Password comparison failed (wrong login, repeated or reused password)."""

    def __init__(self, message: str):
        super().__init__("PASSWORD_MISMATCH", message)


class StorageFailure(UseCaseError):
    """The user store could not complete the request."""

    def __init__(self, message: str):
        super().__init__("STORAGE_FAILED", message)


__all__ = [
    "ConflictFailure",
    "MismatchFailure",
    "NotFoundFailure",
    "StorageFailure",
    "ValidationFailure",
]
