"""Domain package exports for entities, ports and failure types."""

from .entities import User, UserFactory
from .errors import (
    ConflictFailure,
    MismatchFailure,
    NotFoundFailure,
    StorageFailure,
    ValidationFailure,
)
from .ports import SessionPort, UseCaseError, UserStoreError, UserStorePort
from .screens import ScreenId

__all__ = [
    "ConflictFailure",
    "MismatchFailure",
    "NotFoundFailure",
    "ScreenId",
    "SessionPort",
    "StorageFailure",
    "UseCaseError",
    "User",
    "UserFactory",
    "UserStoreError",
    "UserStorePort",
    "ValidationFailure",
]
