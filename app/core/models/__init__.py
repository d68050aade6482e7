from .base import Base, TimestampMixin
from .exceptions import (
    UserLookupError,
    NotFoundError,
    UnauthorizedError,
    InvalidTargetError,
    EmailValidationError,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UserLookupError",
    "NotFoundError",
    "UnauthorizedError",
    "InvalidTargetError",
    "EmailValidationError",
]
