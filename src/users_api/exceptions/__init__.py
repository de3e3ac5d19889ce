"""Exception hierarchy for users-api."""

from .base import UsersApiError
from .config import ConfigurationError, InvalidConfigError
from .store import (
    BadRequestError,
    NotFoundError,
    UnprocessableEmailError,
    UserStoreError,
)

__all__ = [
    "UsersApiError",
    "ConfigurationError",
    "InvalidConfigError",
    "UserStoreError",
    "BadRequestError",
    "UnprocessableEmailError",
    "NotFoundError",
]
