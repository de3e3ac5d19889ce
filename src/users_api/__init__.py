"""
users-api - in-memory CRUD service for user records

Lists, fetches, creates, updates and deletes users held in process memory,
validating emails with a small set of heuristic rules.
"""

__version__ = "0.1.0"

from .exceptions import (
    BadRequestError,
    NotFoundError,
    UnprocessableEmailError,
    UsersApiError,
    UserStoreError,
)
from .models import User
from .seed import DEFAULT_USERS
from .store import UserStore
from .validation import is_valid_email, validate_email

__all__ = [
    "User",
    "UserStore",
    "DEFAULT_USERS",
    "validate_email",
    "is_valid_email",
    "UsersApiError",
    "UserStoreError",
    "BadRequestError",
    "NotFoundError",
    "UnprocessableEmailError",
]
