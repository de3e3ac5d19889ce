"""Thread-safe in-memory user store."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from .exceptions import BadRequestError, NotFoundError
from .models import User
from .validation import validate_email

logger = logging.getLogger(__name__)

# Leading integer of an id, the way "12", " 7" or "3abc" read as numbers.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _id_value(user_id: str) -> int:
    """Numeric value of *user_id* for id assignment; 0 if it has none."""
    match = _LEADING_INT.match(user_id)
    if match is None:
        return 0
    return int(match.group(1))


class UserStore:
    """Owns the user records and mediates every read and write.

    Records keep insertion order. Ids and emails are unique across the
    collection. All operations run under one re-entrant lock, so checks and
    the mutation that follows them are atomic even when handlers are
    dispatched from several threads.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.RLock()
        self._users: list[User] = []
        for user in users:
            if self._find_index(user.id) is not None:
                raise ValueError(f"Duplicate user id: {user.id}")
            if self._email_taken(user.email):
                raise ValueError(f"Duplicate user email: {user.email}")
            self._users.append(user)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return isinstance(user_id, str) and self._find_index(user_id) is not None

    # ── Lookups (caller holds the lock) ─────────────────────────────────

    def _find_index(self, user_id: str) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def _email_taken(self, email: str, exclude_index: int | None = None) -> bool:
        return any(
            user.email == email
            for index, user in enumerate(self._users)
            if index != exclude_index
        )

    def _next_id(self) -> str:
        max_id = 0
        for user in self._users:
            max_id = max(max_id, _id_value(user.id))
        return str(max_id + 1)

    # ── Operations ──────────────────────────────────────────────────────

    def list(self) -> list[User]:
        """Return all users in insertion order."""
        with self._lock:
            return list(self._users)

    def get(self, user_id: str) -> User:
        """Return the user with *user_id*.

        Raises:
            NotFoundError: If no user has that id.
        """
        with self._lock:
            index = self._find_index(user_id)
            if index is None:
                raise NotFoundError(user_id)
            return self._users[index]

    def create(self, name: Any, email: Any) -> User:
        """Validate and append a new user, assigning the next id.

        The new id is one more than the largest numeric id in the store.
        Ids without a leading integer count as 0.

        Raises:
            BadRequestError: Missing name/email, or the email is taken.
            UnprocessableEmailError: The email breaks a validation rule.
        """
        if not name or not email:
            raise BadRequestError("Name and email are required")
        if not isinstance(name, str) or not isinstance(email, str):
            raise BadRequestError("Name and email must be strings")

        validate_email(email)

        with self._lock:
            if self._email_taken(email):
                logger.debug("Rejected create: email %s already exists", email)
                raise BadRequestError("Email already exists", details={"email": email})

            user = User(id=self._next_id(), name=name, email=email)
            self._users.append(user)

        logger.info("Created user %s", user.id)
        return user

    def update(self, user_id: str, patch: Mapping[str, Any]) -> User:
        """Merge *patch* onto the user with *user_id* and return the result.

        Only ``name`` and ``email`` are applied; ``id`` and unknown keys are
        ignored. Empty or null values leave the stored field unchanged. A
        user may resubmit its own current email. Everything is validated
        before the record is replaced.

        Raises:
            NotFoundError: If no user has that id.
            BadRequestError: A field has the wrong type, or the email
                belongs to another user.
            UnprocessableEmailError: The email breaks a validation rule.
        """
        name = patch.get("name")
        email = patch.get("email")

        with self._lock:
            index = self._find_index(user_id)
            if index is None:
                raise NotFoundError(user_id)

            changes: dict[str, str] = {}
            if email:
                if not isinstance(email, str):
                    raise BadRequestError("Email must be a string")
                validate_email(email)
                if self._email_taken(email, exclude_index=index):
                    logger.debug("Rejected update of %s: email %s already exists", user_id, email)
                    raise BadRequestError("Email already exists", details={"email": email})
                changes["email"] = email
            if name:
                if not isinstance(name, str):
                    raise BadRequestError("Name must be a string")
                changes["name"] = name

            user = replace(self._users[index], **changes)
            self._users[index] = user

        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(changes)) or "no changes")
        return user

    def delete(self, user_id: str) -> User:
        """Remove the user with *user_id* and return it.

        Raises:
            NotFoundError: If no user has that id.
        """
        with self._lock:
            index = self._find_index(user_id)
            if index is None:
                raise NotFoundError(user_id)
            user = self._users.pop(index)

        logger.info("Deleted user %s", user_id)
        return user
