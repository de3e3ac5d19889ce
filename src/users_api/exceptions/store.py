"""User store exceptions.

Each kind carries the HTTP status the transport layer answers with:

    BadRequestError          400  missing fields, duplicate email
    NotFoundError            404  unknown user id
    UnprocessableEmailError  422  email failed a validation rule
"""

from typing import Dict, Optional

from .base import UsersApiError


class UserStoreError(UsersApiError):
    """Base class for errors raised by store operations."""

    status_code: int = 500
    reason: str = "Internal Server Error"

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message, details=details)

    def to_json(self) -> Dict[str, object]:
        """Error body in the ``{statusCode, message, error}`` shape."""
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "error": self.reason,
        }


class BadRequestError(UserStoreError):
    """Raised for missing required fields or a duplicate email."""

    status_code = 400
    reason = "Bad Request"


class UnprocessableEmailError(UserStoreError):
    """Raised when an email fails one of the validation rules."""

    status_code = 422
    reason = "Unprocessable Entity"

    def __init__(self, message: str, email: str):
        super().__init__(message, details={"email": email})
        self.email = email


class NotFoundError(UserStoreError):
    """Raised when an operation targets an id no user has."""

    status_code = 404
    reason = "Not Found"

    def __init__(self, user_id: str, message: str = "User not found"):
        super().__init__(message, details={"user_id": user_id})
        self.user_id = user_id
