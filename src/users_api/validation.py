"""Email address validation.

A shallow heuristic, not an RFC 5322 grammar. Rules run in a fixed order and
the first failure is reported:

    1. contains an ``@``
    2. contains no spaces
    3. contains exactly one ``@``
    4. the domain (after ``@``) contains a dot
    5. the domain does not end with a dot
    6. the domain does not start with a dot
"""

from __future__ import annotations

from .exceptions import UnprocessableEmailError


def validate_email(email: str) -> None:
    """Raise :class:`UnprocessableEmailError` if *email* breaks a rule."""
    if "@" not in email:
        raise UnprocessableEmailError("Email must contain @", email)

    if " " in email:
        raise UnprocessableEmailError("Email must not contain spaces", email)

    if email.index("@") != email.rindex("@"):
        raise UnprocessableEmailError("Email must contain only one @", email)

    domain = email[email.index("@") + 1 :]

    if "." not in domain:
        raise UnprocessableEmailError("Email domain must contain a dot", email)

    if domain.endswith("."):
        raise UnprocessableEmailError("Email domain cannot end with a dot", email)

    if domain.startswith("."):
        raise UnprocessableEmailError("Email domain cannot start with a dot", email)


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email)
    except UnprocessableEmailError:
        return False
    return True
