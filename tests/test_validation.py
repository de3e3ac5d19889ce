"""Tests for the email validation rules."""

import pytest

from users_api.exceptions import UnprocessableEmailError
from users_api.validation import is_valid_email, validate_email


class TestValidateEmail:
    """Each rule, in order, with the first failure reported."""

    @pytest.mark.parametrize(
        "email,message",
        [
            ("no-at-sign.com", "Email must contain @"),
            ("has space@example.com", "Email must not contain spaces"),
            ("a@b@example.com", "Email must contain only one @"),
            ("user@nodot", "Email domain must contain a dot"),
            ("user@example.", "Email domain cannot end with a dot"),
            ("user@.example.com", "Email domain cannot start with a dot"),
        ],
    )
    def test_rejections(self, email, message):
        with pytest.raises(UnprocessableEmailError) as exc_info:
            validate_email(email)
        assert exc_info.value.message == message
        assert exc_info.value.email == email

    def test_accepts_plain_address(self):
        validate_email("user@example.com")

    def test_missing_at_wins_over_space(self):
        with pytest.raises(UnprocessableEmailError, match="must contain @"):
            validate_email("no at sign")

    def test_space_wins_over_double_at(self):
        with pytest.raises(UnprocessableEmailError, match="must not contain spaces"):
            validate_email("a @b@example.com")

    def test_double_at_checked_before_domain(self):
        # Domain after the first @ would be "b@nodot", which has no dot
        with pytest.raises(UnprocessableEmailError, match="only one @"):
            validate_email("a@b@nodot")

    def test_lone_dot_domain_ends_with_dot(self):
        with pytest.raises(UnprocessableEmailError, match="cannot end with a dot"):
            validate_email("user@.")

    def test_empty_local_part_accepted(self):
        validate_email("@example.com")

    def test_consecutive_dots_accepted(self):
        validate_email("user@example..com")

    def test_tab_is_not_a_space(self):
        validate_email("us\ter@example.com")


class TestIsValidEmail:
    def test_valid(self):
        assert is_valid_email("jane.doe@example.com") is True

    def test_invalid(self):
        assert is_valid_email("jane.doe@example") is False
