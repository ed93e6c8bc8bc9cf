"""
Tests for the email format check.
"""
import pytest

from app.domain.validators import is_valid_email


class TestEmailValidator:
    """Test is_valid_email."""

    @pytest.mark.parametrize(
        "email",
        ["juan@example.com", "a.b+c@mail.example.co", "x@y.z"],
    )
    def test_valid_emails(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "   ",
            "juan.example.com",
            "juan@example",
            "juan@@example.com",
            "ju an@example.com",
            "juan@example.com\n",
            "@example.com",
        ],
    )
    def test_invalid_emails(self, email):
        assert is_valid_email(email) is False

    def test_non_string_is_invalid(self):
        """Never raises on unexpected input."""
        assert is_valid_email(None) is False
        assert is_valid_email(123) is False
