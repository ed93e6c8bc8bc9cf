"""Email format check used by the Driver entity."""
import re

# local@domain.tld, no whitespace and a single "@"
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(email) -> bool:
    """Return True if ``email`` looks like ``local@domain.tld``. Never raises."""
    if not isinstance(email, str) or not email.strip():
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
