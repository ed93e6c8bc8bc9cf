from .email_validator import is_valid_email

__all__ = ["is_valid_email"]
