"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in app.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- to_iso(): Convert datetime object to ISO 8601 string
- parse_iso(): Safely parse ISO 8601 string to datetime
- parse_date(): Parse an ISO 8601 date or datetime string into a calendar date
- to_date_iso(): Convert a calendar date to an ISO 8601 string
- date_to_datetime(): Midnight datetime for a calendar date (for storage)
"""
import logging
import zoneinfo
from datetime import date, datetime, time, timezone as dt_timezone
from typing import Optional, Union

from app.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "1990-05-15", "2025-12-24T10:30:00Z")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str or not isinstance(dt_str, str):
        return None

    try:
        # Replace 'Z' with '+00:00' for parsing
        normalized = dt_str.strip().replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    # If timezone-naive, assume application timezone
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse an ISO 8601 date (or datetime) into a calendar date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_iso(value)
    return parsed.date() if parsed else None


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to a UTC ISO 8601 string ("Z" suffix).
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    # If naive, assume application timezone
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    # MongoDB hands datetimes back in UTC; render everything in UTC
    return dt.astimezone(dt_timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def to_date_iso(value: Optional[date]) -> Optional[str]:
    """Convert a calendar date to an ISO 8601 string (YYYY-MM-DD)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def date_to_datetime(value: date) -> datetime:
    """BSON has no date type; store calendar dates as UTC midnight."""
    return datetime.combine(value, time.min, tzinfo=dt_timezone.utc)
