"""
Tests for datetime helpers.
"""
from datetime import date, datetime, timedelta, timezone

from app.utils.datetime_utils import date_to_datetime, parse_date, to_iso


class TestToIso:
    """Test to_iso rendering."""

    def test_utc_uses_z_suffix(self):
        dt = datetime(2025, 1, 10, 12, 0, 30, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-01-10T12:00:30Z"

    def test_offset_datetime_rendered_in_utc(self):
        bogota = timezone(timedelta(hours=-5))
        local = datetime(2025, 1, 10, 7, 0, tzinfo=bogota)
        stored = local.astimezone(timezone.utc)

        assert to_iso(local) == "2025-01-10T12:00:00Z"
        assert to_iso(local) == to_iso(stored)

    def test_none(self):
        assert to_iso(None) is None


class TestDates:
    """Test calendar date helpers."""

    def test_parse_date_accepts_date_and_datetime_strings(self):
        assert parse_date("1990-05-15") == date(1990, 5, 15)
        assert parse_date("1990-05-15T10:00:00Z") == date(1990, 5, 15)

    def test_parse_date_invalid(self):
        assert parse_date("15/05/1990") is None

    def test_date_to_datetime_is_utc_midnight(self):
        assert date_to_datetime(date(1990, 5, 15)) == datetime(1990, 5, 15, tzinfo=timezone.utc)
