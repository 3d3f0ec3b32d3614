# tests/unit/domain/formatting/test_relative_time.py
import pytest
from datetime import datetime, timedelta, timezone

from domain.formatting.relative_time import relative_time, parse_timestamp, format_timestamp

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)

class TestRelativeTime:
    """Test human-relative timestamps"""

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=0), "0 minutes ago"),
        (timedelta(seconds=59), "0 minutes ago"),
        (timedelta(minutes=5), "5 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(minutes=60), "1 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(hours=24), "1 days ago"),
        (timedelta(days=45), "45 days ago"),
        (timedelta(days=400), "400 days ago"),
    ])
    def test_granularity(self, delta, expected):
        """Minutes below an hour, hours below a day, days beyond with no upper unit"""
        assert relative_time(NOW - delta, NOW) == expected

    def test_iso_string_input(self):
        assert relative_time("2026-10-19T09:00:00Z", NOW) == "3 hours ago"

    def test_offset_timestamps_are_normalised(self):
        """A +02:00 timestamp is compared in UTC"""
        assert relative_time("2026-10-19T13:30:00+02:00", NOW) == "30 minutes ago"

    def test_naive_values_are_treated_as_utc(self):
        assert relative_time("2026-10-19T11:00:00", NOW) == "1 hours ago"
        assert relative_time("2026-10-19T11:00:00Z", NOW.replace(tzinfo=None)) == "1 hours ago"

    def test_future_timestamp_is_not_special_cased(self):
        """Floor division of a negative difference gives a negative minute count"""
        future = NOW + timedelta(seconds=90)

        assert relative_time(future, NOW) == "-2 minutes ago"

    def test_unparseable_timestamp_is_rendered_verbatim(self):
        assert relative_time("yesterday-ish", NOW) == "yesterday-ish"

class TestParseTimestamp:
    """Test ISO timestamp parsing"""

    def test_parses_zulu_suffix(self):
        assert parse_timestamp("2026-10-19T12:00:00Z") == NOW

    def test_parses_fractional_seconds(self):
        parsed = parse_timestamp("2026-10-19T12:00:00.123+00:00")

        assert parsed.microsecond == 123000

    def test_returns_none_for_garbage(self):
        assert parse_timestamp("not a date") is None
        assert parse_timestamp("") is None

    def test_accepts_datetime(self):
        assert parse_timestamp(NOW) == NOW

class TestFormatTimestamp:
    """Test header timestamp rendering"""

    def test_formats_in_utc(self):
        assert format_timestamp("2026-10-19T14:05:09+02:00") == "2026-10-19 12:05:09 UTC"

    def test_unparseable_returns_input(self):
        assert format_timestamp("sometime") == "sometime"
