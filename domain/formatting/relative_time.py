# domain/formatting/relative_time.py
from datetime import datetime, timezone
from typing import Optional, Union

Timestamp = Union[str, datetime]

def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def parse_timestamp(value: Timestamp) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp into an aware UTC datetime, or None"""
    if isinstance(value, datetime):
        return _as_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _as_utc(datetime.fromisoformat(text))
    except ValueError:
        return None

def format_timestamp(value: Timestamp) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return parsed.strftime("%Y-%m-%d %H:%M:%S UTC")

def relative_time(timestamp: Timestamp, now: datetime) -> str:
    """Describe how long before `now` the timestamp lies.

    Granularity stops at days. Future timestamps are not special-cased and
    yield negative minute counts.
    """
    then = parse_timestamp(timestamp)
    if then is None:
        return str(timestamp)

    diff_seconds = (_as_utc(now) - then).total_seconds()
    diff_minutes = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_minutes < 60:
        return f"{diff_minutes} minutes ago"
    if diff_hours < 24:
        return f"{diff_hours} hours ago"
    return f"{diff_days} days ago"
