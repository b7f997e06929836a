"""
Datetime helpers.

Timestamps are stored in naive `DateTime` columns as UTC wall-clock time.
Inbound values carrying an offset are converted before they reach a model.
"""
from datetime import datetime, timezone


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through unchanged."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
