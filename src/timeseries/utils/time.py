from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_millis(value: datetime) -> int:
    """Milliseconds since the epoch; naive datetimes are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def from_millis(timestamp: int) -> datetime:
    return EPOCH + timedelta(milliseconds=timestamp)


def resolution_millis(resolution: int | timedelta) -> int:
    """Normalize a step given as milliseconds or timedelta; must be positive."""
    if isinstance(resolution, timedelta):
        millis = resolution // timedelta(milliseconds=1)
    else:
        millis = int(resolution)
    if millis <= 0:
        raise ValueError(f"resolution must be positive, got {resolution!r}")
    return millis
