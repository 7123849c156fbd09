from __future__ import annotations


class TimeSeriesError(ValueError):
    """Base class for errors raised by the time-series core."""


class NonMonotonicIndexError(TimeSeriesError):
    """Raised when a timestamp does not strictly exceed its predecessor."""

    def __init__(self, position: int, previous: int, current: int) -> None:
        self.position = position
        self.previous = previous
        self.current = current
        super().__init__(
            f"timestamp at position {position} ({current}) does not exceed "
            f"the previous timestamp ({previous})"
        )


class LengthMismatchError(TimeSeriesError):
    def __init__(self, index_length: int, values_length: int) -> None:
        self.index_length = index_length
        self.values_length = values_length
        super().__init__(
            f"index has {index_length} timestamps but {values_length} values were given"
        )


class OutOfRangeError(TimeSeriesError, IndexError):
    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(f"position {position} out of range for length {length}")


class SettingsError(TimeSeriesError):
    """Raised when series settings cannot be loaded or validated."""
