"""In-memory time series over millisecond timestamps."""

from .domain.index import DateTimeIndex
from .domain.record import DataPoint
from .domain.series import SeriesCursor, TimeSeries
from .errors import (
    LengthMismatchError,
    NonMonotonicIndexError,
    OutOfRangeError,
    SettingsError,
    TimeSeriesError,
)
from .transforms.merge import merge, merge_points

__all__ = [
    "DataPoint",
    "DateTimeIndex",
    "LengthMismatchError",
    "NonMonotonicIndexError",
    "OutOfRangeError",
    "SeriesCursor",
    "SettingsError",
    "TimeSeries",
    "TimeSeriesError",
    "merge",
    "merge_points",
]
