from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, Callable, Optional

from timeseries.domain.index import DateTimeIndex
from timeseries.domain.record import DataPoint
from timeseries.errors import LengthMismatchError, NonMonotonicIndexError
from timeseries.transforms.stream import (
    DiffTransform,
    IncreasingPrefixTransform,
    MapValuesTransform,
)
from timeseries.utils.time import resolution_millis, to_millis

if TYPE_CHECKING:
    from timeseries.config.settings import SeriesSettings

logger = logging.getLogger(__name__)


class SeriesCursor:
    """Forward cursor over a series yielding DataPoints in index order.

    Holds a position plus references to the series' backing tuples; a fresh
    cursor is created by every ``iter(series)`` call.
    """

    __slots__ = ("_index", "_values", "_pos")

    def __init__(self, index: tuple[int, ...], values: tuple[Any, ...]) -> None:
        self._index = index
        self._values = values
        self._pos = 0

    def __iter__(self) -> "SeriesCursor":
        return self

    def __next__(self) -> DataPoint:
        pos = self._pos
        if pos >= len(self._values):
            raise StopIteration
        self._pos = pos + 1
        return DataPoint(time=self._index[pos], value=self._values[pos])

    def __length_hint__(self) -> int:
        return len(self._values) - self._pos


class TimeSeries:
    """Immutable pair of a strictly increasing index and its values.

    Timestamps are integer milliseconds since the epoch. The default
    constructor is lenient: it keeps the longest strictly increasing prefix
    of ``timestamps`` and cuts both sequences to the shorter of that prefix
    and ``values``. Anything past the first out-of-order timestamp, or past
    the end of the shorter sequence, is dropped without an error. Use
    ``TimeSeries.strict`` to get ``NonMonotonicIndexError`` or
    ``LengthMismatchError`` instead.
    """

    __slots__ = ("_index", "_values")

    def __init__(
        self,
        timestamps: Iterable[int] = (),
        values: Iterable[Any] = (),
    ) -> None:
        index = DateTimeIndex(timestamps)
        data = tuple(values)
        keep = min(index.increasing_prefix_length(), len(data))
        if keep < len(index) or keep < len(data):
            logger.debug(
                "Truncated series to %d points (timestamps=%d, values=%d)",
                keep,
                len(index),
                len(data),
            )
            index = index[:keep]
            data = data[:keep]
        self._index = index
        self._values = data

    @classmethod
    def _trusted(cls, index: DateTimeIndex, values: tuple[Any, ...]) -> "TimeSeries":
        # Caller guarantees a strictly increasing index of matching length.
        series = cls.__new__(cls)
        series._index = index
        series._values = values
        return series

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def new(cls, timestamps: Iterable[int], values: Iterable[Any]) -> "TimeSeries":
        return cls(timestamps, values)

    @classmethod
    def strict(cls, timestamps: Iterable[int], values: Iterable[Any]) -> "TimeSeries":
        """Build a series, failing on bad input instead of truncating."""
        index = DateTimeIndex(timestamps)
        data = tuple(values)
        if len(index) != len(data):
            raise LengthMismatchError(len(index), len(data))
        keep = index.increasing_prefix_length()
        if keep < len(index):
            raise NonMonotonicIndexError(keep, index[keep - 1], index[keep])
        return cls._trusted(index, data)

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "TimeSeries":
        """Build from (timestamp, value) pairs, keeping the increasing prefix."""
        return cls._collect(IncreasingPrefixTransform()(records))

    @classmethod
    def strict_records(cls, records: Iterable[Any]) -> "TimeSeries":
        return cls._collect(IncreasingPrefixTransform(strict=True)(records))

    collect = from_records

    @classmethod
    def _collect(cls, points: Iterable[DataPoint]) -> "TimeSeries":
        times: list[int] = []
        values: list[Any] = []
        for point in points:
            times.append(point.time)
            values.append(point.value)
        return cls._trusted(DateTimeIndex(times), tuple(values))

    @classmethod
    def empty(cls) -> "TimeSeries":
        return cls._trusted(DateTimeIndex(), ())

    @classmethod
    def from_timestamp(
        cls,
        timestamp: int,
        resolution: int | timedelta,
        values: Sequence[Any],
    ) -> "TimeSeries":
        """Regular series starting at ``timestamp`` with a fixed step in ms."""
        step = resolution_millis(resolution)
        start = int(timestamp)
        data = tuple(values)
        index = DateTimeIndex(start + i * step for i in range(len(data)))
        return cls._trusted(index, data)

    @classmethod
    def from_datetime(
        cls,
        start_time: datetime,
        resolution: int | timedelta,
        values: Sequence[Any],
    ) -> "TimeSeries":
        """Regular series starting at ``start_time``; a naive start is taken as UTC."""
        return cls.from_timestamp(to_millis(start_time), resolution, values)

    @classmethod
    def from_settings(
        cls,
        timestamps: Iterable[int],
        values: Iterable[Any],
        settings: "SeriesSettings",
    ) -> "TimeSeries":
        if settings.construction == "strict":
            return cls.strict(timestamps, values)
        return cls(timestamps, values)

    # ------------------------------------------------------------------
    # Accessors and lookup
    # ------------------------------------------------------------------
    @property
    def index(self) -> DateTimeIndex:
        return self._index

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def timestamps(self) -> tuple[int, ...]:
        return self._index.values

    def __len__(self) -> int:
        return len(self._values)

    def length(self) -> int:
        return len(self._values)

    def nth(self, pos: int) -> Optional[DataPoint]:
        """Point at ``pos``, or None when the position is out of range."""
        if pos < 0 or pos >= len(self._values):
            return None
        return DataPoint(time=self._index[pos], value=self._values[pos])

    def at(self, timestamp: int, default: Any = 0.0) -> Any:
        """Value in effect at ``timestamp``.

        Returns the value of the latest point at or before ``timestamp``.
        Queries before the first point (or on an empty series) return
        ``default``, which stays 0.0 unless the caller passes its own.
        """
        pos = self._index.position_after(timestamp)
        if pos == 0:
            return default
        return self._values[pos - 1]

    def first(self) -> Optional[DataPoint]:
        return self.nth(0)

    def last(self) -> Optional[DataPoint]:
        return self.nth(len(self._values) - 1)

    def sample_rate(self) -> int:
        return self._index.infer_sample_rate()

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------
    def map_values(self, fn: Callable[[Any], Any]) -> "TimeSeries":
        return self._trusted(self._index, tuple(fn(v) for v in self._values))

    def map(self, fn: Callable[[int, Any], Any]) -> "TimeSeries":
        mapped = MapValuesTransform(fn, with_time=True)(iter(self))
        return self._trusted(self._index, tuple(p.value for p in mapped))

    def diff(self) -> "TimeSeries":
        if len(self._values) < 2:
            return self.empty()
        return self._collect(DiffTransform()(iter(self)))

    def merge(self, other: "TimeSeries") -> "TimeSeries":
        from timeseries.transforms.merge import merge

        return merge(self, other)

    # ------------------------------------------------------------------
    # Iteration and value semantics
    # ------------------------------------------------------------------
    def __iter__(self) -> SeriesCursor:
        return SeriesCursor(self._index.values, self._values)

    def to_records(self) -> list[tuple[int, Any]]:
        return list(zip(self._index.values, self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self._index == other._index and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._index, self._values))

    def __repr__(self) -> str:
        return f"TimeSeries(length={len(self._values)}, index={self._index.to_list()!r}, values={list(self._values)!r})"
