from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import Optional, overload

from timeseries.errors import OutOfRangeError


class DateTimeIndex:
    """Ordered sequence of millisecond timestamps backing a series.

    The index stores timestamps exactly as given. Ordering is checked by
    the predicates below and enforced by ``TimeSeries`` construction, not
    here.
    """

    __slots__ = ("_values",)

    def __init__(self, timestamps: Iterable[int] = ()) -> None:
        self._values: tuple[int, ...] = tuple(int(ts) for ts in timestamps)

    @classmethod
    def new(cls, timestamps: Iterable[int]) -> "DateTimeIndex":
        return cls(timestamps)

    @property
    def values(self) -> tuple[int, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def length(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    @overload
    def __getitem__(self, pos: int) -> int: ...

    @overload
    def __getitem__(self, pos: slice) -> "DateTimeIndex": ...

    def __getitem__(self, pos):
        if isinstance(pos, slice):
            return DateTimeIndex(self._values[pos])
        return self._values[pos]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DateTimeIndex):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return list(self._values) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"DateTimeIndex({list(self._values)!r})"

    def index_at(self, pos: int) -> int:
        if pos < 0 or pos >= len(self._values):
            raise OutOfRangeError(pos, len(self._values))
        return self._values[pos]

    def first(self) -> Optional[int]:
        return self._values[0] if self._values else None

    def last(self) -> Optional[int]:
        return self._values[-1] if self._values else None

    def to_list(self) -> list[int]:
        return list(self._values)

    def is_monotonic(self) -> bool:
        """True when no timestamp is smaller than its predecessor.

        Equal neighbours are allowed; use ``is_unique`` to rule them out.
        """
        values = self._values
        return all(values[i] <= values[i + 1] for i in range(len(values) - 1))

    def is_unique(self) -> bool:
        return len(set(self._values)) == len(self._values)

    def is_strictly_increasing(self) -> bool:
        return self.increasing_prefix_length() == len(self._values)

    def increasing_prefix_length(self) -> int:
        """Length of the longest strictly increasing prefix."""
        values = self._values
        for i in range(1, len(values)):
            if values[i] <= values[i - 1]:
                return i
        return len(values)

    def infer_sample_rate(self) -> int:
        """Most frequent difference between neighbouring timestamps.

        Indexes with fewer than two timestamps have no interval and return 0.
        Ties go to the interval seen first when walking the index.
        """
        values = self._values
        if len(values) < 2:
            return 0
        counts = Counter(values[i + 1] - values[i] for i in range(len(values) - 1))
        # Counter keeps insertion order, so most_common breaks ties by first occurrence.
        rate, _ = counts.most_common(1)[0]
        return rate

    def position_after(self, timestamp: int) -> int:
        """First position whose timestamp is strictly greater than ``timestamp``.

        Returns ``len(self)`` when no such position exists. Assumes the index
        is sorted, which holds for every index owned by a series.
        """
        return bisect_right(self._values, timestamp)
