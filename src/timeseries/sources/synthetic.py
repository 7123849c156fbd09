from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Callable, Iterator, Sequence

from timeseries.domain.record import DataPoint
from timeseries.domain.series import TimeSeries
from timeseries.utils.time import resolution_millis


class DataGenerator(ABC):
    """Source of evenly spaced points with a known length.

    Iterating restarts generation from the first tick each time.
    """

    def __init__(self, start: int, step: int | timedelta) -> None:
        self.start = int(start)
        self.step = resolution_millis(step)

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def value_at(self, position: int, timestamp: int) -> Any:
        ...

    def generate(self) -> Iterator[DataPoint]:
        for i in range(self.count()):
            ts = self.start + i * self.step
            yield DataPoint(time=ts, value=self.value_at(i, ts))

    def __iter__(self) -> Iterator[DataPoint]:
        return self.generate()

    def to_series(self) -> TimeSeries:
        # ticks are strictly increasing by construction
        return TimeSeries.strict_records(self.generate())


class RegularTicksGenerator(DataGenerator):
    """Evenly spaced points carrying the given values."""

    def __init__(self, start: int, step: int | timedelta, values: Sequence[Any]):
        super().__init__(start, step)
        self.values = list(values)

    def count(self) -> int:
        return len(self.values)

    def value_at(self, position: int, timestamp: int) -> Any:
        return self.values[position]


class FunctionTicksGenerator(DataGenerator):
    """Sample ``fn(timestamp)`` at ``count`` evenly spaced timestamps."""

    def __init__(
        self,
        start: int,
        step: int | timedelta,
        count: int,
        fn: Callable[[int], Any],
    ):
        if count < 0:
            raise ValueError("count must be non-negative")
        super().__init__(start, step)
        self._count = count
        self.fn = fn

    def count(self) -> int:
        return self._count

    def value_at(self, position: int, timestamp: int) -> Any:
        return self.fn(timestamp)
