from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from timeseries.utils.time import from_millis


@dataclass(frozen=True)
class DataPoint:
    """A single (timestamp, value) pair projected out of a series.

    ``time`` is milliseconds since the epoch.
    """

    time: int
    value: float

    def __iter__(self) -> Iterator[Any]:
        """Retain tuple-like unpacking compatibility."""
        yield self.time
        yield self.value

    def __len__(self) -> int:
        return 2

    def __getitem__(self, idx: int) -> Any:
        if idx == 0:
            return self.time
        if idx == 1:
            return self.value
        raise IndexError(idx)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DataPoint):
            return self.time == other.time and self.value == other.value
        if isinstance(other, tuple) and len(other) == 2:
            return self.time == other[0] and self.value == other[1]
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.time, self.value))

    def as_datetime(self) -> datetime:
        return from_millis(self.time)

    def as_tuple(self) -> tuple[int, float]:
        return (self.time, self.value)


def as_point(item: Any) -> DataPoint:
    """Coerce a DataPoint, a 2-tuple or an object with time/value attributes."""
    if isinstance(item, DataPoint):
        return item
    if isinstance(item, dict):
        return DataPoint(time=int(item["time"]), value=item["value"])
    time = getattr(item, "time", None)
    if time is not None and hasattr(item, "value"):
        return DataPoint(time=int(time), value=item.value)
    timestamp, value = item
    return DataPoint(time=int(timestamp), value=value)
