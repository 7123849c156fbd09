from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

from timeseries.domain.record import DataPoint

if TYPE_CHECKING:
    from timeseries.domain.series import TimeSeries


@runtime_checkable
class RecordReader(Protocol):
    """Produces (timestamp_ms, value) pairs in source order."""

    def read(self) -> Iterator[tuple[int, float]]:
        ...


@runtime_checkable
class RecordWriter(Protocol):
    def write(self, point: DataPoint) -> None:
        ...

    def close(self) -> None:
        ...


def read_series(reader: RecordReader) -> "TimeSeries":
    from timeseries.domain.series import TimeSeries

    return TimeSeries.from_records(reader.read())


def write_series(series: "TimeSeries", writer: RecordWriter) -> int:
    """Feed every point to ``writer`` and close it; returns the point count."""
    written = 0
    try:
        for point in series:
            writer.write(point)
            written += 1
    finally:
        writer.close()
    return written
