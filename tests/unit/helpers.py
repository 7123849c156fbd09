from __future__ import annotations

from timeseries.domain.series import TimeSeries


def make_series(points: list[tuple[int, float]]) -> TimeSeries:
    return TimeSeries.from_records(points)


def merge_left() -> TimeSeries:
    return make_series([(10, 1.0), (20, 2.5), (30, 3.2), (40, 4.0), (50, 3.0)])


def merge_right() -> TimeSeries:
    return make_series([(40, 41.0), (45, 42.5), (50, 53.2), (55, 54.0), (60, 63.0)])


class ListWriter:
    """Collects written points in memory."""

    def __init__(self) -> None:
        self.rows: list[tuple[int, float]] = []
        self.closed = False

    def write(self, point) -> None:
        if self.closed:
            raise RuntimeError("writer closed")
        self.rows.append(point.as_tuple())

    def close(self) -> None:
        self.closed = True


class ListReader:
    def __init__(self, rows: list[tuple[int, float]]) -> None:
        self.rows = rows

    def read(self):
        return iter(self.rows)
