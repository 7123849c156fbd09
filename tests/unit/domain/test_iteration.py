from timeseries.domain.record import DataPoint
from timeseries.domain.series import SeriesCursor, TimeSeries


def test_iteration_yields_points_in_index_order():
    ts = TimeSeries([10, 20, 30], [1.0, 2.0, 3.0])
    points = list(ts)
    assert points == [(10, 1.0), (20, 2.0), (30, 3.0)]
    assert all(isinstance(p, DataPoint) for p in points)


def test_iteration_is_restartable():
    ts = TimeSeries([10, 20], [1.0, 2.0])
    assert list(ts) == list(ts)


def test_cursor_is_single_pass():
    ts = TimeSeries([10, 20], [1.0, 2.0])
    cursor = iter(ts)
    assert isinstance(cursor, SeriesCursor)
    assert next(cursor) == (10, 1.0)
    assert list(cursor) == [(20, 2.0)]
    assert list(cursor) == []


def test_collect_round_trip():
    ts = TimeSeries([1, 5, 9, 12], [0.5, 1.5, -2.0, 4.0])
    assert TimeSeries.from_records(iter(ts)) == ts
    assert TimeSeries.collect(ts) == ts


def test_map_then_collect_composition():
    ts = TimeSeries([1, 2, 3], [1.0, 2.0, 3.0])
    shifted = TimeSeries.collect((p.time + 100, p.value) for p in ts)
    assert shifted.index == [101, 102, 103]


def test_points_unpack_like_tuples():
    ts = TimeSeries([7], [3.5])
    for timestamp, value in ts:
        assert timestamp == 7
        assert value == 3.5
