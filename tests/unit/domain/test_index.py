import pytest

from timeseries.domain.index import DateTimeIndex
from timeseries.errors import OutOfRangeError


def test_index_keeps_timestamps_as_given():
    index = DateTimeIndex([1, 2, 3, 4, 3])
    assert len(index) == 5
    assert index.length() == 5
    assert index.to_list() == [1, 2, 3, 4, 3]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([7], True),
        ([1, 2, 2, 3], True),
        ([1, 2, 1], False),
    ],
)
def test_is_monotonic(values, expected):
    assert DateTimeIndex(values).is_monotonic() is expected


def test_is_unique_checks_whole_sequence():
    assert DateTimeIndex([1, 2, 3]).is_unique()
    assert not DateTimeIndex([1, 2, 2]).is_unique()
    # non-adjacent repeat
    assert not DateTimeIndex([1, 5, 3, 1]).is_unique()


def test_infer_sample_rate_returns_most_common_interval():
    index = DateTimeIndex([0, 10, 15, 20, 25, 27])
    assert index.infer_sample_rate() == 5


def test_infer_sample_rate_degenerate_index_returns_zero():
    assert DateTimeIndex([]).infer_sample_rate() == 0
    assert DateTimeIndex([42]).infer_sample_rate() == 0


def test_infer_sample_rate_ties_resolve_to_first_interval():
    # intervals 20, 10, 20, 10 -> 20 seen first
    index = DateTimeIndex([0, 20, 30, 50, 60])
    assert index.infer_sample_rate() == 20


def test_index_at_is_bounds_checked():
    index = DateTimeIndex([100, 200])
    assert index.index_at(1) == 200
    with pytest.raises(OutOfRangeError) as excinfo:
        index.index_at(2)
    assert excinfo.value.position == 2
    assert excinfo.value.length == 2
    with pytest.raises(IndexError):
        index.index_at(-1)


def test_increasing_prefix_length_stops_at_first_violation():
    assert DateTimeIndex([1, 2, 3, 3, 4]).increasing_prefix_length() == 3
    assert DateTimeIndex([5, 1]).increasing_prefix_length() == 1
    assert DateTimeIndex([]).increasing_prefix_length() == 0
    assert DateTimeIndex([1, 2, 3]).is_strictly_increasing()
    assert not DateTimeIndex([1, 2, 2]).is_strictly_increasing()


def test_position_after_uses_strict_upper_bound():
    index = DateTimeIndex([100, 160, 220])
    assert index.position_after(10) == 0
    assert index.position_after(100) == 1
    assert index.position_after(165) == 2
    assert index.position_after(500) == 3


def test_index_slicing_and_equality():
    index = DateTimeIndex([1, 2, 3, 4])
    assert index[1:3] == DateTimeIndex([2, 3])
    assert index == [1, 2, 3, 4]
    assert index.first() == 1
    assert index.last() == 4
    assert DateTimeIndex().first() is None
