from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from timeseries.domain.record import DataPoint, as_point
from timeseries.transforms.interfaces import StreamTransformBase

if TYPE_CHECKING:
    from timeseries.domain.series import TimeSeries

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def merge_points(left: Iterable, right: Iterable) -> Iterator[DataPoint]:
    """Merge two timestamp-ordered point streams into one.

    Points are emitted in timestamp order. When both streams carry the same
    timestamp the left point is emitted and the right one is dropped. Once
    one stream runs out the rest of the other is drained as-is.
    """
    lhs = iter(left)
    rhs = iter(right)
    a = next(lhs, _EXHAUSTED)
    b = next(rhs, _EXHAUSTED)
    while a is not _EXHAUSTED and b is not _EXHAUSTED:
        pa = as_point(a)
        pb = as_point(b)
        if pa.time < pb.time:
            yield pa
            a = next(lhs, _EXHAUSTED)
        elif pb.time < pa.time:
            yield pb
            b = next(rhs, _EXHAUSTED)
        else:
            logger.debug("Timestamp %d present in both series; keeping left value", pa.time)
            yield pa
            a = next(lhs, _EXHAUSTED)
            b = next(rhs, _EXHAUSTED)
    if a is not _EXHAUSTED:
        yield as_point(a)
        for item in lhs:
            yield as_point(item)
    if b is not _EXHAUSTED:
        yield as_point(b)
        for item in rhs:
            yield as_point(item)


class MergeTransform(StreamTransformBase):
    """Merge an incoming stream (left) with a fixed ``other`` stream (right)."""

    def __init__(self, other: Iterable) -> None:
        self.other = other

    def apply(self, stream: Iterable) -> Iterator[DataPoint]:
        return merge_points(stream, self.other)


def merge(a: "TimeSeries", b: "TimeSeries") -> "TimeSeries":
    """Left-biased sorted merge of two series.

    The merged stream must already be strictly increasing; a violation
    means one input broke the index invariant and raises
    ``NonMonotonicIndexError`` rather than being truncated.
    """
    from timeseries.domain.series import TimeSeries

    return TimeSeries.strict_records(merge_points(a, b))
