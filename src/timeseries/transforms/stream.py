from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Callable

from timeseries.domain.record import DataPoint, as_point
from timeseries.errors import NonMonotonicIndexError
from timeseries.transforms.interfaces import StreamTransformBase

logger = logging.getLogger(__name__)


class IncreasingPrefixTransform(StreamTransformBase):
    """Pass points through until a timestamp fails to exceed its predecessor.

    With ``strict=True`` the first violation raises ``NonMonotonicIndexError``
    instead of ending the stream.
    """

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def apply(self, stream: Iterable[Any]) -> Iterator[DataPoint]:
        previous: DataPoint | None = None
        for position, item in enumerate(stream):
            point = as_point(item)
            if previous is not None and point.time <= previous.time:
                if self.strict:
                    raise NonMonotonicIndexError(position, previous.time, point.time)
                logger.debug(
                    "Stopping at position %d: timestamp %d does not exceed %d",
                    position,
                    point.time,
                    previous.time,
                )
                return
            previous = point
            yield point


class DiffTransform(StreamTransformBase):
    """First difference of values, stamped with the later timestamp."""

    def apply(self, stream: Iterable[DataPoint]) -> Iterator[DataPoint]:
        previous: DataPoint | None = None
        for point in stream:
            if previous is not None:
                yield DataPoint(time=point.time, value=point.value - previous.value)
            previous = point


class MapValuesTransform(StreamTransformBase):
    """Apply ``fn`` to each value; with ``with_time`` it receives (timestamp, value)."""

    def __init__(self, fn: Callable[..., Any], *, with_time: bool = False) -> None:
        self.fn = fn
        self.with_time = with_time

    def apply(self, stream: Iterable[DataPoint]) -> Iterator[DataPoint]:
        for point in stream:
            if self.with_time:
                value = self.fn(point.time, point.value)
            else:
                value = self.fn(point.value)
            yield DataPoint(time=point.time, value=value)
