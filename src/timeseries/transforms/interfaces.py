from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from timeseries.domain.record import DataPoint


class StreamTransformBase(ABC):
    """Base interface for transforms over ordered DataPoint streams."""

    def __call__(self, stream: Iterator[DataPoint]) -> Iterator[DataPoint]:
        return self.apply(stream)

    @abstractmethod
    def apply(self, stream: Iterator[DataPoint]) -> Iterator[DataPoint]:
        ...
