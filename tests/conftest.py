from __future__ import annotations

import pytest

from timeseries.domain.series import TimeSeries


@pytest.fixture
def step_series() -> TimeSeries:
    """Three points spaced 60ms apart, starting at t=100."""
    return TimeSeries([100, 160, 220], [1.0, 2.5, 3.2])
