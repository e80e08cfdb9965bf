"""
Test cases for classical seasonal decomposition, covering the centered moving
average, normalized seasonal indices, detrending and the sample boundary.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.exceptions import InsufficientData, InvalidParameter, NumericDegeneracy
from engine.seasonal import decomposition

PATTERN = [0.5, 1.0, 1.0, 1.0, 1.0, 1.5, 1.0]


def test_centered_moving_average_odd_and_even():
    ma = decomposition.centered_moving_average(list(range(10)), 3)
    assert list(ma) == pytest.approx([1, 2, 3, 4, 5, 6, 7, 8])
    # 2x4 weighting keeps a linear series on itself
    ma_even = decomposition.centered_moving_average(list(range(10)), 4)
    assert list(ma_even) == pytest.approx([2, 3, 4, 5, 6, 7])


def test_seasonal_indices_recover_pattern():
    vals = [40.0 * PATTERN[i % 7] for i in range(28)]
    seasonal = decomposition.seasonal_indices(vals, 7)
    assert len(seasonal) == 7
    assert float(np.mean(seasonal)) == pytest.approx(1.0, abs=1e-6)
    expected = np.array(PATTERN) / np.mean(PATTERN)
    assert list(seasonal) == pytest.approx(list(expected))


def test_constant_series_forecast():
    assert decomposition.forecast([10.0] * 14, 3) == pytest.approx([10.0, 10.0, 10.0])


def test_linear_trend_is_extrapolated():
    model = decomposition.decompose(list(range(14)), 7)
    assert model.slope == pytest.approx(1.0)
    assert model.intercept == pytest.approx(0.0, abs=1e-9)
    assert decomposition.forecast(list(range(14)), 2, period=7) == pytest.approx([15.0, 16.0])


def test_boundary_at_one_period():
    with pytest.raises(InsufficientData) as exc:
        decomposition.forecast([10.0] * 6, 2, period=7)
    assert exc.value.required == 7
    assert decomposition.forecast([10.0] * 7, 2, period=7) == pytest.approx([10.0, 10.0])


def test_even_period_needs_one_extra_day():
    assert decomposition.min_samples(4) == 5
    with pytest.raises(InsufficientData):
        decomposition.forecast([10.0] * 4, 2, period=4)
    assert len(decomposition.forecast([10.0] * 5, 2, period=4)) == 2


def test_all_zero_series_has_no_ratios():
    with pytest.raises(InsufficientData):
        decomposition.forecast([0.0] * 14, 2)


def test_zero_usage_phase_is_degenerate():
    with pytest.raises(NumericDegeneracy) as exc:
        decomposition.forecast([0, 10, 10, 10, 10, 10, 10] * 2, 2)
    assert "phases [0]" in str(exc.value)


@pytest.mark.parametrize("period", [0, 1, 3.5])
def test_period_validation(period):
    with pytest.raises(InvalidParameter):
        decomposition.forecast([10.0] * 14, 2, period=period)
