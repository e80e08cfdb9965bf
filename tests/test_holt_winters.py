"""
Test cases for Holt-Winters triple exponential smoothing, covering seasonal
seeding, the level/trend/season fold, the inner quota ceiling and the sample
and parameter boundaries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.exceptions import InsufficientData, InvalidParameter, NumericDegeneracy
from engine.seasonal import holt_winters


def test_seed_indices_average_to_one():
    vals = [5, 10, 15, 20, 25, 30, 35] * 2 + [99]
    seeds = holt_winters.seed_seasonal_indices(vals, 7)
    assert len(seeds) == 7
    assert float(np.mean(seeds)) == pytest.approx(1.0, abs=1e-6)
    assert seeds[0] == pytest.approx(5 / 20)
    assert seeds[6] == pytest.approx(35 / 20)


def test_constant_series_state():
    state = holt_winters.fit([10.0] * 14)
    assert state.period == 7
    assert state.level == pytest.approx(10.0)
    assert state.trend == pytest.approx(0.0)
    assert state.seasonal == pytest.approx((1.0,) * 7)


def test_forecast_adds_seasonal_index():
    assert holt_winters.forecast([10.0] * 14, 3) == pytest.approx([11.0, 11.0, 11.0])


def test_forecast_capped_at_remaining():
    assert holt_winters.forecast([10.0] * 14, 3, remaining=5.0) == [5.0, 5.0, 5.0]


def test_trend_carries_into_forecast(weekly_usage):
    out = holt_winters.forecast(weekly_usage, 14)
    # same phase one week apart grows with the drift
    assert out[7] > out[0]


def test_boundary_at_one_period():
    with pytest.raises(InsufficientData) as exc:
        holt_winters.forecast([10.0] * 6, 2, period=7)
    assert exc.value.required == 7
    assert len(holt_winters.forecast([10.0] * 7, 2, period=7)) == 2


def test_needs_two_samples_even_for_short_period():
    with pytest.raises(InsufficientData):
        holt_winters.forecast([10.0], 2, period=2)


@pytest.mark.parametrize("kwargs", [
    {"alpha": 0.0},
    {"beta": 1.2},
    {"gamma": -0.1},
    {"period": 1},
    {"period": 7.0},
])
def test_parameter_validation(kwargs):
    with pytest.raises(InvalidParameter):
        holt_winters.forecast([10.0] * 14, 2, **kwargs)


def test_zero_usage_phase_is_degenerate():
    vals = [0, 10, 10, 10, 10, 10, 10] * 2
    with pytest.raises(NumericDegeneracy):
        holt_winters.fit(vals)


def test_all_zero_series_is_degenerate():
    with pytest.raises(NumericDegeneracy):
        holt_winters.fit([0.0] * 14)
