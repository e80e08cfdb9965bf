"""
Holt-Winters triple exponential smoothing with a multiplicative seasonal index,
folding the observed series into a final level, trend and per-phase seasonal
index and extrapolating them across the horizon under the remaining quota.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.exceptions import InsufficientData, InvalidParameter, NumericDegeneracy

MODEL = "holtWinters"


@dataclass(frozen=True)
class HoltWintersState:
    level: float
    trend: float
    seasonal: Tuple[float, ...]

    @property
    def period(self) -> int:
        return len(self.seasonal)


def _smoothing_factor(name: str, value: float | None, default: float) -> float:
    if value is None:
        value = default
    if not 0.0 < value <= 1.0:
        raise InvalidParameter(f"{name} must lie in (0, 1], got {value}")
    return float(value)


def _validate_period(period: int | None) -> int:
    if period is None:
        period = settings.seasonal_period
    if isinstance(period, bool) or not isinstance(period, int) or period < 2:
        raise InvalidParameter(f"period must be an integer of at least 2, got {period!r}")
    return period


def seed_seasonal_indices(vals: Sequence[float], period: int) -> np.ndarray:
    """Average same-phase observations over every whole period in ``vals``,
    scaled so the indices average to exactly 1.
    """
    arr = np.asarray(vals, dtype=float)
    cycles = len(arr) // period
    if cycles < 1:
        raise InsufficientData(MODEL, period, len(arr), "seasonal seeding needs one whole period")
    seeds = arr[: cycles * period].reshape(cycles, period).mean(axis=0)
    average = float(np.mean(seeds))
    if average == 0:
        raise NumericDegeneracy("holt-winters: seasonal seed average is zero, series has no usage")
    return seeds / average


def fit(
    vals: Sequence[float],
    alpha: float | None = None,
    beta: float | None = None,
    gamma: float | None = None,
    period: int | None = None,
) -> HoltWintersState:
    alpha = _smoothing_factor("alpha", alpha, settings.holt_winters_alpha)
    beta = _smoothing_factor("beta", beta, settings.holt_winters_beta)
    gamma = _smoothing_factor("gamma", gamma, settings.holt_winters_gamma)
    period = _validate_period(period)

    y = [float(v) for v in vals]
    n = len(y)
    if n < 2 or n < period:
        raise InsufficientData(MODEL, max(2, period), n)

    def step(state: HoltWintersState, observation: Tuple[int, float]) -> HoltWintersState:
        i, value = observation
        phase = i % period
        index = state.seasonal[phase]
        if index == 0:
            raise NumericDegeneracy(f"holt-winters: seasonal index for phase {phase} is zero at step {i}")
        level = alpha * (value / index) + (1 - alpha) * (state.level + state.trend)
        if level == 0:
            raise NumericDegeneracy(f"holt-winters: level collapsed to zero at step {i}")
        trend = beta * (level - state.level) + (1 - beta) * state.trend
        updated = gamma * (value / level) + (1 - gamma) * index
        seasonal = state.seasonal[:phase] + (updated,) + state.seasonal[phase + 1:]
        return HoltWintersState(level=level, trend=trend, seasonal=seasonal)

    initial = HoltWintersState(
        level=y[0],
        trend=(y[1] - y[0]) / period,
        seasonal=tuple(float(c) for c in seed_seasonal_indices(y, period)),
    )
    final = reduce(step, enumerate(y), initial)

    if not all(math.isfinite(x) for x in (final.level, final.trend, *final.seasonal)):
        raise NumericDegeneracy(f"holt-winters: non-finite state level={final.level} trend={final.trend}")
    return final


def forecast(
    vals: Sequence[float],
    horizon: int,
    remaining: Optional[float] = None,
    alpha: float | None = None,
    beta: float | None = None,
    gamma: float | None = None,
    period: int | None = None,
) -> List[float]:
    state = fit(vals, alpha=alpha, beta=beta, gamma=gamma, period=period)
    ceiling = math.inf if remaining is None else float(remaining)
    n = len(vals)
    # each step is capped at the remaining quota before leaving the model
    return [
        min(state.level + state.trend * i + state.seasonal[(n + i - 1) % state.period], ceiling)
        for i in range(1, horizon + 1)
    ]
