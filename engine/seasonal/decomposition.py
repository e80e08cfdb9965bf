"""
Classical multiplicative seasonal decomposition: a centered moving average
estimates level and trend, usage divided by it gives per-phase seasonal ratios,
and a least squares line through the deseasonalized series supplies the trend
that is re-seasonalized over the horizon.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from config import settings
from engine.exceptions import InsufficientData, InvalidParameter, NumericDegeneracy
from engine.trend.regression import fit_line

log = logging.getLogger(__name__)

MODEL = "seasonal"


@dataclass(frozen=True)
class Decomposition:
    seasonal: Tuple[float, ...]
    slope: float
    intercept: float

    @property
    def period(self) -> int:
        return len(self.seasonal)


def _validate_period(period: int | None) -> int:
    if period is None:
        period = settings.seasonal_period
    if isinstance(period, bool) or not isinstance(period, int) or period < 2:
        raise InvalidParameter(f"period must be an integer of at least 2, got {period!r}")
    return period


def min_samples(period: int) -> int:
    # one centered window: period points when odd, period + 1 when even
    return 2 * (period // 2) + 1


def centered_moving_average(vals: Sequence[float], period: int) -> np.ndarray:
    """Centered moving average of width ``period``; entry ``k`` is centered on
    index ``k + period // 2``. Even periods use the classical 2 x period
    weighting so the window stays centered on a whole day.
    """
    half = period // 2
    if period % 2:
        weights = np.full(period, 1.0 / period)
    else:
        weights = np.full(2 * half + 1, 1.0 / period)
        weights[0] = weights[-1] = 0.5 / period
    arr = np.asarray(vals, dtype=float)
    if len(arr) < len(weights):
        return np.zeros(0)
    return np.convolve(arr, weights, mode="valid")


def seasonal_indices(vals: Sequence[float], period: int | None = None) -> np.ndarray:
    period = _validate_period(period)
    arr = np.asarray(vals, dtype=float)
    n = len(arr)
    required = min_samples(period)
    if n < required:
        raise InsufficientData(MODEL, required, n)

    half = period // 2
    ratios: Dict[int, List[float]] = {}
    for k, m in enumerate(centered_moving_average(arr, period)):
        if m <= 0:
            continue
        i = k + half
        ratios.setdefault(i % period, []).append(arr[i] / m)

    if not ratios:
        raise InsufficientData(MODEL, required, n, "no window with non-zero usage to derive seasonal ratios")

    raw = np.array([float(np.mean(ratios[p])) if p in ratios else 1.0 for p in range(period)])
    average = float(np.mean(raw))
    if average == 0:
        raise NumericDegeneracy("seasonal decomposition: every seasonal ratio is zero")
    return raw / average


def decompose(vals: Sequence[float], period: int | None = None) -> Decomposition:
    period = _validate_period(period)
    arr = np.asarray(vals, dtype=float)
    seasonal = seasonal_indices(arr, period)
    if np.any(seasonal == 0):
        zero_phases = [int(p) for p in np.where(seasonal == 0)[0]]
        raise NumericDegeneracy(f"seasonal decomposition: zero seasonal index for phases {zero_phases}")

    n = len(arr)
    deseasonalized = arr / seasonal[np.arange(n) % period]
    slope, intercept = fit_line(np.arange(n), deseasonalized, MODEL)
    log.debug("seasonal decomposition: n=%d period=%d slope=%.6f intercept=%.6f", n, period, slope, intercept)
    return Decomposition(seasonal=tuple(float(s) for s in seasonal), slope=slope, intercept=intercept)


def forecast(vals: Sequence[float], horizon: int, period: int | None = None) -> List[float]:
    model = decompose(vals, period)
    n = len(vals)
    return [
        max(0.0, (model.slope * (n + i) + model.intercept) * model.seasonal[(n + i - 1) % model.period])
        for i in range(1, horizon + 1)
    ]
