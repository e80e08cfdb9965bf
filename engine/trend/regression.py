"""
Linear regression forecasting for daily quota usage, fitting a least squares
line over index positions and extrapolating it across the horizon. The line
fit is shared with the seasonal decomposition and change point models.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from engine.exceptions import InsufficientData, NumericDegeneracy

log = logging.getLogger(__name__)

MIN_LINE_SAMPLES = 2


def fit_line(xs: Sequence[float], ys: Sequence[float], model: str = "linear") -> Tuple[float, float]:
    """Closed-form ordinary least squares fit of ``y = slope * x + intercept``.

    ``model`` names the caller in the InsufficientData raised below two points.
    """
    t = np.asarray(xs, dtype=float)
    v = np.asarray(ys, dtype=float)
    n = len(v)
    if len(t) != n:
        raise NumericDegeneracy(f"fit_line: {len(t)} positions for {n} values")
    if n < MIN_LINE_SAMPLES:
        raise InsufficientData(model, MIN_LINE_SAMPLES, n)

    sum_t = float(np.sum(t))
    sum_y = float(np.sum(v))
    sum_ty = float(np.sum(t * v))
    sum_tt = float(np.sum(t * t))

    denominator = n * sum_tt - sum_t * sum_t
    if denominator == 0:
        raise NumericDegeneracy("fit_line: all positions coincide, slope is undefined")

    slope = (n * sum_ty - sum_t * sum_y) / denominator
    intercept = (sum_y - slope * sum_t) / n
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise NumericDegeneracy(f"fit_line: non-finite fit slope={slope} intercept={intercept}")
    return slope, intercept


def r_squared(xs: Sequence[float], ys: Sequence[float], slope: float, intercept: float) -> float:
    t = np.asarray(xs, dtype=float)
    v = np.asarray(ys, dtype=float)
    predicted = slope * t + intercept
    ss_res = np.sum((v - predicted) ** 2)
    ss_tot = np.sum((v - np.mean(v)) ** 2)
    return float(1.0 - ss_res / ss_tot) if ss_tot > 0 else 0.0


def forecast(vals: Sequence[float], horizon: int) -> List[float]:
    n = len(vals)
    try:
        slope, intercept = fit_line(range(n), vals)
    except InsufficientData:
        if n == 0:
            raise
        # a single observation has no trend; project it flat
        log.warning("linear forecast: %d sample(s), projecting last value flat", n)
        last = max(0.0, float(vals[-1]))
        return [last] * horizon

    log.debug("linear forecast: n=%d slope=%.6f intercept=%.6f", n, slope, intercept)
    return [max(0.0, slope * (n - 1 + i) + intercept) for i in range(1, horizon + 1)]
