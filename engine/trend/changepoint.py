"""
Change point (segmented regression) forecasting: flags indices where the day
to day gradient shifts sharply, fits an independent least squares line to
every segment between flagged indices and extrapolates only the most recent
segment, so a fleet that changed its fishing pace is projected at the new pace.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from config import settings
from engine.exceptions import InsufficientData, InvalidParameter
from engine.trend.regression import fit_line, r_squared

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    start: int
    end: int
    slope: float
    intercept: float
    r_squared: float

    @property
    def length(self) -> int:
        return self.end - self.start + 1


def _validate_prior(change_point_prior: float | None) -> float:
    if change_point_prior is None:
        change_point_prior = settings.changepoint_prior
    if not change_point_prior > 0:
        raise InvalidParameter(f"change_point_prior must be positive, got {change_point_prior}")
    return float(change_point_prior)


def detect_change_points(vals: Sequence[float], change_point_prior: float | None = None) -> List[int]:
    prior = _validate_prior(change_point_prior)
    arr = np.asarray(vals, dtype=float)
    if len(arr) < 3:
        return []

    grad = np.diff(arr)
    grad_change = np.abs(grad[1:] - grad[:-1])
    cutoff = prior * float(np.max(arr))
    # grad_change[k] is measured around index k + 1
    return [int(k) + 1 for k in np.where(grad_change > cutoff)[0]]


def _boundaries(n: int, change_points: List[int], min_length: int) -> List[tuple[int, int]]:
    spans: List[tuple[int, int]] = []
    start = 0
    for cp in change_points + [n - 1]:
        if cp - start + 1 < min_length:
            continue
        spans.append((start, cp))
        start = cp + 1
    if start <= n - 1:
        # trailing points too few to fit on their own join the previous span
        if spans:
            spans[-1] = (spans[-1][0], n - 1)
        else:
            spans.append((0, n - 1))
    return spans


def segment(vals: Sequence[float], change_point_prior: float | None = None) -> List[Segment]:
    n = len(vals)
    if n < 2:
        raise InsufficientData("changePoint", 2, n)
    arr = np.asarray(vals, dtype=float)
    change_points = detect_change_points(arr, change_point_prior)
    min_length = max(2, settings.changepoint_min_segment)

    segments: List[Segment] = []
    for start, end in _boundaries(n, change_points, min_length):
        xs = np.arange(start, end + 1, dtype=float)
        ys = arr[start:end + 1]
        slope, intercept = fit_line(xs, ys, "changePoint")
        segments.append(Segment(
            start=start,
            end=end,
            slope=slope,
            intercept=intercept,
            r_squared=round(r_squared(xs, ys, slope, intercept), 4),
        ))

    log.debug("change point segmentation: n=%d change_points=%s segments=%d", n, change_points, len(segments))
    return segments


def forecast(vals: Sequence[float], horizon: int, change_point_prior: float | None = None) -> List[float]:
    last = segment(vals, change_point_prior)[-1]
    n = len(vals)
    return [max(0.0, last.slope * (n - 1 + i) + last.intercept) for i in range(1, horizon + 1)]
