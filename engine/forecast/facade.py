"""
Single entry point for quota usage forecasting: validates the request, runs the
selected model over the daily usage series and bounds every projected value by
the quota's remaining allocation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from engine.bound import clamp, confidence_bounds, validate_confidence
from engine.enums import ModelName
from engine.exceptions import InsufficientData, InvalidParameter, NumericDegeneracy
from engine.params import ModelParams
from engine.seasonal import decomposition, holt_winters
from engine.series import QuotaContext, TimeSeries, following_days
from engine.smoothing import exponential, moving_average
from engine.trend import changepoint, regression

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    projected_value: float
    raw_value: float
    lower_bound: Optional[float] = None
    upper_bound: Optional[float] = None


@dataclass(frozen=True)
class ForecastResult:
    model: ModelName
    points: Tuple[ForecastPoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ForecastPoint]:
        return iter(self.points)

    @property
    def values(self) -> List[float]:
        return [p.projected_value for p in self.points]

    @property
    def raw_values(self) -> List[float]:
        return [p.raw_value for p in self.points]

    @property
    def dates(self) -> List[date]:
        return [p.date for p in self.points]


@dataclass(frozen=True)
class ForecastRequest:
    series: TimeSeries
    quota: QuotaContext
    model: ModelName | str
    horizon_days: int
    params: ModelParams | Mapping[str, Any] | None = None
    confidence_interval: Optional[float] = None


_Runner = Callable[[List[float], int, QuotaContext, ModelParams], List[float]]


def _linear(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return regression.forecast(vals, horizon)


def _exponential(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return exponential.forecast(vals, horizon, alpha=params.alpha)


def _moving_average(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return moving_average.forecast(vals, horizon, window_size=params.window_size)


def _holt_winters(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return holt_winters.forecast(
        vals,
        horizon,
        remaining=quota.remaining_amount,
        alpha=params.alpha,
        beta=params.beta,
        gamma=params.gamma,
        period=params.period,
    )


def _seasonal(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return decomposition.forecast(vals, horizon, period=params.period)


def _change_point(vals: List[float], horizon: int, quota: QuotaContext, params: ModelParams) -> List[float]:
    return changepoint.forecast(vals, horizon, change_point_prior=params.change_point_prior)


_MODELS: Dict[ModelName, _Runner] = {
    ModelName.linear: _linear,
    ModelName.exponential: _exponential,
    ModelName.moving_average: _moving_average,
    ModelName.holt_winters: _holt_winters,
    ModelName.seasonal: _seasonal,
    ModelName.change_point: _change_point,
}


def run(request: ForecastRequest) -> ForecastResult:
    model = ModelName.parse(request.model)
    horizon = request.horizon_days
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon <= 0:
        raise InvalidParameter(f"horizon_days must be a positive integer, got {horizon!r}")
    if len(request.series) < 1:
        raise InsufficientData(model.value, 1, 0)

    params = ModelParams.coerce(request.params)
    level = validate_confidence(request.confidence_interval)
    remaining = request.quota.remaining_amount
    vals = request.series.values

    try:
        raw = _MODELS[model](vals, horizon, request.quota, params)
        if len(raw) != horizon:
            raise NumericDegeneracy(f"{model.value} returned {len(raw)} values for a {horizon} day horizon")

        points: List[ForecastPoint] = []
        for day, value in zip(following_days(request.series.last_date, horizon), raw):
            projected = clamp(value, remaining)
            lower = upper = None
            if level is not None:
                lower, upper = confidence_bounds(projected, level, remaining)
            points.append(ForecastPoint(
                date=day,
                projected_value=projected,
                raw_value=float(value),
                lower_bound=lower,
                upper_bound=upper,
            ))
    except NumericDegeneracy as exc:
        log.error("forecast model=%s n=%d degenerate: %s", model.value, len(vals), exc)
        raise

    log.debug(
        "forecast model=%s n=%d horizon=%d params=%s clamped=%d",
        model.value, len(vals), horizon, params.overrides(),
        sum(1 for p in points if p.projected_value != p.raw_value),
    )
    return ForecastResult(model=model, points=tuple(points))


def forecast(
    series: TimeSeries,
    quota: QuotaContext,
    model: ModelName | str,
    horizon_days: int,
    params: ModelParams | Mapping[str, Any] | None = None,
    confidence_interval: Optional[float] = None,
) -> ForecastResult:
    return run(ForecastRequest(
        series=series,
        quota=quota,
        model=model,
        horizon_days=horizon_days,
        params=params,
        confidence_interval=confidence_interval,
    ))
