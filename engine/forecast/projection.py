"""
Quota exhaustion analysis over a bounded forecast: cumulative projected usage
against the remaining allocation, the first day the running total crosses it,
the projected overage and how the quota's expiry relates to that day.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Mapping, Optional

from config import settings
from engine.enums import ModelName
from engine.fetcher import CatchEventSource, fetch_daily_usage
from engine.forecast.facade import ForecastResult, forecast
from engine.params import ModelParams
from engine.series import QuotaContext

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuotaProjection:
    result: ForecastResult
    remaining_quota: float
    projected_usage: float
    projected_exhaustion_date: Optional[date]
    projected_overage: Optional[float]
    days_until_expiry: int
    exhausted_before_expiry: bool

    @property
    def will_exhaust(self) -> bool:
        return self.projected_exhaustion_date is not None


def project(result: ForecastResult, quota: QuotaContext, as_of: date | None = None) -> QuotaProjection:
    if as_of is None:
        as_of = result.points[0].date - timedelta(days=1)
    remaining = quota.remaining_amount

    cumulative = 0.0
    exhaustion: Optional[date] = None
    for point in result:
        cumulative += point.projected_value
        if exhaustion is None and cumulative > remaining:
            exhaustion = point.date

    overage = round(cumulative - remaining, 6) if cumulative > remaining else None
    exhausted_before_expiry = exhaustion is not None and exhaustion <= quota.end_date
    if exhaustion is not None:
        log.info(
            "quota projected to be exhausted on %s (overage=%.3f, expires %s)",
            exhaustion, overage, quota.end_date,
        )

    return QuotaProjection(
        result=result,
        remaining_quota=remaining,
        projected_usage=round(cumulative, 6),
        projected_exhaustion_date=exhaustion,
        projected_overage=overage,
        days_until_expiry=quota.days_until_expiry(as_of),
        exhausted_before_expiry=exhausted_before_expiry,
    )


def forecast_quota(
    source: CatchEventSource,
    quota_id: str,
    quota: QuotaContext,
    horizon_days: int,
    model: ModelName | str | None = None,
    historical_days: int | None = None,
    params: ModelParams | Mapping[str, Any] | None = None,
    today: date | None = None,
    confidence_interval: Optional[float] = None,
) -> QuotaProjection:
    if model is None:
        model = settings.forecast_default_model
    series = fetch_daily_usage(source, quota_id, historical_days=historical_days, today=today)
    result = forecast(series, quota, model, horizon_days, params=params, confidence_interval=confidence_interval)
    return project(result, quota, as_of=series.last_date)
