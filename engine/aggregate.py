"""
Aggregation of raw catch landings into one evenly spaced daily usage series
over a fixed historical window, summing weights per day and filling days
without landings with zero so every downstream model sees a gap-free series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, Optional, Tuple

from config import settings
from engine.exceptions import InvalidParameter
from engine.series import CatchEvent, TimeSeries, TimeSeriesPoint

log = logging.getLogger(__name__)


def _coerce_date(raw: Any) -> Optional[date]:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def _unpack(event: Any) -> Tuple[Any, Any]:
    if isinstance(event, CatchEvent):
        return event.date, event.weight
    if isinstance(event, Mapping):
        return event.get("date"), event.get("weight")
    if isinstance(event, (tuple, list)) and len(event) == 2:
        return event[0], event[1]
    return getattr(event, "date", None), getattr(event, "weight", None)


def aggregate(
    events: Iterable[Any],
    historical_days: int | None = None,
    today: date | None = None,
) -> TimeSeries:
    if historical_days is None:
        historical_days = settings.aggregate_historical_days
    if isinstance(historical_days, bool) or not isinstance(historical_days, int) or historical_days <= 0:
        raise InvalidParameter(f"historical_days must be a positive integer, got {historical_days!r}")
    if today is None:
        today = date.today()

    start = today - timedelta(days=historical_days)
    daily: Dict[date, float] = {}
    skipped = 0

    for event in events:
        raw_date, raw_weight = _unpack(event)
        day = _coerce_date(raw_date)
        if day is None:
            log.warning("aggregate: skipping catch event with malformed date %r", raw_date)
            skipped += 1
            continue
        if day < start or day > today:
            continue
        try:
            weight = float(raw_weight)
        except (TypeError, ValueError):
            log.warning("aggregate: skipping catch event on %s with malformed weight %r", day, raw_weight)
            skipped += 1
            continue
        if not math.isfinite(weight) or weight < 0:
            log.warning("aggregate: skipping catch event on %s with invalid weight %r", day, raw_weight)
            skipped += 1
            continue
        daily[day] = daily.get(day, 0.0) + weight

    log.debug(
        "aggregate: window=%s..%s days_with_catch=%d skipped=%d",
        start, today, len(daily), skipped,
    )
    return TimeSeries(tuple(
        TimeSeriesPoint(date=day, value=daily.get(day, 0.0))
        for day in (start + timedelta(days=i) for i in range(historical_days + 1))
    ))
