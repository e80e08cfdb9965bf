"""
Fetcher Module for Catch Event Retrieval

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Protocol

from config import settings
from engine.aggregate import aggregate
from engine.series import TimeSeries

log = logging.getLogger(__name__)


class CatchEventSource(Protocol):
    """Upstream collaborator returning the raw landings recorded against a
    quota over the last ``historical_days`` days. Each event carries a date
    and a non-negative weight (see :func:`engine.aggregate.aggregate` for the
    accepted shapes).
    """

    def __call__(self, quota_id: str, historical_days: int) -> Iterable[Any]: ...


def fetch_daily_usage(
    source: CatchEventSource,
    quota_id: str,
    historical_days: int | None = None,
    today: date | None = None,
) -> TimeSeries:
    if historical_days is None:
        historical_days = settings.aggregate_historical_days
    events = list(source(quota_id, historical_days))
    log.debug("fetch_daily_usage quota=%s events=%d window=%s", quota_id, len(events), historical_days)
    return aggregate(events, historical_days=historical_days, today=today)
