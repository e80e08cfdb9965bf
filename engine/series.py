"""
Value types shared by every forecasting model: daily time series points, the
time series container itself, raw catch events and the quota parameters that
bound a forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Iterator, List, Tuple

from engine.exceptions import InvalidParameter


@dataclass(frozen=True)
class TimeSeriesPoint:
    date: date
    value: float


@dataclass(frozen=True)
class CatchEvent:
    date: date
    weight: float


@dataclass(frozen=True)
class TimeSeries:
    points: Tuple[TimeSeriesPoint, ...]

    def __post_init__(self) -> None:
        # accept any iterable of points but always store an immutable tuple
        object.__setattr__(self, "points", tuple(self.points))
        previous: date | None = None
        for p in self.points:
            if not math.isfinite(p.value) or p.value < 0:
                raise InvalidParameter(f"series value on {p.date} must be finite and non-negative, got {p.value}")
            if previous is not None and p.date <= previous:
                raise InvalidParameter(f"series dates must be strictly increasing: {p.date} follows {previous}")
            previous = p.date

    @classmethod
    def from_values(cls, start: date, values: Iterable[float]) -> TimeSeries:
        return cls(tuple(
            TimeSeriesPoint(date=start + timedelta(days=i), value=float(v))
            for i, v in enumerate(values)
        ))

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[date, float]]) -> TimeSeries:
        return cls(tuple(TimeSeriesPoint(date=d, value=float(v)) for d, v in pairs))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TimeSeriesPoint]:
        return iter(self.points)

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.points]

    @property
    def dates(self) -> List[date]:
        return [p.date for p in self.points]

    @property
    def last_date(self) -> date:
        if not self.points:
            raise InvalidParameter("empty series has no last date")
        return self.points[-1].date


@dataclass(frozen=True)
class QuotaContext:
    remaining_amount: float
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if not math.isfinite(self.remaining_amount) or self.remaining_amount < 0:
            raise InvalidParameter(f"remaining_amount must be finite and non-negative, got {self.remaining_amount}")
        if self.end_date < self.start_date:
            raise InvalidParameter(f"quota end_date {self.end_date} precedes start_date {self.start_date}")

    def days_until_expiry(self, as_of: date) -> int:
        return (self.end_date - as_of).days


def following_days(last: date, horizon: int) -> List[date]:
    return [last + timedelta(days=i) for i in range(1, horizon + 1)]
