"""
Test cases for daily usage retrieval from an upstream catch event source.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import date

import pytest

from config import settings
from engine.fetcher import fetch_daily_usage


class DummySource:
    def __init__(self, events):
        self._events = events
        self.calls = []

    def __call__(self, quota_id, historical_days):
        self.calls.append((quota_id, historical_days))
        if quota_id == "bad":
            raise ConnectionError("catch ledger unavailable")
        return iter(self._events)


def test_fetch_daily_usage_aggregates_source_events():
    source = DummySource([{"date": "2026-10-18", "weight": 12.0}, {"date": "2026-10-18", "weight": 3.0}])
    series = fetch_daily_usage(source, "q-1", historical_days=2, today=date(2026, 10, 19))
    assert source.calls == [("q-1", 2)]
    assert series.values == [0.0, 15.0, 0.0]


def test_fetch_daily_usage_uses_configured_window(monkeypatch):
    monkeypatch.setattr(settings, "aggregate_historical_days", 5)
    source = DummySource([])
    series = fetch_daily_usage(source, "q-1", today=date(2026, 10, 19))
    assert source.calls == [("q-1", 5)]
    assert len(series) == 6


def test_source_errors_propagate():
    with pytest.raises(ConnectionError):
        fetch_daily_usage(DummySource([]), "bad", historical_days=3)
