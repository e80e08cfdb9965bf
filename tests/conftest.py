import os
import sys
from datetime import date

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.series import QuotaContext, TimeSeries


START = date(2026, 10, 1)


@pytest.fixture
def make_series():
    def _make(values, start=START):
        return TimeSeries.from_values(start, values)
    return _make


@pytest.fixture
def make_quota():
    def _make(remaining=1000.0, start=date(2026, 1, 1), end=date(2026, 12, 31)):
        return QuotaContext(remaining_amount=remaining, start_date=start, end_date=end)
    return _make


@pytest.fixture
def weekly_usage():
    # four weeks of landings with a weekday pattern and a gentle upward drift
    return [20.0 + 5.0 * (i % 7) + 0.5 * i for i in range(28)]

