"""
Trailing simple moving average forecast: the mean of the most recent window of
daily usage, repeated across the horizon.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from config import settings
from engine.exceptions import InsufficientData, InvalidParameter

log = logging.getLogger(__name__)


def trailing_mean(vals: Sequence[float], window_size: int | None = None) -> float:
    if window_size is None:
        window_size = settings.moving_average_window
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size <= 0:
        raise InvalidParameter(f"window_size must be a positive integer, got {window_size!r}")
    n = len(vals)
    if n < 1:
        raise InsufficientData("movingAverage", 1, 0)
    if n < window_size:
        log.debug("moving average: window %d shrunk to series length %d", window_size, n)
    window = np.asarray(vals[-min(window_size, n):], dtype=float)
    return float(np.mean(window))


def forecast(vals: Sequence[float], horizon: int, window_size: int | None = None) -> List[float]:
    value = max(0.0, trailing_mean(vals, window_size))
    return [value] * horizon
