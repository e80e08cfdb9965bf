"""
Single exponential smoothing over daily quota usage, used where no durable
trend is expected and only a noise damped current run rate is wanted.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from config import settings
from engine.exceptions import InsufficientData, InvalidParameter


def _validate_alpha(alpha: float | None) -> float:
    if alpha is None:
        alpha = settings.exponential_alpha
    if not 0.0 < alpha <= 1.0:
        raise InvalidParameter(f"alpha must lie in (0, 1], got {alpha}")
    return float(alpha)


def smooth(vals: Sequence[float], alpha: float | None = None) -> np.ndarray:
    alpha = _validate_alpha(alpha)
    if len(vals) < 1:
        raise InsufficientData("exponential", 1, 0)
    result = np.zeros(len(vals))
    result[0] = vals[0]
    for i in range(1, len(vals)):
        result[i] = alpha * vals[i] + (1 - alpha) * result[i - 1]
    return result


def forecast(vals: Sequence[float], horizon: int, alpha: float | None = None) -> List[float]:
    level = max(0.0, float(smooth(vals, alpha)[-1]))
    return [level] * horizon
