"""
Quota bound post-processing: every projected daily usage is constrained to
the range [0, remaining quota], and optional percentage confidence bands are
derived under the same ceiling.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Tuple

from engine.exceptions import InvalidParameter, NumericDegeneracy


def clamp(value: float, upper: float) -> float:
    if not math.isfinite(value):
        raise NumericDegeneracy(f"cannot bound non-finite projected value {value}")
    return min(max(float(value), 0.0), float(upper))


def validate_confidence(level: float | None) -> float | None:
    if level is None:
        return None
    if isinstance(level, bool) or not isinstance(level, (int, float)) or not 0 < level <= 100:
        raise InvalidParameter(f"confidence_interval must be a percentage in (0, 100], got {level!r}")
    return float(level)


def confidence_bounds(value: float, level: float, upper: float) -> Tuple[float, float]:
    margin = value * (level / 100.0)
    return clamp(value - margin, upper), clamp(value + margin, upper)
