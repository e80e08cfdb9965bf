"""
Seasonal models separating a repeating (weekly by default) usage pattern from
level and trend: Holt-Winters triple exponential smoothing and classical
multiplicative decomposition with a linear trend.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.seasonal.holt_winters import HoltWintersState, fit as fit_holt_winters, forecast as holt_winters_forecast
from engine.seasonal.decomposition import Decomposition, decompose, forecast as decomposition_forecast

__all__ = [
    "HoltWintersState",
    "fit_holt_winters",
    "holt_winters_forecast",
    "Decomposition",
    "decompose",
    "decomposition_forecast",
]
