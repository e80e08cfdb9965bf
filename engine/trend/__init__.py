"""
Trend models for the quota usage engine: ordinary least squares linear
regression over the whole series and segmented regression that restarts the
fit at detected change points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.regression import fit_line, forecast as linear_forecast
from engine.trend.changepoint import Segment, detect_change_points, segment, forecast as change_point_forecast

__all__ = [
    "fit_line",
    "linear_forecast",
    "Segment",
    "detect_change_points",
    "segment",
    "change_point_forecast",
]
