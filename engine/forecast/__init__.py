"""
Forecast facade and quota exhaustion projection for the quota usage engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.facade import ForecastPoint, ForecastRequest, ForecastResult, forecast, run
from engine.forecast.projection import QuotaProjection, forecast_quota, project

__all__ = [
    "ForecastPoint",
    "ForecastRequest",
    "ForecastResult",
    "forecast",
    "run",
    "QuotaProjection",
    "forecast_quota",
    "project",
]
