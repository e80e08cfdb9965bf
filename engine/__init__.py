"""
Quota Usage Forecasting Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import ModelName
from engine.exceptions import ForecastError, InsufficientData, InvalidParameter, NumericDegeneracy
from engine.series import CatchEvent, QuotaContext, TimeSeries, TimeSeriesPoint

__all__ = [
    "ModelName",
    "ForecastError",
    "InsufficientData",
    "InvalidParameter",
    "NumericDegeneracy",
    "CatchEvent",
    "QuotaContext",
    "TimeSeries",
    "TimeSeriesPoint",
]
