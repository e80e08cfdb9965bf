"""
Smoothing models producing a flat run-rate forecast: single exponential
smoothing and a trailing simple moving average.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.smoothing.exponential import smooth, forecast as exponential_forecast
from engine.smoothing.moving_average import trailing_mean, forecast as moving_average_forecast

__all__ = ["smooth", "exponential_forecast", "trailing_mean", "moving_average_forecast"]
