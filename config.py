"""
Constants and configuration for the quota usage forecasting engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


QUOTACAST_SEASONAL_PERIOD: int = int(os.getenv("QUOTACAST_SEASONAL_PERIOD", "7"))
QUOTACAST_HISTORICAL_DAYS: int = int(os.getenv("QUOTACAST_HISTORICAL_DAYS", "30"))


class Settings(BaseSettings):
    # smoothing models
    exponential_alpha: float = 0.3
    moving_average_window: int = 7

    # holt-winters triple exponential smoothing
    holt_winters_alpha: float = 0.3
    holt_winters_beta: float = 0.1
    holt_winters_gamma: float = 0.1

    # length of the repeating cycle used by both seasonal models (days)
    seasonal_period: int = QUOTACAST_SEASONAL_PERIOD

    # change point detection: a gradient change larger than
    # changepoint_prior * max(series) starts a new segment
    changepoint_prior: float = 0.05
    changepoint_min_segment: int = 2

    # aggregation window used when the caller does not supply one
    aggregate_historical_days: int = QUOTACAST_HISTORICAL_DAYS

    forecast_default_model: str = "linear"

    model_config = {
        "env_prefix": "QUOTACAST_",
        "extra": "ignore",
    }


settings = Settings()
