"""
Error taxonomy for the forecasting engine: invalid caller configuration, too
few samples for the chosen model, and numeric degeneracy inside a model.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional


class ForecastError(Exception):
    pass


class InvalidParameter(ForecastError):
    pass


class InsufficientData(ForecastError):
    """Raised when a model's minimum sample count is not met.

    ``required`` is the smallest series length the model accepts with the
    parameters it was given, so the caller can shrink ``period`` or
    ``window_size`` or fall back to a simpler model.
    """

    def __init__(self, model: str, required: int, actual: int, detail: Optional[str] = None):
        self.model = model
        self.required = required
        self.actual = actual
        message = f"{model} requires at least {required} samples, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NumericDegeneracy(ForecastError):
    pass
