"""
Enumerations for the forecasting models exposed by the quota usage engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from engine.exceptions import InvalidParameter


class ModelName(str, Enum):
    linear = "linear"
    exponential = "exponential"
    moving_average = "movingAverage"
    holt_winters = "holtWinters"
    seasonal = "seasonal"
    change_point = "changePoint"

    @classmethod
    def parse(cls, name: ModelName | str) -> ModelName:
        # wire value ("movingAverage") or member name ("moving_average")
        if isinstance(name, cls):
            return name
        text = str(name).strip()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise InvalidParameter(
            f"unknown forecast model {name!r}; expected one of {[m.value for m in cls]}"
        )

    @property
    def is_seasonal(self) -> bool:
        return self in (ModelName.holt_winters, ModelName.seasonal)

    @property
    def is_flat(self) -> bool:
        return self in (ModelName.exponential, ModelName.moving_average)
