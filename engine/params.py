"""
Per-model tuning overrides. Every field is optional; models read whatever the
caller left unset from the configured settings at call time.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from engine.exceptions import InvalidParameter


class ModelParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    alpha: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    beta: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    gamma: Optional[float] = Field(default=None, gt=0.0, le=1.0)
    period: Optional[int] = Field(default=None, ge=1, strict=True)
    window_size: Optional[int] = Field(default=None, ge=1, strict=True, alias="windowSize")
    change_point_prior: Optional[float] = Field(default=None, gt=0.0, alias="changePointPrior")

    @classmethod
    def coerce(cls, params: ModelParams | Mapping[str, Any] | None) -> ModelParams:
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        try:
            return cls.model_validate(dict(params))
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise InvalidParameter(f"invalid model parameters: {problems}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidParameter(f"model parameters must be a mapping, got {type(params).__name__}") from exc

    def overrides(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
