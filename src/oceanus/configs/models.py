"""Model Configuration."""

# ruff: noqa: UP007
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, NonNegativeFloat, NonNegativeInt


class ModelConfig(BaseModel):
    """Model configuration."""

    arch: str = "cpu"
    float_type: Literal["float32", "float64"] = "float64"
    viscosity: NonNegativeFloat = 1.05e-6
    nu_h: Optional[NonNegativeFloat] = None
    nu_v: Optional[NonNegativeFloat] = None
    diffusivity: NonNegativeFloat = 1.43e-7
    kappa_h: Optional[NonNegativeFloat] = None
    kappa_v: Optional[NonNegativeFloat] = None
    start_time: float = 0
    iteration: NonNegativeInt = 0
    initial_temperature: Optional[float] = None
    initial_salinity: Optional[float] = None
