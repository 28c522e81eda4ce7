"""Physics configuration."""

# ruff: noqa: TC001, UP007
from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, PositiveFloat

from oceanus.physics.constants import (
    EARTH_ANGULAR_ROTATION,
    EARTH_GRAVITY,
    EARTH_RADIUS,
)
from oceanus.physics.coriolis.names import RotationName
from oceanus.utils.names import NamedObjectConfig


class PlanetConfig(BaseModel):
    """Planetary constants configuration."""

    rotation_rate: float = EARTH_ANGULAR_ROTATION
    gravitational_acceleration: PositiveFloat = EARTH_GRAVITY
    radius: PositiveFloat = EARTH_RADIUS


class FPlaneConfig(
    NamedObjectConfig[RotationName],
    BaseModel,
):
    """F-plane configuration."""

    type: Literal[RotationName.F_PLANE]
    f: Optional[float] = None
    rotation_rate: Optional[float] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)


class BetaPlaneConfig(
    NamedObjectConfig[RotationName],
    BaseModel,
):
    """Beta-plane configuration."""

    type: Literal[RotationName.BETA_PLANE]
    f0: Optional[float] = None
    beta: Optional[float] = None
    rotation_rate: Optional[float] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    radius: Optional[PositiveFloat] = None


class NoRotationConfig(
    NamedObjectConfig[RotationName],
    BaseModel,
):
    """Non-rotating configuration."""

    type: Literal[RotationName.NONE]


RotationConfig = Union[FPlaneConfig, BetaPlaneConfig, NoRotationConfig]


class EquationOfStateConfig(BaseModel):
    """Linear equation of state configuration."""

    rho_0: PositiveFloat = 1027
    beta_T: float = 1.67e-4  # noqa: N815
    beta_S: float = 7.8e-4  # noqa: N815
    T_0: float = 283  # noqa: N815
    S_0: float = 35  # noqa: N815


class PhysicsConfig(BaseModel):
    """Physics configuration."""

    planet: PlanetConfig = Field(default_factory=PlanetConfig)
    rotation: RotationConfig = Field(
        default_factory=lambda: NoRotationConfig(type=RotationName.NONE),
        discriminator="type",
    )
    equation_of_state: EquationOfStateConfig = Field(
        default_factory=EquationOfStateConfig,
    )
