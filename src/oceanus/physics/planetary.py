"""Planetary constants."""

from __future__ import annotations

from typing import NamedTuple

from oceanus.physics.constants import (
    EARTH_ANGULAR_ROTATION,
    EARTH_GRAVITY,
    EARTH_RADIUS,
)


class PlanetaryConstants(NamedTuple):
    """Rotation rate (s⁻¹), gravitational acceleration (m.s⁻²), radius (m)."""

    rotation_rate: float
    g: float
    radius: float


def Earth() -> PlanetaryConstants:  # noqa: N802
    """Earth's constants.

    Returns:
        PlanetaryConstants: Constants.
    """
    return PlanetaryConstants(
        rotation_rate=EARTH_ANGULAR_ROTATION,
        g=EARTH_GRAVITY,
        radius=EARTH_RADIUS,
    )
