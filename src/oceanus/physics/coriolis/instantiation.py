"""Instantiate rotation models from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oceanus.physics.coriolis.beta_plane import BetaPlane
from oceanus.physics.coriolis.f_plane import FPlane
from oceanus.physics.coriolis.names import RotationName
from oceanus.physics.planetary import Earth

if TYPE_CHECKING:
    import torch

    from oceanus.configs.physics import RotationConfig
    from oceanus.physics.coriolis.base import AbstractRotation
    from oceanus.physics.planetary import PlanetaryConstants


def instantiate_rotation(
    rotation_config: RotationConfig,
    dtype: torch.dtype | str | None = None,
    constants: PlanetaryConstants | None = None,
) -> AbstractRotation:
    """Instantiate the rotation model.

    Unset rotation rates and radii are taken from the planet.

    Args:
        rotation_config (RotationConfig): Rotation configuration.
        dtype (torch.dtype | str | None, optional): Coefficients
            precision. Defaults to None.
        constants (PlanetaryConstants | None, optional): Planetary
            constants. Defaults to None (Earth).

    Raises:
        ValueError: If the rotation type is not recognized.

    Returns:
        AbstractRotation: Rotation model.
    """
    constants = constants or Earth()
    if rotation_config.type == RotationName.NONE:
        return FPlane(f=0, dtype=dtype)
    rotation_rate = rotation_config.rotation_rate
    if rotation_rate is None:
        rotation_rate = constants.rotation_rate
    if rotation_config.type == RotationName.F_PLANE:
        return FPlane(
            f=rotation_config.f,
            rotation_rate=rotation_rate,
            latitude=rotation_config.latitude,
            dtype=dtype,
        )
    if rotation_config.type == RotationName.BETA_PLANE:
        return BetaPlane(
            f0=rotation_config.f0,
            beta=rotation_config.beta,
            rotation_rate=rotation_rate,
            latitude=rotation_config.latitude,
            radius=rotation_config.radius or constants.radius,
            dtype=dtype,
        )
    msg = f"Unrecognized rotation type: {rotation_config.type}."
    raise ValueError(msg)
