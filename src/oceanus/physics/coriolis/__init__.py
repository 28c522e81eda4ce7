"""Rotation models."""

from oceanus.physics.coriolis.base import AbstractRotation
from oceanus.physics.coriolis.beta_plane import BetaPlane
from oceanus.physics.coriolis.f_plane import FPlane
from oceanus.physics.coriolis.instantiation import instantiate_rotation
from oceanus.physics.coriolis.names import RotationName

__all__ = [
    "AbstractRotation",
    "BetaPlane",
    "FPlane",
    "RotationName",
    "instantiate_rotation",
]
