"""Constant Coriolis parameter."""

from __future__ import annotations

import math

import torch

from oceanus.exceptions import InvalidRotationParametersError
from oceanus.physics.constants import EARTH_ANGULAR_ROTATION
from oceanus.physics.coriolis.base import AbstractRotation
from oceanus.physics.coriolis.names import RotationName


class FPlane(AbstractRotation):
    """F-Plane: f = f₀.

    Specified either with f, or with a rotation rate and a latitude:
    f = 2Ω sin(φ).
    """

    _type = RotationName.F_PLANE
    _coefficients = ("_f0",)

    def __init__(
        self,
        *,
        f: float | None = None,
        rotation_rate: float = EARTH_ANGULAR_ROTATION,
        latitude: float | None = None,
        dtype: torch.dtype | str | None = None,
    ) -> None:
        """Instantiate the f-plane.

        Args:
            f (float | None, optional): Coriolis parameter (s⁻¹).
                Defaults to None.
            rotation_rate (float, optional): Planet angular rotation
                (rad.s⁻¹). Defaults to EARTH_ANGULAR_ROTATION.
            latitude (float | None, optional): Latitude (degrees).
                Defaults to None.
            dtype (torch.dtype | str | None, optional): Coefficients
                precision. Defaults to None.

        Raises:
            InvalidRotationParametersError: If both or neither of f and
                latitude are given.
        """
        super().__init__(dtype)
        if (f is None) == (latitude is None):
            msg = (
                "Either f must be specified, *or* rotation_rate and "
                f"latitude. Got f={f}, rotation_rate={rotation_rate}, "
                f"latitude={latitude}."
            )
            raise InvalidRotationParametersError(msg)
        if f is None:
            f = 2 * rotation_rate * math.sin(math.radians(latitude))
        self._f0 = self._cast(f)

    def __repr__(self) -> str:
        """String representation."""
        dtype = str(self.dtype).removeprefix("torch.")
        return f"FPlane{{{dtype}}}(f={self._f0:.2e})"

    @property
    def f(self) -> float:
        """Coriolis parameter (s⁻¹)."""
        return self._f0

    def _f(self, y: torch.Tensor) -> torch.Tensor:
        return torch.full_like(y, self._f0)
