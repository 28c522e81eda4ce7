"""Beta-Plane approximation."""

from __future__ import annotations

import math

import torch

from oceanus.exceptions import InvalidRotationParametersError
from oceanus.physics.constants import EARTH_ANGULAR_ROTATION, EARTH_RADIUS
from oceanus.physics.coriolis.base import AbstractRotation
from oceanus.physics.coriolis.names import RotationName


class BetaPlane(AbstractRotation):
    """Beta Plane : f  = f0 + βy.

    Specified either with f0 and beta, or with the planet rotation rate,
    the reference latitude and the planet radius:

    ├── f0 = 2Ω sin(φ)
    └── β = 2Ω cos(φ) / R
    """

    _type = RotationName.BETA_PLANE
    _coefficients = ("_f0", "_beta")

    def __init__(
        self,
        *,
        f0: float | None = None,
        beta: float | None = None,
        rotation_rate: float = EARTH_ANGULAR_ROTATION,
        latitude: float | None = None,
        radius: float = EARTH_RADIUS,
        dtype: torch.dtype | str | None = None,
    ) -> None:
        """Instantiate the beta-plane.

        Args:
            f0 (float | None, optional): Coriolis parameter at y = 0
                (s⁻¹). Defaults to None.
            beta (float | None, optional): Coriolis parameter gradient
                (m⁻¹.s⁻¹). Defaults to None.
            rotation_rate (float, optional): Planet angular rotation
                (rad.s⁻¹). Defaults to EARTH_ANGULAR_ROTATION.
            latitude (float | None, optional): Reference latitude
                (degrees). Defaults to None.
            radius (float, optional): Planet radius (m).
                Defaults to EARTH_RADIUS.
            dtype (torch.dtype | str | None, optional): Coefficients
                precision. Defaults to None.

        Raises:
            InvalidRotationParametersError: If parameters from both groups
                are given, or if no group is complete.
        """
        super().__init__(dtype)
        with_coefficients = f0 is not None and beta is not None
        any_coefficient = f0 is not None or beta is not None
        with_planet = latitude is not None
        if (with_planet and any_coefficient) or not (
            with_coefficients or with_planet
        ):
            msg = (
                "Either both f0 and beta must be specified, *or* "
                "rotation_rate, latitude and radius. Got "
                f"f0={f0}, beta={beta}, rotation_rate={rotation_rate}, "
                f"latitude={latitude}, radius={radius}."
            )
            raise InvalidRotationParametersError(msg)
        if with_planet:
            phi = math.radians(latitude)
            f0 = 2 * rotation_rate * math.sin(phi)
            beta = 2 * rotation_rate * math.cos(phi) / radius
        self._f0 = self._cast(f0)
        self._beta = self._cast(beta)

    def __repr__(self) -> str:
        """String representation."""
        dtype = str(self.dtype).removeprefix("torch.")
        return f"BetaPlane{{{dtype}}}(f₀={self._f0:.2e}, β={self._beta:.2e})"

    @property
    def f0(self) -> float:
        """Coriolis parameter at y = 0 (s⁻¹)."""
        return self._f0

    @property
    def beta(self) -> float:
        """Coriolis parameter gradient (m⁻¹.s⁻¹)."""
        return self._beta

    def _f(self, y: torch.Tensor) -> torch.Tensor:
        return self._f0 + self._beta * y
