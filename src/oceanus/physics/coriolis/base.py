"""Base class for rotation models."""

from __future__ import annotations

import copy
from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, ClassVar

import torch

from oceanus.operators import (
    active_weighted_interpolation_xy_cfc,
    active_weighted_interpolation_xy_fcc,
)
from oceanus.physics.coriolis.names import RotationName
from oceanus.specs import defaults
from oceanus.utils.names import NamedObject

if TYPE_CHECKING:
    from typing_extensions import Self

    from oceanus.fields.sets import VelocityFields
    from oceanus.grid import RegularCartesianGrid


class AbstractRotation(NamedObject[RotationName], metaclass=ABCMeta):
    """Rotation model: f = f(y).

    Rotation models are immutable. Every query is evaluated over the whole
    interior of the grid and returns a (Nx, Ny, Nz)-shaped tensor.

    └── Coriolis force: -f x U, with U = (u, v, w) and f pointing upward.
    """

    _coefficients: ClassVar[tuple[str, ...]] = ()

    def __init__(self, dtype: torch.dtype | str | None = None) -> None:
        """Instantiate the rotation.

        Args:
            dtype (torch.dtype | str | None, optional): Floating point
                precision of the coefficients. Defaults to None.
        """
        self._dtype = defaults.get_dtype(dtype)

    @property
    def dtype(self) -> torch.dtype:
        """Coefficients precision."""
        return self._dtype

    def _cast(self, value: float) -> float:
        """Round a value to the model precision.

        Args:
            value (float): Value.

        Returns:
            float: Rounded value.
        """
        return torch.tensor(value, dtype=self._dtype).item()

    def to(self, dtype: torch.dtype | str) -> Self:
        """Copy of the rotation with coefficients rounded to dtype.

        Args:
            dtype (torch.dtype | str): Floating point precision.

        Returns:
            Self: Rotation in the given precision.
        """
        rotation = copy.copy(self)
        rotation._dtype = defaults.get_dtype(dtype)  # noqa: SLF001
        for name in self._coefficients:
            value = rotation._cast(getattr(self, name))  # noqa: SLF001
            setattr(rotation, name, value)
        return rotation

    @abstractmethod
    def _f(self, y: torch.Tensor) -> torch.Tensor:
        """Coriolis parameter at northward coordinates y.

        Args:
            y (torch.Tensor): Northward coordinates.

        Returns:
            torch.Tensor: Coriolis parameter, y-shaped.
        """

    @staticmethod
    def _expand(
        grid: RegularCartesianGrid,
        f: torch.Tensor,
    ) -> torch.Tensor:
        return f.view(1, -1, 1).expand(grid.interior_shape)

    def coriolis_parameter(self, grid: RegularCartesianGrid) -> torch.Tensor:
        """Coriolis parameter at cell corners (f, f, c).

        Args:
            grid (RegularCartesianGrid): Grid.

        Returns:
            torch.Tensor: (Nx, Ny, Nz)-shaped Coriolis parameter.
        """
        return self._expand(grid, self._f(grid.yF[: grid.Ny]))

    def x_force(
        self,
        grid: RegularCartesianGrid,
        velocities: VelocityFields,
    ) -> torch.Tensor:
        """Eastward Coriolis force, at u-locations (f, c, c).

        └── f_x = - f(y) ℑxy(v)

        Args:
            grid (RegularCartesianGrid): Grid.
            velocities (VelocityFields): Velocities.

        Returns:
            torch.Tensor: (Nx, Ny, Nz)-shaped force.
        """
        v = velocities.v.interior
        f = self._expand(grid, self._f(grid.yC)).to(dtype=v.dtype)
        return -f * active_weighted_interpolation_xy_fcc(grid, v)

    def y_force(
        self,
        grid: RegularCartesianGrid,
        velocities: VelocityFields,
    ) -> torch.Tensor:
        """Northward Coriolis force, at v-locations (c, f, c).

        └── f_y = f(y) ℑxy(u)

        Args:
            grid (RegularCartesianGrid): Grid.
            velocities (VelocityFields): Velocities.

        Returns:
            torch.Tensor: (Nx, Ny, Nz)-shaped force.
        """
        u = velocities.u.interior
        f = self._expand(grid, self._f(grid.yF[: grid.Ny])).to(dtype=u.dtype)
        return f * active_weighted_interpolation_xy_cfc(grid, u)

    def z_force(
        self,
        grid: RegularCartesianGrid,
        velocities: VelocityFields,
    ) -> torch.Tensor:
        """Vertical Coriolis force, at w-locations (c, c, f).

        The traditional approximation drops the horizontal component of the
        rotation vector: the vertical force vanishes.

        Args:
            grid (RegularCartesianGrid): Grid.
            velocities (VelocityFields): Velocities.

        Returns:
            torch.Tensor: (Nx, Ny, Nz)-shaped zeros.
        """
        return torch.zeros_like(velocities.w.interior)
