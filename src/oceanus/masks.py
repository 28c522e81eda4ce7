"""Staggered Grid Masks."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import torch

from oceanus.operators import shift_on

if TYPE_CHECKING:
    from oceanus.grid import RegularCartesianGrid


class Masks:
    """Active nodes at every staggered location, derived from cell centers.

    A face is active when both cells sharing it are active. Faces lying
    on a bounded wall have a single neighbouring cell and are inactive:

        y
        ^

        :           :
        ω-----v-----ω..
        |           |
        |           |
        u     c     u
        |           |
        |           |
        ω-----v-----ω..   > x

    Example, with the wall on the west side of a (3, 1, 1) bounded domain:

        c = [1, 1, 0]  ->  u = [0, 1, 0]
    """

    def __init__(self, grid: RegularCartesianGrid) -> None:
        """Instantiate the masks.

        Args:
            grid (RegularCartesianGrid): Grid, holding the center mask.
        """
        self._grid = grid

    def __repr__(self) -> str:
        """String representation of the masks."""
        active = int(self.c.sum().item())
        total = self.c.numel()
        return f"Masks: {active}/{total} active cells"

    @property
    def c(self) -> torch.Tensor:
        """Cell centers mask (c, c, c)."""
        return self._grid.mask

    @cached_property
    def u(self) -> torch.Tensor:
        """X faces mask (f, c, c)."""
        return self.c * shift_on(self._grid, self.c, x=-1)

    @cached_property
    def v(self) -> torch.Tensor:
        """Y faces mask (c, f, c)."""
        return self.c * shift_on(self._grid, self.c, y=-1)

    @cached_property
    def w(self) -> torch.Tensor:
        """Z faces mask (c, c, f)."""
        return self.c * shift_on(self._grid, self.c, z=-1)

    @cached_property
    def omega(self) -> torch.Tensor:
        """XY edges mask (f, f, c)."""
        return self.u * shift_on(self._grid, self.u, y=-1)
