"""Interpolation operators on staggered grids.

Operators act on interior tensors, (Nx, Ny, Nz)-shaped, unless stated
otherwise. Neighbours are reached with `shift`, which wraps periodic axes
and zero-fills beyond bounded axes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch

from oceanus.grid import AXES, Topology

if TYPE_CHECKING:
    from oceanus.fields.core import Field
    from oceanus.grid import RegularCartesianGrid


def shift(
    q: torch.Tensor,
    offset: int,
    dim: int,
    topology: Topology,
) -> torch.Tensor:
    """Shift a tensor so that shift(q)[i] = q[i + offset] along dim.

    Example:
    shift(torch.arange(1, 5), 1, 0, Topology.BOUNDED)
    >>> tensor([2, 3, 4, 0])

    Args:
        q (torch.Tensor): Tensor.
        offset (int): Offset.
        dim (int): Dimension.
        topology (Topology): Topology along dim.

    Returns:
        torch.Tensor: Shifted tensor.
    """
    if offset == 0 or topology == Topology.FLAT:
        return q
    if topology == Topology.PERIODIC:
        return torch.roll(q, shifts=-offset, dims=dim)
    n = q.shape[dim]
    shifted = torch.zeros_like(q)
    if abs(offset) >= n:
        return shifted
    length = n - abs(offset)
    src, dst = (offset, 0) if offset > 0 else (0, -offset)
    shifted.narrow(dim, dst, length).copy_(q.narrow(dim, src, length))
    return shifted


def shift_on(
    grid: RegularCartesianGrid,
    q: torch.Tensor,
    **offsets: int,
) -> torch.Tensor:
    """Shift an interior tensor along several grid axes.

    Args:
        grid (RegularCartesianGrid): Grid.
        q (torch.Tensor): (Nx, Ny, Nz)-shaped tensor.
        **offsets (int): Offsets per axis name, e.g. x=-1, y=1.

    Returns:
        torch.Tensor: Shifted tensor.
    """
    for name, offset in offsets.items():
        dim = AXES.index(name)
        q = shift(q, offset, dim, grid.axis(name).topology)
    return q


def interpolate_z_at_face(field: Field, k: int) -> torch.Tensor:
    """Average the two cell values adjacent to vertical face k.

    Faces 0 and Nz use the halo values below and above the interior.

    Args:
        field (Field): Cell-centered field, halo filled.
        k (int): Face index, from 0 (bottom) to Nz (surface).

    Returns:
        torch.Tensor: (Nx, Ny)-shaped face values.
    """
    x, y, z = field.grid.axes
    columns = field.data[x.halo : x.halo + x.n, y.halo : y.halo + y.n]
    above = z.halo + k
    return 0.5 * (columns[..., above - 1] + columns[..., above])


def _active_weighted_average(
    terms: list[tuple[torch.Tensor, torch.Tensor]],
) -> torch.Tensor:
    """Average values, weighted by their activity mask.

    Args:
        terms (list[tuple[torch.Tensor, torch.Tensor]]): (value, mask) pairs.

    Returns:
        torch.Tensor: Average, zero where no term is active.
    """
    num = sum(value * mask for value, mask in terms)
    den = sum(mask for _, mask in terms)
    return torch.where(den > 0, num / den.clamp(min=1), torch.zeros_like(num))


def active_weighted_interpolation_xy_fcc(
    grid: RegularCartesianGrid,
    v: torch.Tensor,
) -> torch.Tensor:
    """Interpolate v-located (c, f, c) values onto u-locations (f, c, c).

    Args:
        grid (RegularCartesianGrid): Grid.
        v (torch.Tensor): (Nx, Ny, Nz)-shaped values at v-locations.

    Returns:
        torch.Tensor: (Nx, Ny, Nz)-shaped values at u-locations.
    """
    m = grid.masks.v.to(dtype=v.dtype)
    terms = [
        (
            shift_on(grid, v, x=dx, y=dy),
            shift_on(grid, m, x=dx, y=dy),
        )
        for dx in (-1, 0)
        for dy in (0, 1)
    ]
    return _active_weighted_average(terms)


def active_weighted_interpolation_xy_cfc(
    grid: RegularCartesianGrid,
    u: torch.Tensor,
) -> torch.Tensor:
    """Interpolate u-located (f, c, c) values onto v-locations (c, f, c).

    Args:
        grid (RegularCartesianGrid): Grid.
        u (torch.Tensor): (Nx, Ny, Nz)-shaped values at u-locations.

    Returns:
        torch.Tensor: (Nx, Ny, Nz)-shaped values at v-locations.
    """
    m = grid.masks.u.to(dtype=u.dtype)
    terms = [
        (
            shift_on(grid, u, x=dx, y=dy),
            shift_on(grid, m, x=dx, y=dy),
        )
        for dx in (0, 1)
        for dy in (-1, 0)
    ]
    return _active_weighted_average(terms)
