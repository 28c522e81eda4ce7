"""Boundary conditions and halo filling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict

from oceanus.grid import AXES, Staggering, Topology

if TYPE_CHECKING:
    import torch

    from oceanus.fields.core import Field
    from oceanus.grid import GridAxis


class BoundaryConditions(BaseModel):
    """Boundary conditions of the domain.

    Horizontal conditions must agree with the grid topology.
    """

    model_config = ConfigDict(frozen=True)

    x: Literal["periodic", "bounded"] = "periodic"
    y: Literal["periodic", "bounded"] = "periodic"
    top: Literal["rigid_lid"] = "rigid_lid"
    bottom: Literal["free_slip", "no_slip"] = "free_slip"


def _is_tangential_velocity(field: Field, dim: int) -> bool:
    """Whether a field is a velocity tangential to walls normal to dim.

    Args:
        field (Field): Field.
        dim (int): Wall normal dimension.

    Returns:
        bool: True if the field is a horizontal velocity for dim=2.
    """
    faces = [i for i, s in enumerate(field.location) if s == Staggering.FACE]
    return len(faces) == 1 and faces[0] != dim


def _fill_periodic(data: torch.Tensor, axis: GridAxis, dim: int) -> None:
    """Copy opposite interior values into halos.

    Args:
        data (torch.Tensor): Field data.
        axis (GridAxis): Axis.
        dim (int): Dimension.
    """
    h, n = axis.halo, axis.n
    data.narrow(dim, 0, h).copy_(data.narrow(dim, n, h))
    data.narrow(dim, n + h, h).copy_(data.narrow(dim, h, h))


def _fill_bounded(
    data: torch.Tensor,
    axis: GridAxis,
    dim: int,
    staggering: Staggering,
    sign_low: float,
) -> None:
    """Fill halos beyond walls.

    Cell-centered values are mirrored (no flux). Values on faces normal to
    the wall are zeroed (no penetration).

    Args:
        data (torch.Tensor): Field data.
        axis (GridAxis): Axis.
        dim (int): Dimension.
        staggering (Staggering): Field staggering along dim.
        sign_low (float): Mirroring sign on the low side (-1 for no slip).
    """
    h, n = axis.halo, axis.n
    if staggering == Staggering.FACE:
        data.narrow(dim, 0, h).zero_()
        data.narrow(dim, n + h, h).zero_()
        return
    for i in range(h):
        low = data.narrow(dim, h + i, 1)
        data.narrow(dim, h - 1 - i, 1).copy_(sign_low * low)
        high = data.narrow(dim, n + h - 1 - i, 1)
        data.narrow(dim, n + h + i, 1).copy_(high)


def fill_halo_regions(
    field: Field,
    boundary_conditions: BoundaryConditions,
) -> None:
    """Fill the halos of a field, along x, then y, then z.

    Must only be called once every kernel writing into the field has
    completed.

    Args:
        field (Field): Field.
        boundary_conditions (BoundaryConditions): Boundary conditions.
    """
    data = field.data
    for dim, (name, axis) in enumerate(zip(AXES, field.grid.axes)):
        if axis.halo == 0 or axis.topology == Topology.FLAT:
            continue
        if axis.topology == Topology.PERIODIC:
            _fill_periodic(data, axis, dim)
            continue
        sign_low = 1.0
        if (
            name == "z"
            and boundary_conditions.bottom == "no_slip"
            and _is_tangential_velocity(field, dim)
        ):
            sign_low = -1.0
        _fill_bounded(data, axis, dim, field.location[dim], sign_low)
