"""Test shifts and interpolations."""

import pytest
import torch

from oceanus.boundary_conditions import BoundaryConditions, fill_halo_regions
from oceanus.fields.core import Field
from oceanus.grid import RegularCartesianGrid, Topology
from oceanus.operators import (
    active_weighted_interpolation_xy_cfc,
    active_weighted_interpolation_xy_fcc,
    interpolate_z_at_face,
    shift,
)


@pytest.mark.parametrize(
    ("offset", "topology", "expected"),
    [
        (1, Topology.BOUNDED, [2, 3, 4, 0]),
        (-1, Topology.BOUNDED, [0, 1, 2, 3]),
        (1, Topology.PERIODIC, [2, 3, 4, 1]),
        (-1, Topology.PERIODIC, [4, 1, 2, 3]),
        (1, Topology.FLAT, [1, 2, 3, 4]),
        (5, Topology.BOUNDED, [0, 0, 0, 0]),
    ],
)
def test_shift(offset: int, topology: Topology, expected: list) -> None:
    """Test shift(q)[i] = q[i + offset]."""
    q = torch.arange(1, 5)
    assert shift(q, offset, 0, topology).tolist() == expected


def test_vertical_face_interpolation() -> None:
    """Test averages onto vertical faces, halos included."""
    grid = RegularCartesianGrid((1, 1, 3), (1.0, 1.0, 3.0))
    field = Field(grid)
    field.set(torch.tensor([1.0, 2.0, 4.0], dtype=torch.float64))
    fill_halo_regions(field, BoundaryConditions())
    faces = [interpolate_z_at_face(field, k).item() for k in range(4)]
    assert faces == [1.0, 1.5, 3.0, 4.0]


def test_interpolation_of_uniform_values() -> None:
    """Test that uniform values are preserved on periodic grids."""
    grid = RegularCartesianGrid(
        (3, 3, 1),
        (1.0, 1.0, 1.0),
        topology=("periodic", "periodic", "flat"),
    )
    ones = torch.ones(grid.interior_shape, dtype=torch.float64)
    torch.testing.assert_close(
        active_weighted_interpolation_xy_fcc(grid, ones),
        ones,
    )
    torch.testing.assert_close(
        active_weighted_interpolation_xy_cfc(grid, ones),
        ones,
    )


def test_four_points_average() -> None:
    """Test the four neighbours used at u-locations."""
    grid = RegularCartesianGrid(
        (4, 4, 1),
        (1.0, 1.0, 1.0),
        topology=("periodic", "periodic", "flat"),
    )
    v = torch.zeros(grid.interior_shape, dtype=torch.float64)
    v[1, 2, 0] = 4.0
    result = active_weighted_interpolation_xy_fcc(grid, v)
    # v[1, 2] neighbours u-locations (1, 1), (1, 2), (2, 1) and (2, 2).
    expected = torch.zeros_like(v)
    expected[1:3, 1:3, 0] = 1.0
    torch.testing.assert_close(result, expected)
