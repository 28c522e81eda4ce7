"""Test active nodes masks."""

import torch

from oceanus.grid import RegularCartesianGrid


def test_walls_are_inactive() -> None:
    """Test that faces on bounded walls are inactive."""
    grid = RegularCartesianGrid(
        (3, 2, 2),
        (3.0, 2.0, 2.0),
        topology=("bounded", "periodic", "bounded"),
    )
    masks = grid.masks
    assert (masks.c == 1).all()
    assert (masks.u[0] == 0).all()
    assert (masks.u[1:] == 1).all()
    assert (masks.v == 1).all()
    assert (masks.w[..., 0] == 0).all()
    assert (masks.w[..., 1] == 1).all()


def test_land_cells() -> None:
    """Test faces next to land cells."""
    mask = torch.tensor([1.0, 1.0, 0.0]).view(3, 1, 1)
    grid = RegularCartesianGrid(
        (3, 1, 1),
        (3.0, 1.0, 1.0),
        topology=("bounded", "flat", "flat"),
        mask=mask,
    )
    masks = grid.masks
    torch.testing.assert_close(
        masks.u.flatten(),
        torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64),
    )
    torch.testing.assert_close(masks.omega, masks.u)
    assert repr(masks) == "Masks: 2/3 active cells"


def test_masks_are_cached() -> None:
    """Test that masks are computed once per grid."""
    grid = RegularCartesianGrid((2, 2, 2), (1.0, 1.0, 1.0))
    assert grid.masks is grid.masks
    assert grid.masks.u is grid.masks.u
