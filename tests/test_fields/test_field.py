"""Test fields."""

import pytest
import torch

from oceanus.exceptions import InvalidFieldDataError
from oceanus.fields.core import CELL, EDGE_XY, FACE_X, Field
from oceanus.grid import RegularCartesianGrid


@pytest.fixture
def grid() -> RegularCartesianGrid:
    """Grid."""
    return RegularCartesianGrid((3, 4, 5), (3.0, 4.0, 5.0))


def test_shapes(grid: RegularCartesianGrid) -> None:
    """Test data and interior shapes."""
    field = Field(grid, name="T")
    assert field.data.shape == (5, 6, 7)
    assert field.interior.shape == (3, 4, 5)
    assert (field.data == 0).all()
    assert field.dtype == grid.dtype


def test_interior_is_a_view(grid: RegularCartesianGrid) -> None:
    """Test that writing into the interior writes into data."""
    field = Field(grid)
    field.interior[0, 0, 0] = 1.0
    assert field.data[1, 1, 1] == 1.0
    assert field.data.sum() == 1.0


def test_set_scalar(grid: RegularCartesianGrid) -> None:
    """Test that scalars only set the interior."""
    field = Field(grid)
    field.set(2.0)
    assert (field.interior == 2.0).all()
    assert field.data.sum() == 2.0 * 3 * 4 * 5


def test_set_function(grid: RegularCartesianGrid) -> None:
    """Test setting a function of the node coordinates."""
    field = Field(grid, FACE_X)
    field.set(lambda x, y, z: x + 0 * y + 0 * z)  # noqa: ARG005
    expected = grid.xF[:-1].view(-1, 1, 1).expand(3, 4, 5)
    torch.testing.assert_close(field.interior, expected)


def test_nodes_follow_location(grid: RegularCartesianGrid) -> None:
    """Test node coordinates at each location."""
    x, y, z = Field(grid, EDGE_XY).nodes()
    torch.testing.assert_close(x.flatten(), grid.xF[:-1])
    torch.testing.assert_close(y.flatten(), grid.yF[:-1])
    torch.testing.assert_close(z.flatten(), grid.zC)
    assert x.shape == (3, 1, 1)
    assert z.shape == (1, 1, 5)


def test_set_tensor(grid: RegularCartesianGrid) -> None:
    """Test setting interior or data shaped tensors."""
    field = Field(grid, CELL)
    values = torch.rand((3, 4, 5), dtype=torch.float64)
    field.set(values)
    torch.testing.assert_close(field.interior, values)
    data = torch.rand((5, 6, 7), dtype=torch.float64)
    field.set(data)
    torch.testing.assert_close(field.data, data)


def test_set_invalid_tensor(grid: RegularCartesianGrid) -> None:
    """Test that mismatching tensors raise."""
    field = Field(grid)
    with pytest.raises(InvalidFieldDataError):
        field.set(torch.ones((2, 2, 2), dtype=torch.float64))


def test_shape_never_changes(grid: RegularCartesianGrid) -> None:
    """Test that data is written in place."""
    field = Field(grid)
    data = field.data
    field.fill(1.0)
    field.set(torch.zeros((3, 4, 5), dtype=torch.float64))
    assert field.data is data
    assert field.data.shape == (5, 6, 7)


def test_repr(grid: RegularCartesianGrid) -> None:
    """Test string representation."""
    assert repr(Field(grid, FACE_X, name="u")).startswith("u at fcc")
