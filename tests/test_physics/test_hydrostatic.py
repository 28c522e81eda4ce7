"""Test hydrostatic pressure integration."""

from __future__ import annotations

import pytest
import torch

from oceanus.architectures import Architecture
from oceanus.boundary_conditions import BoundaryConditions, fill_halo_regions
from oceanus.exceptions import InvalidGridError
from oceanus.fields.core import Field
from oceanus.grid import RegularCartesianGrid
from oceanus.models.instantiation import build_model
from oceanus.physics.hydrostatic import update_hydrostatic_pressure


@pytest.fixture
def grid(device: torch.device) -> RegularCartesianGrid:
    """Grid with 4 layers, 10 m thick."""
    return RegularCartesianGrid((3, 2, 4), (3.0, 2.0, 40.0), device=device)


@pytest.fixture
def buoyancy(grid: RegularCartesianGrid) -> Field:
    """Random buoyancy, halo filled."""
    b = Field(grid, name="b")
    b.set(torch.rand(grid.interior_shape, dtype=grid.dtype) - 0.5)
    fill_halo_regions(b, BoundaryConditions())
    return b


def test_top_down_recurrence(
    grid: RegularCartesianGrid,
    buoyancy: Field,
    arch: Architecture,
) -> None:
    """Test the recurrence from the surface face downwards."""
    p = Field(grid, name="pHY′")
    update_hydrostatic_pressure(p, buoyancy, arch).wait()

    nz, h, dz = grid.Nz, grid.z.halo, 10.0
    columns = buoyancy.data[h:-h, h:-h]

    def b_face(k: int) -> torch.Tensor:
        return 0.5 * (columns[..., h + k - 1] + columns[..., h + k])

    torch.testing.assert_close(p.interior[..., nz - 1], -b_face(nz) * dz)
    for k in range(nz - 1):
        torch.testing.assert_close(
            p.interior[..., k],
            p.interior[..., k + 1] - b_face(k + 1) * dz,
        )


def test_uniform_buoyancy(
    grid: RegularCartesianGrid,
    arch: Architecture,
) -> None:
    """Test pHY′ = -b Δz (Nz - k) for a uniform buoyancy."""
    b = Field(grid, name="b")
    b.fill(0.5)
    p = Field(grid, name="pHY′")
    update_hydrostatic_pressure(p, b, arch).wait()
    expected = -0.5 * 10.0 * torch.tensor([4.0, 3.0, 2.0, 1.0])
    expected = expected.to(device=grid.device, dtype=grid.dtype)
    torch.testing.assert_close(p.interior, expected.expand_as(p.interior))


def test_halos_are_not_written(
    grid: RegularCartesianGrid,
    buoyancy: Field,
    arch: Architecture,
) -> None:
    """Test that only the interior of pHY′ is written."""
    p = Field(grid, name="pHY′")
    p.fill(7.0)
    update_hydrostatic_pressure(p, buoyancy, arch).wait()
    halo = p.data.clone()
    halo[p.interior_slices] = 7.0
    assert (halo == 7.0).all()


def test_idempotence(
    grid: RegularCartesianGrid,
    buoyancy: Field,
    arch: Architecture,
) -> None:
    """Test that integrating twice gives the same output."""
    p = Field(grid, name="pHY′")
    update_hydrostatic_pressure(p, buoyancy, arch).wait()
    first = p.data.clone()
    update_hydrostatic_pressure(p, buoyancy, arch).wait()
    assert torch.equal(p.data, first)


def test_flat_vertical_axis_is_no_op(
    device: torch.device,
    arch: Architecture,
) -> None:
    """Test that pHY′ is untouched on flat vertical grids."""
    grid = RegularCartesianGrid(
        (3, 2, 1),
        (3.0, 2.0, 1.0),
        topology=("periodic", "periodic", "flat"),
        device=device,
    )
    b = Field(grid, name="b")
    b.set(torch.rand(grid.interior_shape, dtype=grid.dtype))
    p = Field(grid, name="pHY′")
    p.set(torch.rand(grid.interior_shape, dtype=grid.dtype))
    before = p.data.clone()
    event = update_hydrostatic_pressure(p, b, arch)
    assert event.done
    event.wait()
    assert torch.equal(p.data, before)


def test_vertical_halo_is_required(arch: Architecture) -> None:
    """Test that models without vertical halo are rejected."""
    with pytest.raises(InvalidGridError, match="halo of at least 1"):
        build_model((2, 2, 3), (1.0, 1.0, 30.0), halo=0, arch=arch)


@pytest.mark.gpu
def test_gpu_matches_cpu() -> None:
    """Test that both architectures give the same pressure."""
    results = []
    archs = ((Architecture.CPU, "cpu"), (Architecture.GPU, "cuda"))
    for arch, device in archs:
        grid = RegularCartesianGrid(
            (3, 2, 4),
            (3.0, 2.0, 40.0),
            device=device,
        )
        b = Field(grid)
        b.set(torch.linspace(-1, 1, 24, dtype=grid.dtype).view(3, 2, 4))
        fill_halo_regions(b, BoundaryConditions())
        p = Field(grid)
        update_hydrostatic_pressure(p, b, arch).wait()
        results.append(p.interior.cpu())
    torch.testing.assert_close(results[0], results[1])
