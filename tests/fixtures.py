"""Useful fixtures."""

import pytest
import torch

from oceanus.architectures import Architecture, get_device
from oceanus.boundary_conditions import BoundaryConditions
from oceanus.fields.sets import VelocityFields
from oceanus.grid import RegularCartesianGrid
from oceanus.models.core import Model
from oceanus.models.instantiation import build_model


@pytest.fixture
def arch(request: pytest.FixtureRequest) -> Architecture:
    """Architecture to run tests on."""
    if request.config.getoption("--cpu") or not torch.cuda.is_available():
        return Architecture.CPU
    return Architecture.GPU


@pytest.fixture
def device(arch: Architecture) -> torch.device:
    """Device matching the architecture."""
    return get_device(arch)


@pytest.fixture
def channel_grid(device: torch.device) -> RegularCartesianGrid:
    """Channel: periodic in x, walls in y, 6 layers."""
    return RegularCartesianGrid(
        (4, 5, 6),
        (4e3, 5e3, 600.0),
        topology=("periodic", "bounded", "bounded"),
        dtype=torch.float64,
        device=device,
    )


@pytest.fixture
def channel_bcs() -> BoundaryConditions:
    """Boundary conditions of the channel."""
    return BoundaryConditions(x="periodic", y="bounded")


@pytest.fixture
def velocities(channel_grid: RegularCartesianGrid) -> VelocityFields:
    """Random velocities on the channel grid."""
    velocities = VelocityFields.from_grid(
        channel_grid,
        dtype=channel_grid.dtype,
        device=channel_grid.device,
    )
    for velocity in velocities:
        velocity.set(
            torch.rand(
                channel_grid.interior_shape,
                dtype=channel_grid.dtype,
                device=channel_grid.device,
            )
            - 0.5,
        )
    return velocities


@pytest.fixture
def model(arch: Architecture) -> Model:
    """Small default model."""
    return build_model((4, 4, 8), (1e3, 1e3, 100.0), arch=arch)
