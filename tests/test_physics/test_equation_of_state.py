"""Test the linear equation of state."""

import pytest
import torch

from oceanus.fields.sets import TracerFields
from oceanus.grid import RegularCartesianGrid
from oceanus.physics.equation_of_state import LinearEquationOfState
from oceanus.physics.planetary import Earth


@pytest.fixture
def tracers(channel_grid: RegularCartesianGrid) -> TracerFields:
    """Tracers on the channel grid."""
    return TracerFields.from_grid(
        channel_grid,
        dtype=channel_grid.dtype,
        device=channel_grid.device,
    )


def test_reference_state(tracers: TracerFields) -> None:
    """Test that the reference state has the reference density."""
    eos = LinearEquationOfState()
    tracers.T.fill(eos.T_0)
    tracers.S.fill(eos.S_0)
    rho = eos.density(tracers)
    assert rho.shape == tracers.T.data.shape
    torch.testing.assert_close(rho, torch.full_like(rho, eos.rho_0))
    b = eos.buoyancy_perturbation(tracers, Earth().g)
    torch.testing.assert_close(b, torch.zeros_like(b))


def test_linear_response(tracers: TracerFields) -> None:
    """Test density and buoyancy for perturbed tracers."""
    eos = LinearEquationOfState(rho_0=1000, beta_T=2e-4, beta_S=8e-4)
    tracers.T.fill(eos.T_0 + 1)
    tracers.S.fill(eos.S_0 - 1)
    rho = eos.density(tracers)
    expected = 1000 * (1 - 2e-4 - 8e-4)
    torch.testing.assert_close(rho, torch.full_like(rho, expected))
    b = eos.buoyancy_perturbation(tracers, 10.0)
    torch.testing.assert_close(b, torch.full_like(b, 10.0 * 1e-3))


def test_earth_constants() -> None:
    """Test Earth's constants."""
    earth = Earth()
    assert earth.rotation_rate == 7.292115e-5
    assert earth.g == 9.80665
    assert earth.radius == 6371e3
