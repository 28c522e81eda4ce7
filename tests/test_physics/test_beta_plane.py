"""Test beta-plane construction."""

import math

import pytest
import torch

from oceanus.exceptions import (
    ConfigurationError,
    InvalidRotationParametersError,
)
from oceanus.physics.constants import EARTH_ANGULAR_ROTATION, EARTH_RADIUS
from oceanus.physics.coriolis.beta_plane import BetaPlane
from oceanus.physics.coriolis.names import RotationName


@pytest.mark.parametrize(
    ("rotation_rate", "latitude", "radius"),
    [
        (7.292115e-5, 45.0, 6371e3),
        (1e-4, -30.0, 3389.5e3),
        (7.292115e-5, 0.0, 6371e3),
    ],
)
def test_derivation_from_planet(
    rotation_rate: float,
    latitude: float,
    radius: float,
) -> None:
    """Test f0 = 2Ω sin(φ) and β = 2Ω cos(φ) / R."""
    beta_plane = BetaPlane(
        rotation_rate=rotation_rate,
        latitude=latitude,
        radius=radius,
    )
    phi = math.radians(latitude)
    assert beta_plane.f0 == pytest.approx(2 * rotation_rate * math.sin(phi))
    assert beta_plane.beta == pytest.approx(
        2 * rotation_rate * math.cos(phi) / radius,
    )


def test_earth_defaults() -> None:
    """Test that only latitude is required to use Earth's values."""
    beta_plane = BetaPlane(latitude=60)
    phi = math.radians(60)
    f0 = 2 * EARTH_ANGULAR_ROTATION * math.sin(phi)
    beta = 2 * EARTH_ANGULAR_ROTATION * math.cos(phi) / EARTH_RADIUS
    assert beta_plane.f0 == pytest.approx(f0)
    assert beta_plane.beta == pytest.approx(beta)


def test_direct_coefficients_are_exact() -> None:
    """Test that f0 and beta given directly are kept as is."""
    beta_plane = BetaPlane(f0=9.375e-5, beta=1.754e-11)
    assert beta_plane.f0 == 9.375e-5
    assert beta_plane.beta == 1.754e-11


def test_coefficients_precision() -> None:
    """Test that coefficients are rounded to the model precision."""
    beta_plane = BetaPlane(f0=0.1, beta=1e-11, dtype=torch.float32)
    assert beta_plane.dtype == torch.float32
    assert beta_plane.f0 == torch.tensor(0.1, dtype=torch.float32).item()
    assert beta_plane.f0 != 0.1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"f0": 1e-4, "beta": 1e-11, "latitude": 45},
        {"f0": 1e-4, "latitude": 45},
        {"beta": 1e-11, "latitude": 45},
        {},
        {"f0": 1e-4},
        {"beta": 1e-11},
        {"rotation_rate": 1e-4, "radius": 1e6},
    ],
)
def test_ambiguous_or_incomplete_parameters(kwargs: dict) -> None:
    """Test that both or neither parameters groups raise."""
    with pytest.raises(InvalidRotationParametersError):
        BetaPlane(**kwargs)


def test_error_names_given_parameters() -> None:
    """Test that the error message reports the given parameters."""
    with pytest.raises(ConfigurationError, match=r"f0=0\.0001.*latitude=45"):
        BetaPlane(f0=1e-4, beta=1e-11, latitude=45)


def test_coefficients_are_read_only() -> None:
    """Test that coefficients can't be reassigned."""
    beta_plane = BetaPlane(f0=1e-4, beta=1e-11)
    with pytest.raises(AttributeError):
        beta_plane.f0 = 0  # type: ignore[misc]
    with pytest.raises(AttributeError):
        beta_plane.beta = 0  # type: ignore[misc]


def test_type_and_repr() -> None:
    """Test name and string representation."""
    beta_plane = BetaPlane(f0=1e-4, beta=2e-11)
    assert BetaPlane.get_type() == RotationName.BETA_PLANE
    assert repr(beta_plane) == "BetaPlane{float64}(f₀=1.00e-04, β=2.00e-11)"
