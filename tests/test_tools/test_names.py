"""Test name enumerations."""

import pytest

from oceanus.grid import Topology
from oceanus.physics.coriolis import BetaPlane, FPlane, RotationName


def test_values() -> None:
    """Test admissible values."""
    assert Topology.values() == ["periodic", "bounded", "flat"]


@pytest.mark.parametrize("value", ["flat", "FLAT", Topology.FLAT])
def test_parse(value: str) -> None:
    """Test parsing members and values."""
    assert Topology.parse(value) is Topology.FLAT


def test_parse_unknown() -> None:
    """Test parsing an unknown value."""
    with pytest.raises(ValueError, match="Expected one of periodic"):
        Topology.parse("wrapped")


def test_named_objects() -> None:
    """Test that rotation models expose their name."""
    assert FPlane.get_type() == RotationName.F_PLANE
    assert BetaPlane.get_type() == RotationName.BETA_PLANE
    assert RotationName.F_PLANE == "f_plane"
