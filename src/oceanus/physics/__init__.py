"""Physics."""

from oceanus.physics.coriolis import BetaPlane, FPlane
from oceanus.physics.equation_of_state import LinearEquationOfState
from oceanus.physics.hydrostatic import update_hydrostatic_pressure
from oceanus.physics.planetary import Earth, PlanetaryConstants

__all__ = [
    "BetaPlane",
    "Earth",
    "FPlane",
    "LinearEquationOfState",
    "PlanetaryConstants",
    "update_hydrostatic_pressure",
]
