"""Model: the aggregate owning the whole state of a run."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from oceanus.boundary_conditions import fill_halo_regions
from oceanus.logging import getLogger
from oceanus.physics.hydrostatic import update_hydrostatic_pressure

if TYPE_CHECKING:
    import torch

    from oceanus.architectures import Architecture
    from oceanus.boundary_conditions import BoundaryConditions
    from oceanus.fields.sets import (
        ForcingFields,
        OperatorTemporaryFields,
        PressureFields,
        SourceTerms,
        StepperTemporaryFields,
        TracerFields,
        VelocityFields,
    )
    from oceanus.grid import RegularCartesianGrid
    from oceanus.models.clock import Clock
    from oceanus.models.forcing import Forcing
    from oceanus.models.outputs import Diagnostic, OutputWriter
    from oceanus.models.parameters import (
        ModelMetadata,
        TransportCoefficients,
    )
    from oceanus.physics.coriolis.base import AbstractRotation
    from oceanus.physics.equation_of_state import LinearEquationOfState
    from oceanus.physics.planetary import PlanetaryConstants
    from oceanus.solvers.poisson import (
        SpectralSolverParameters,
        SpectralSolverParametersGPU,
    )

    SolverParameters = Union[
        SpectralSolverParameters,
        SpectralSolverParametersGPU,
    ]

logger = getLogger(__name__)


class Model:
    """Model.

    Every field shares the model grid. The architecture is fixed for the
    whole run and matches the solver parameters variant.

    Models are built with `build_model` (or `instantiate_model` from a
    configuration) and mutated afterwards only by the time stepper.
    """

    def __init__(
        self,
        *,
        metadata: ModelMetadata,
        coefficients: TransportCoefficients,
        boundary_conditions: BoundaryConditions,
        constants: PlanetaryConstants,
        eos: LinearEquationOfState,
        coriolis: AbstractRotation,
        grid: RegularCartesianGrid,
        velocities: VelocityFields,
        tracers: TracerFields,
        pressures: PressureFields,
        G: SourceTerms,  # noqa: N803
        Gp: SourceTerms,  # noqa: N803
        forcings: ForcingFields,
        forcing: Forcing,
        stepper_tmp: StepperTemporaryFields,
        operator_tmp: OperatorTemporaryFields,
        ssp: SolverParameters,
        clock: Clock,
        output_writers: list[OutputWriter],
        diagnostics: list[Diagnostic],
    ) -> None:
        """Instantiate the model from its already built components."""
        self._metadata = metadata
        self._coefficients = coefficients
        self._boundary_conditions = boundary_conditions
        self._constants = constants
        self._eos = eos
        self._coriolis = coriolis
        self._grid = grid
        self._velocities = velocities
        self._tracers = tracers
        self._pressures = pressures
        self._G = G
        self._Gp = Gp
        self._forcings = forcings
        self._forcing = forcing
        self._stepper_tmp = stepper_tmp
        self._operator_tmp = operator_tmp
        self._ssp = ssp
        self._clock = clock
        self._output_writers = output_writers
        self._diagnostics = diagnostics

    def __repr__(self) -> str:
        """String representation of the model."""
        nx, ny, nz = self._grid.size
        lx, ly, lz = self._grid.Lx, self._grid.Ly, self._grid.Lz
        lines = [
            f"Model on {self.arch.value}, {self.float_type}",
            f"├── Grid: {nx}x{ny}x{nz} cells, {lx}x{ly}x{lz} m",
            f"├── Rotation: {self._coriolis}",
            f"├── Equation of state: {self._eos}",
            f"├── Boundary conditions: {self._boundary_conditions}",
            f"├── Solver: {self._ssp}",
            f"└── {self._clock}",
        ]
        return "\n".join(lines)

    @property
    def metadata(self) -> ModelMetadata:
        """Architecture and precision."""
        return self._metadata

    @property
    def arch(self) -> Architecture:
        """Architecture."""
        return self._metadata.arch

    @property
    def float_type(self) -> torch.dtype:
        """Floating point precision."""
        return self._metadata.float_type

    @property
    def coefficients(self) -> TransportCoefficients:
        """Viscosities and diffusivities."""
        return self._coefficients

    @property
    def boundary_conditions(self) -> BoundaryConditions:
        """Boundary conditions."""
        return self._boundary_conditions

    @property
    def constants(self) -> PlanetaryConstants:
        """Planetary constants."""
        return self._constants

    @property
    def eos(self) -> LinearEquationOfState:
        """Equation of state."""
        return self._eos

    @property
    def coriolis(self) -> AbstractRotation:
        """Rotation model."""
        return self._coriolis

    @property
    def grid(self) -> RegularCartesianGrid:
        """Grid."""
        return self._grid

    @property
    def velocities(self) -> VelocityFields:
        """Velocities."""
        return self._velocities

    @property
    def tracers(self) -> TracerFields:
        """Tracers."""
        return self._tracers

    @property
    def pressures(self) -> PressureFields:
        """Pressures."""
        return self._pressures

    @property
    def G(self) -> SourceTerms:  # noqa: N802
        """Source terms of the current step."""
        return self._G

    @property
    def Gp(self) -> SourceTerms:  # noqa: N802
        """Source terms of the previous step."""
        return self._Gp

    @property
    def forcings(self) -> ForcingFields:
        """Forcing fields."""
        return self._forcings

    @property
    def forcing(self) -> Forcing:
        """Forcing functions."""
        return self._forcing

    @property
    def stepper_tmp(self) -> StepperTemporaryFields:
        """Time stepper scratch fields."""
        return self._stepper_tmp

    @property
    def operator_tmp(self) -> OperatorTemporaryFields:
        """Operators scratch fields."""
        return self._operator_tmp

    @property
    def ssp(self) -> SolverParameters:
        """Poisson solver parameters."""
        return self._ssp

    @property
    def clock(self) -> Clock:
        """Clock."""
        return self._clock

    @property
    def output_writers(self) -> list[OutputWriter]:
        """Output writers."""
        return self._output_writers

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics."""
        return self._diagnostics

    def update_hydrostatic_pressure(self) -> None:
        """Update pHY′ from the current tracers, halos included.

        The buoyancy perturbation is computed into the fC1 scratch field.
        pHY′ is left untouched on grids with a flat vertical axis.
        """
        if self._grid.is_flat("z"):
            return
        b = self._stepper_tmp.fC1
        b.data.copy_(
            self._eos.buoyancy_perturbation(self._tracers, self._constants.g),
        )
        fill_halo_regions(b, self._boundary_conditions)
        p_hy_prime = self._pressures.p_hy_prime
        event = update_hydrostatic_pressure(p_hy_prime, b, self.arch)
        event.wait()
        fill_halo_regions(p_hy_prime, self._boundary_conditions)

    def compute_coriolis_source_terms(self) -> None:
        """Add the Coriolis forces to the current source terms."""
        grid, velocities = self._grid, self._velocities
        self._G.u.interior.add_(self._coriolis.x_force(grid, velocities))
        self._G.v.interior.add_(self._coriolis.y_force(grid, velocities))
        self._G.w.interior.add_(self._coriolis.z_force(grid, velocities))
