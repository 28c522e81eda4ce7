"""Instantiate Model."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, TypeVar

import torch
from typing_extensions import ParamSpec

from oceanus.architectures import Architecture, resolve_architecture
from oceanus.architectures import get_device as get_arch_device
from oceanus.boundary_conditions import BoundaryConditions, fill_halo_regions
from oceanus.exceptions import (
    ArchitectureUnavailableError,
    ConfigurationError,
    InvalidModelParameterError,
    UnsupportedArchitectureError,
)
from oceanus.fields.sets import (
    ForcingFields,
    OperatorTemporaryFields,
    PressureFields,
    SourceTerms,
    StepperTemporaryFields,
    TracerFields,
    VelocityFields,
)
from oceanus.grid import RegularCartesianGrid, Topology
from oceanus.logging import DETAIL, getLogger
from oceanus.models.clock import Clock
from oceanus.models.core import Model
from oceanus.models.forcing import Forcing
from oceanus.models.outputs import Diagnostic, OutputWriter, validate_entries
from oceanus.models.parameters import ModelMetadata, TransportCoefficients
from oceanus.physics.coriolis.f_plane import FPlane
from oceanus.physics.coriolis.instantiation import instantiate_rotation
from oceanus.physics.equation_of_state import LinearEquationOfState
from oceanus.physics.planetary import Earth, PlanetaryConstants
from oceanus.solvers.poisson import (
    SpectralSolverParameters,
    SpectralSolverParametersGPU,
)
from oceanus.specs import defaults

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from oceanus.configs.core import Configuration
    from oceanus.fields.core import Field, FieldValue
    from oceanus.physics.coriolis.base import AbstractRotation

logger = getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

DEFAULT_TEMPERATURE = 283
DEFAULT_SALINITY = 35


def _resolve_topology(
    topology: tuple[str | Topology, ...] | None,
    boundary_conditions: BoundaryConditions,
) -> tuple[Topology, ...]:
    """Grid topology, checked against horizontal boundary conditions.

    Args:
        topology (tuple[str | Topology, ...] | None): Requested topology,
            None to derive it from the boundary conditions.
        boundary_conditions (BoundaryConditions): Boundary conditions.

    Raises:
        ConfigurationError: If a non-flat horizontal axis topology
            disagrees with its boundary condition.

    Returns:
        tuple[Topology, ...]: Topology.
    """
    if topology is None:
        return (
            Topology.parse(boundary_conditions.x),
            Topology.parse(boundary_conditions.y),
            Topology.BOUNDED,
        )
    topology = tuple(topology)
    for name, topo in zip(("x", "y"), topology):
        try:
            topo = Topology.parse(topo)  # noqa: PLW2901
        except ValueError:
            # Reported by the grid validation.
            continue
        bc = getattr(boundary_conditions, name)
        if topo != Topology.FLAT and topo.value != bc:
            msg = (
                f"Topology of the {name} axis ({topo.value}) doesn't match "
                f"its boundary condition ({bc})."
            )
            raise ConfigurationError(msg)
    return topology


def _build_solver_parameters(
    metadata: ModelMetadata,
    grid: RegularCartesianGrid,
    scratch: Field,
) -> SpectralSolverParameters | SpectralSolverParametersGPU:
    """Calibrate the Poisson solver on randomly filled scratch data.

    Args:
        metadata (ModelMetadata): Architecture and precision.
        grid (RegularCartesianGrid): Grid.
        scratch (Field): Complex scratch field.

    Raises:
        UnsupportedArchitectureError: If the architecture is unknown.

    Returns:
        SpectralSolverParameters | SpectralSolverParametersGPU: Solver
            parameters matching the architecture.
    """
    shape = grid.interior_shape
    if metadata.arch == Architecture.CPU:
        scratch.set(torch.rand(shape, dtype=metadata.float_type))
        return SpectralSolverParameters(grid, scratch)
    if metadata.arch == Architecture.GPU:
        scratch.set(
            torch.rand(
                shape,
                dtype=metadata.float_type,
                device=scratch.device,
            ),
        )
        return SpectralSolverParametersGPU(grid, scratch)
    msg = f"No Poisson solver for architecture {metadata.arch!r}."
    raise UnsupportedArchitectureError(msg)


def _set_tracer(
    field: Field,
    value: FieldValue | None,
    default: float,
    boundary_conditions: BoundaryConditions,
) -> None:
    """Set a tracer initial value, uniform default when None.

    Args:
        field (Field): Tracer field.
        value (FieldValue | None): Initial value.
        default (float): Default uniform value.
        boundary_conditions (BoundaryConditions): Boundary conditions.
    """
    if value is None:
        field.fill(default)
        return
    field.set(value)
    fill_halo_regions(field, boundary_conditions)


def _log_invalid_parameters(func: Callable[P, T]) -> Callable[P, T]:
    """Log rejected parameters before propagating the error."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except (ConfigurationError, ArchitectureUnavailableError) as e:
            logger.error("Model not built: %s", e)  # noqa: TRY400
            raise

    return wrapper


@_log_invalid_parameters
def build_model(  # noqa: PLR0913
    size: tuple[int, int, int],
    extent: tuple[float, float, float],
    *,
    viscosity: float = 1.05e-6,
    nu_h: float | None = None,
    nu_v: float | None = None,
    diffusivity: float = 1.43e-7,
    kappa_h: float | None = None,
    kappa_v: float | None = None,
    start_time: float = 0,
    iteration: int = 0,
    arch: str | Architecture = Architecture.CPU,
    float_type: torch.dtype | str = torch.float64,
    topology: tuple[str | Topology, ...] | None = None,
    halo: int = 1,
    mask: torch.Tensor | None = None,
    constants: PlanetaryConstants | None = None,
    eos: LinearEquationOfState | None = None,
    coriolis: AbstractRotation | None = None,
    forcing: Forcing | None = None,
    boundary_conditions: BoundaryConditions | None = None,
    output_writers: Iterable[OutputWriter] | None = None,
    diagnostics: Iterable[Diagnostic] | None = None,
    initial_temperature: FieldValue | None = None,
    initial_salinity: FieldValue | None = None,
) -> Model:
    """Build a model ready for time stepping.

    Steps, in order:
    1. Metadata and transport coefficients.
    2. Grid, validated before any allocation.
    3. Fields.
    4. Poisson solver parameters, calibrated on random scratch data.
    5. Initial conditions: zero velocities, uniform tracers by default.
    6. Hydrostatic pressure profile: pHY = -ρ₀ g zC.
    7. Density from the initial tracers.

    Args:
        size (tuple[int, int, int]): Number of cells (Nx, Ny, Nz).
        extent (tuple[float, float, float]): Domain size (Lx, Ly, Lz).
        viscosity (float, optional): Shared viscosity. Defaults to 1.05e-6.
        nu_h (float | None, optional): Horizontal viscosity.
            Defaults to None.
        nu_v (float | None, optional): Vertical viscosity. Defaults to None.
        diffusivity (float, optional): Shared diffusivity.
            Defaults to 1.43e-7.
        kappa_h (float | None, optional): Horizontal diffusivity.
            Defaults to None.
        kappa_v (float | None, optional): Vertical diffusivity.
            Defaults to None.
        start_time (float, optional): Start time. Defaults to 0.
        iteration (int, optional): Starting iteration. Defaults to 0.
        arch (str | Architecture, optional): Architecture.
            Defaults to Architecture.CPU.
        float_type (torch.dtype | str, optional): Floating point precision.
            Defaults to torch.float64.
        topology (tuple[str | Topology, ...] | None, optional): Grid
            topology. Defaults to None (from the boundary conditions).
        halo (int, optional): Halo width. Defaults to 1.
        mask (torch.Tensor | None, optional): Active cells mask.
            Defaults to None.
        constants (PlanetaryConstants | None, optional): Planetary
            constants. Defaults to None (Earth).
        eos (LinearEquationOfState | None, optional): Equation of state.
            Defaults to None (default linear equation of state).
        coriolis (AbstractRotation | None, optional): Rotation model.
            Defaults to None (non-rotating).
        forcing (Forcing | None, optional): Forcing functions.
            Defaults to None.
        boundary_conditions (BoundaryConditions | None, optional):
            Boundary conditions. Defaults to None.
        output_writers (Iterable[OutputWriter] | None, optional): Output
            writers. Defaults to None.
        diagnostics (Iterable[Diagnostic] | None, optional): Diagnostics.
            Defaults to None.
        initial_temperature (FieldValue | None, optional): Initial
            temperature. Defaults to None (uniform 283).
        initial_salinity (FieldValue | None, optional): Initial salinity.
            Defaults to None (uniform 35).

    Raises:
        InvalidModelParameterError: If a coefficient is negative.

    Returns:
        Model: Model.
    """
    with logger.section("Building model..."):
        arch = resolve_architecture(arch)
        metadata = ModelMetadata(
            arch=arch,
            float_type=defaults.get_dtype(float_type),
        )
        coefficients = TransportCoefficients.from_scalars(
            viscosity,
            diffusivity,
            nu_h=nu_h,
            nu_v=nu_v,
            kappa_h=kappa_h,
            kappa_v=kappa_v,
        )
        for name, value in zip(coefficients._fields, coefficients):
            if value < 0:
                msg = f"{name} must be non-negative, got {value}."
                raise InvalidModelParameterError(msg)
        boundary_conditions = boundary_conditions or BoundaryConditions()
        forcing = forcing or Forcing()
        forcing.validate()
        output_writers = validate_entries(output_writers, OutputWriter)
        diagnostics = validate_entries(diagnostics, Diagnostic)
        constants = constants or Earth()
        eos = eos or LinearEquationOfState()
        if coriolis is None:
            coriolis = FPlane(f=0, dtype=metadata.float_type)
        elif coriolis.dtype != metadata.float_type:
            logger.warning(
                "Rounding %s coefficients to %s.",
                coriolis,
                metadata.float_type,
            )
            coriolis = coriolis.to(metadata.float_type)
        logger.detail("Architecture: %s", arch.value)
        logger.detail("Precision: %s", metadata.float_type)
        logger.detail("Rotation: %s", coriolis)

        device = get_arch_device(arch)
        grid = RegularCartesianGrid(
            size,
            extent,
            topology=_resolve_topology(topology, boundary_conditions),
            halo=halo,
            mask=mask,
            dtype=metadata.float_type,
            device=device,
        )
        logger.detail("Grid: %s", grid.size)
        clock = Clock(start_time, iteration)

        specs = {"dtype": metadata.float_type, "device": device}
        with logger.timeit("Allocating fields", level=DETAIL):
            velocities = VelocityFields.from_grid(grid, **specs)
            tracers = TracerFields.from_grid(grid, **specs)
            pressures = PressureFields.from_grid(grid, **specs)
            G = SourceTerms.from_grid(grid, **specs)  # noqa: N806
            Gp = SourceTerms.from_grid(grid, **specs)  # noqa: N806
            forcings = ForcingFields.from_grid(grid, **specs)
            stepper_tmp = StepperTemporaryFields.from_grid(grid, **specs)
            operator_tmp = OperatorTemporaryFields.from_grid(grid, **specs)

        ssp = _build_solver_parameters(metadata, grid, stepper_tmp.fCC1)

        for velocity in velocities:
            velocity.fill(0)
        _set_tracer(
            tracers.T,
            initial_temperature,
            DEFAULT_TEMPERATURE,
            boundary_conditions,
        )
        _set_tracer(
            tracers.S,
            initial_salinity,
            DEFAULT_SALINITY,
            boundary_conditions,
        )

        p_hy_profile = -eos.rho_0 * constants.g * grid.zC
        pressures.p_hy.set(p_hy_profile.view(1, 1, -1))
        fill_halo_regions(pressures.p_hy, boundary_conditions)

        tracers.rho.data.copy_(eos.density(tracers))

        model = Model(
            metadata=metadata,
            coefficients=coefficients,
            boundary_conditions=boundary_conditions,
            constants=constants,
            eos=eos,
            coriolis=coriolis,
            grid=grid,
            velocities=velocities,
            tracers=tracers,
            pressures=pressures,
            G=G,
            Gp=Gp,
            forcings=forcings,
            forcing=forcing,
            stepper_tmp=stepper_tmp,
            operator_tmp=operator_tmp,
            ssp=ssp,
            clock=clock,
            output_writers=output_writers,
            diagnostics=diagnostics,
        )
    logger.info("Model built.")
    return model


def instantiate_model(configuration: Configuration) -> Model:
    """Instantiate the model, given the configuration.

    Args:
        configuration (Configuration): Configuration.

    Returns:
        Model: Model.
    """
    grid_config = configuration.grid
    model_config = configuration.model
    physics_config = configuration.physics
    planet = physics_config.planet
    eos_config = physics_config.equation_of_state
    float_type = defaults.get_dtype(model_config.float_type)
    constants = PlanetaryConstants(
        rotation_rate=planet.rotation_rate,
        g=planet.gravitational_acceleration,
        radius=planet.radius,
    )
    return build_model(
        grid_config.size,
        grid_config.extent,
        viscosity=model_config.viscosity,
        nu_h=model_config.nu_h,
        nu_v=model_config.nu_v,
        diffusivity=model_config.diffusivity,
        kappa_h=model_config.kappa_h,
        kappa_v=model_config.kappa_v,
        start_time=model_config.start_time,
        iteration=model_config.iteration,
        arch=model_config.arch,
        float_type=float_type,
        topology=grid_config.topology,
        halo=grid_config.halo,
        constants=constants,
        eos=LinearEquationOfState(
            rho_0=eos_config.rho_0,
            beta_T=eos_config.beta_T,
            beta_S=eos_config.beta_S,
            T_0=eos_config.T_0,
            S_0=eos_config.S_0,
        ),
        coriolis=instantiate_rotation(
            physics_config.rotation,
            float_type,
            constants,
        ),
        boundary_conditions=configuration.boundary_conditions,
        initial_temperature=model_config.initial_temperature,
        initial_salinity=model_config.initial_salinity,
    )
