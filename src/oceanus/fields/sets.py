"""Groups of fields owned by a model."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from typing_extensions import Self

from oceanus.fields.core import CELL, FACE_X, FACE_Y, FACE_Z, Field
from oceanus.specs import defaults

if TYPE_CHECKING:
    import torch

    from oceanus.grid import RegularCartesianGrid


class VelocityFields(NamedTuple):
    """Velocities, each on its own face."""

    u: Field
    v: Field
    w: Field

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate zero velocities.

        Args:
            grid (RegularCartesianGrid): Grid.
            dtype (torch.dtype): Dtype.
            device (torch.device): Device.

        Returns:
            Self: Velocities.
        """
        specs = {"dtype": dtype, "device": device}
        return cls(
            u=Field(grid, FACE_X, name="u", **specs),
            v=Field(grid, FACE_Y, name="v", **specs),
            w=Field(grid, FACE_Z, name="w", **specs),
        )


class TracerFields(NamedTuple):
    """Temperature, salinity and the density derived from them."""

    T: Field
    S: Field
    rho: Field

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate zero tracers.

        Args:
            grid (RegularCartesianGrid): Grid.
            dtype (torch.dtype): Dtype.
            device (torch.device): Device.

        Returns:
            Self: Tracers.
        """
        specs = {"dtype": dtype, "device": device}
        return cls(
            T=Field(grid, CELL, name="T", **specs),
            S=Field(grid, CELL, name="S", **specs),
            rho=Field(grid, CELL, name="rho", **specs),
        )


class PressureFields(NamedTuple):
    """Hydrostatic, hydrostatic perturbation and non-hydrostatic pressures."""

    p_hy: Field
    p_hy_prime: Field
    p_nhs: Field

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate zero pressures.

        Args:
            grid (RegularCartesianGrid): Grid.
            dtype (torch.dtype): Dtype.
            device (torch.device): Device.

        Returns:
            Self: Pressures.
        """
        specs = {"dtype": dtype, "device": device}
        return cls(
            p_hy=Field(grid, CELL, name="pHY", **specs),
            p_hy_prime=Field(grid, CELL, name="pHY′", **specs),
            p_nhs=Field(grid, CELL, name="pNHS", **specs),
        )


class _PerEquationFields(NamedTuple):
    """One field per prognostic equation (u, v, w, T, S)."""

    u: Field
    v: Field
    w: Field
    T: Field
    S: Field


def _per_equation(
    grid: RegularCartesianGrid,
    prefix: str,
    dtype: torch.dtype,
    device: torch.device,
) -> dict[str, Field]:
    specs = {"dtype": dtype, "device": device}
    locations = {"u": FACE_X, "v": FACE_Y, "w": FACE_Z, "T": CELL, "S": CELL}
    return {
        k: Field(grid, loc, name=f"{prefix}{k}", **specs)
        for k, loc in locations.items()
    }


class SourceTerms(_PerEquationFields):
    """Right-hand sides (G) of the prognostic equations."""

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate zero source terms."""
        return cls(**_per_equation(grid, "G", dtype, device))


class ForcingFields(_PerEquationFields):
    """Evaluated forcing terms of the prognostic equations."""

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate zero forcing fields."""
        return cls(**_per_equation(grid, "F", dtype, device))


class StepperTemporaryFields(NamedTuple):
    """Scratch fields of the time stepper.

    fCC1 and fCC2 are complex, for spectral transforms.
    """

    fC1: Field
    fC2: Field
    fC3: Field
    fC4: Field
    fCC1: Field
    fCC2: Field

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate scratch fields.

        Args:
            grid (RegularCartesianGrid): Grid.
            dtype (torch.dtype): Real dtype.
            device (torch.device): Device.

        Returns:
            Self: Scratch fields.
        """
        real = {"dtype": dtype, "device": device}
        cplx = {"dtype": defaults.get_complex_dtype(dtype), "device": device}
        return cls(
            fC1=Field(grid, CELL, name="fC1", **real),
            fC2=Field(grid, CELL, name="fC2", **real),
            fC3=Field(grid, CELL, name="fC3", **real),
            fC4=Field(grid, CELL, name="fC4", **real),
            fCC1=Field(grid, CELL, name="fCC1", **cplx),
            fCC2=Field(grid, CELL, name="fCC2", **cplx),
        )


class OperatorTemporaryFields(NamedTuple):
    """Scratch fields of the differential operators."""

    fFX: Field
    fFY: Field
    fFZ: Field
    fC1: Field
    fC2: Field
    fC3: Field
    fC4: Field

    @classmethod
    def from_grid(
        cls,
        grid: RegularCartesianGrid,
        *,
        dtype: torch.dtype,
        device: torch.device,
    ) -> Self:
        """Allocate scratch fields.

        Args:
            grid (RegularCartesianGrid): Grid.
            dtype (torch.dtype): Dtype.
            device (torch.device): Device.

        Returns:
            Self: Scratch fields.
        """
        specs = {"dtype": dtype, "device": device}
        return cls(
            fFX=Field(grid, FACE_X, name="fFX", **specs),
            fFY=Field(grid, FACE_Y, name="fFY", **specs),
            fFZ=Field(grid, FACE_Z, name="fFZ", **specs),
            fC1=Field(grid, CELL, name="fC1", **specs),
            fC2=Field(grid, CELL, name="fC2", **specs),
            fC3=Field(grid, CELL, name="fC3", **specs),
            fC4=Field(grid, CELL, name="fC4", **specs),
        )
