"""Model metadata and transport coefficients."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    import torch

    from oceanus.architectures import Architecture


class ModelMetadata(NamedTuple):
    """Architecture and floating point precision, fixed for the run."""

    arch: Architecture
    float_type: torch.dtype


class TransportCoefficients(NamedTuple):
    """Molecular viscosities and diffusivities (m².s⁻¹)."""

    nu_h: float
    nu_v: float
    kappa_h: float
    kappa_v: float

    @classmethod
    def from_scalars(
        cls,
        viscosity: float,
        diffusivity: float,
        *,
        nu_h: float | None = None,
        nu_v: float | None = None,
        kappa_h: float | None = None,
        kappa_v: float | None = None,
    ) -> TransportCoefficients:
        """Build coefficients, falling back on shared scalar values.

        Args:
            viscosity (float): Shared viscosity.
            diffusivity (float): Shared diffusivity.
            nu_h (float | None, optional): Horizontal viscosity.
                Defaults to None.
            nu_v (float | None, optional): Vertical viscosity.
                Defaults to None.
            kappa_h (float | None, optional): Horizontal diffusivity.
                Defaults to None.
            kappa_v (float | None, optional): Vertical diffusivity.
                Defaults to None.

        Returns:
            TransportCoefficients: Coefficients.
        """
        return cls(
            nu_h=viscosity if nu_h is None else nu_h,
            nu_v=viscosity if nu_v is None else nu_v,
            kappa_h=diffusivity if kappa_h is None else kappa_h,
            kappa_v=diffusivity if kappa_v is None else kappa_v,
        )
