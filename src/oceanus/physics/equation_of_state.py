"""Equations of state."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import torch

    from oceanus.fields.sets import TracerFields


class LinearEquationOfState:
    """Linear equation of state.

    ρ = ρ₀ (1 - βT (T - T₀) + βS (S - S₀))
    """

    def __init__(
        self,
        *,
        rho_0: float = 1027.0,
        beta_T: float = 1.67e-4,  # noqa: N803
        beta_S: float = 7.8e-4,  # noqa: N803
        T_0: float = 283.0,  # noqa: N803
        S_0: float = 35.0,  # noqa: N803
    ) -> None:
        """Instantiate the equation of state.

        Args:
            rho_0 (float, optional): Reference density (kg.m⁻³).
                Defaults to 1027.0.
            beta_T (float, optional): Thermal expansion coefficient (K⁻¹).
                Defaults to 1.67e-4.
            beta_S (float, optional): Haline contraction coefficient
                (psu⁻¹). Defaults to 7.8e-4.
            T_0 (float, optional): Reference temperature (K).
                Defaults to 283.0.
            S_0 (float, optional): Reference salinity (psu).
                Defaults to 35.0.
        """
        self._rho_0 = rho_0
        self._beta_T = beta_T
        self._beta_S = beta_S
        self._T_0 = T_0
        self._S_0 = S_0

    def __repr__(self) -> str:
        """String representation of the equation of state."""
        return (
            f"LinearEquationOfState(ρ₀={self.rho_0}, βT={self.beta_T}, "
            f"βS={self.beta_S}, T₀={self.T_0}, S₀={self.S_0})"
        )

    @property
    def rho_0(self) -> float:
        """Reference density."""
        return self._rho_0

    @property
    def beta_T(self) -> float:  # noqa: N802
        """Thermal expansion coefficient."""
        return self._beta_T

    @property
    def beta_S(self) -> float:  # noqa: N802
        """Haline contraction coefficient."""
        return self._beta_S

    @property
    def T_0(self) -> float:  # noqa: N802
        """Reference temperature."""
        return self._T_0

    @property
    def S_0(self) -> float:  # noqa: N802
        """Reference salinity."""
        return self._S_0

    def density(self, tracers: TracerFields) -> torch.Tensor:
        """Density from temperature and salinity, halos included.

        Args:
            tracers (TracerFields): Tracers.

        Returns:
            torch.Tensor: Density, shaped as the tracers data.
        """
        T = tracers.T.data  # noqa: N806
        S = tracers.S.data  # noqa: N806
        return self.rho_0 * (
            1 - self.beta_T * (T - self.T_0) + self.beta_S * (S - self.S_0)
        )

    def buoyancy_perturbation(
        self,
        tracers: TracerFields,
        g: float,
    ) -> torch.Tensor:
        """Buoyancy perturbation b = -g (ρ - ρ₀) / ρ₀, halos included.

        Args:
            tracers (TracerFields): Tracers.
            g (float): Gravitational acceleration.

        Returns:
            torch.Tensor: Buoyancy perturbation, shaped as the tracers data.
        """
        return -g * (self.density(tracers) - self.rho_0) / self.rho_0
