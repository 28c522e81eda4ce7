"""Spectral Poisson solver on regular grids.

Diagonalizes the standard 7-points discrete laplacian:
  - periodic axes with FFT,
  - bounded axes (staggered Neumann conditions) with DCT-II,
  - flat axes are left untouched.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import torch

from oceanus.architectures import Architecture
from oceanus.exceptions import InvalidFieldDataError
from oceanus.fft import (
    compute_dctII_exp_vecs,
    dctII_along,
    idctII_along,
)
from oceanus.grid import Topology
from oceanus.logging import getLogger

if TYPE_CHECKING:
    from oceanus.fields.core import Field
    from oceanus.grid import GridAxis, RegularCartesianGrid

logger = getLogger(__name__)


def _axis_eigenvalues(
    axis: GridAxis,
    *,
    dtype: torch.dtype,
    device: torch.device,
) -> torch.Tensor:
    """Eigenvalues of the 3-points second derivative along an axis.

    Args:
        axis (GridAxis): Axis.
        dtype (torch.dtype): Dtype.
        device (torch.device): Device.

    Returns:
        torch.Tensor: (n,)-shaped eigenvalues.
    """
    if axis.is_flat:
        return torch.zeros(1, dtype=dtype, device=device)
    k = torch.arange(axis.n, dtype=dtype, device=device)
    if axis.topology == Topology.PERIODIC:
        theta = 2 * torch.pi * k / axis.n
    else:
        theta = torch.pi * k / axis.n
    return 2 * (torch.cos(theta) - 1) / axis.delta**2


def compute_laplacian_eigenvalues(
    grid: RegularCartesianGrid,
    *,
    dtype: torch.dtype,
    device: torch.device,
) -> torch.Tensor:
    """Eigenvalues of the discrete laplacian in transform space.

    Args:
        grid (RegularCartesianGrid): Grid.
        dtype (torch.dtype): Dtype.
        device (torch.device): Device.

    Returns:
        torch.Tensor: (Nx, Ny, Nz)-shaped eigenvalues.
    """
    lx, ly, lz = (
        _axis_eigenvalues(axis, dtype=dtype, device=device)
        for axis in grid.axes
    )
    return lx.view(-1, 1, 1) + ly.view(1, -1, 1) + lz.view(1, 1, -1)


class SpectralSolverParameters:
    """Spectral Poisson solver parameters, on CPU.

    Instantiation calibrates the transforms on a scratch buffer with the
    solver's shape and precision.
    """

    arch = Architecture.CPU

    def __init__(self, grid: RegularCartesianGrid, scratch: Field) -> None:
        """Instantiate the parameters.

        Args:
            grid (RegularCartesianGrid): Grid.
            scratch (Field): Complex scratch field, its content is
                overwritten.

        Raises:
            InvalidFieldDataError: If the scratch field doesn't match the
                grid or is not complex.
        """
        self._validate_scratch(grid, scratch)
        self._grid = grid
        self._device = scratch.device
        self._dtype = scratch.interior.real.dtype
        specs = {"dtype": self._dtype, "device": self._device}
        self._eigenvalues = compute_laplacian_eigenvalues(grid, **specs)
        # Single zero eigenvalue: the domain mean.
        self._eigenvalues[0, 0, 0] = 1
        self._periodic_dims = [
            dim
            for dim, axis in enumerate(grid.axes)
            if axis.topology == Topology.PERIODIC
        ]
        self._exp_vecs = {
            dim: compute_dctII_exp_vecs(axis.n, **specs)
            for dim, axis in enumerate(grid.axes)
            if axis.topology == Topology.BOUNDED
        }
        self._transform_time = self._calibrate(scratch)

    def __repr__(self) -> str:
        """String representation of the parameters."""
        return (
            f"{self.__class__.__name__}: {self._dtype} on {self._device} "
            f"- transform time: {self._transform_time:.2e}s"
        )

    @property
    def eigenvalues(self) -> torch.Tensor:
        """Laplacian eigenvalues (the zero mode is replaced by 1)."""
        return self._eigenvalues

    @property
    def transform_time(self) -> float:
        """Measured forward and inverse transform time, in seconds."""
        return self._transform_time

    @staticmethod
    def _validate_scratch(grid: RegularCartesianGrid, scratch: Field) -> None:
        if tuple(scratch.interior.shape) != grid.interior_shape:
            msg = (
                f"Scratch field must be {grid.interior_shape}-shaped, "
                f"got {tuple(scratch.interior.shape)}."
            )
            raise InvalidFieldDataError(msg)
        if not scratch.dtype.is_complex:
            msg = f"Scratch field must be complex, got {scratch.dtype}."
            raise InvalidFieldDataError(msg)

    def _synchronize(self) -> None:
        """Wait for pending transforms."""

    def _calibrate(self, scratch: Field) -> float:
        """Time a forward and inverse transform of the scratch field.

        Args:
            scratch (Field): Complex scratch field.

        Returns:
            float: Elapsed time in seconds.
        """
        dims = self._periodic_dims or [0, 1, 2]
        self._synchronize()
        start = time.perf_counter()
        spectrum = torch.fft.fftn(scratch.interior, dim=dims)
        scratch.interior.copy_(torch.fft.ifftn(spectrum, dim=dims))
        self._synchronize()
        elapsed = time.perf_counter() - start
        logger.detail(
            "%s: calibrated %s transforms in %.2es.",
            self.__class__.__name__,
            tuple(scratch.interior.shape),
            elapsed,
        )
        return elapsed

    def solve(self, rhs: torch.Tensor) -> torch.Tensor:
        """Solve ∇²φ = rhs for the zero-mean solution φ.

        Args:
            rhs (torch.Tensor): (Nx, Ny, Nz)-shaped right hand side.

        Returns:
            torch.Tensor: (Nx, Ny, Nz)-shaped solution.
        """
        r = rhs.to(dtype=self._dtype, device=self._device)
        for dim, (exp_vec, _) in self._exp_vecs.items():
            r = dctII_along(r, dim, exp_vec)
        if self._periodic_dims:
            r = torch.fft.fftn(r, dim=self._periodic_dims)
        phi = r / self._eigenvalues
        phi[0, 0, 0] = 0
        if self._periodic_dims:
            phi = torch.fft.ifftn(phi, dim=self._periodic_dims).real
        for dim, (_, iexp_vec) in self._exp_vecs.items():
            phi = idctII_along(phi, dim, iexp_vec)
        return phi.to(dtype=rhs.dtype)


class SpectralSolverParametersGPU(SpectralSolverParameters):
    """Spectral Poisson solver parameters, on GPU."""

    arch = Architecture.GPU

    def _synchronize(self) -> None:
        """Wait for pending transforms on the device."""
        torch.cuda.synchronize(self._device)
