"""Elliptic solvers."""

from oceanus.solvers.poisson import (
    SpectralSolverParameters,
    SpectralSolverParametersGPU,
    compute_laplacian_eigenvalues,
)

__all__ = [
    "SpectralSolverParameters",
    "SpectralSolverParametersGPU",
    "compute_laplacian_eigenvalues",
]
