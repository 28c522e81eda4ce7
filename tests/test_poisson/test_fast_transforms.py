"""Test fast cosine transforms."""

import math

import pytest
import torch

from oceanus.fft import compute_dctII_exp_vecs, dctII, idctII, idctII_along


def naive_dctII(x: torch.Tensor) -> torch.Tensor:  # noqa: N802
    """X_k = 2 Σ x_n cos(π k (2n+1) / 2N)."""
    n = x.shape[-1]
    k = torch.arange(n, dtype=x.dtype).view(-1, 1)
    i = torch.arange(n, dtype=x.dtype).view(1, -1)
    basis = torch.cos(math.pi * k * (2 * i + 1) / (2 * n))
    return 2 * (basis @ x)


@pytest.mark.parametrize("n", [1, 2, 4, 5, 8, 9])
def test_dctII(n: int) -> None:  # noqa: N802
    """Test the fast transform against the definition."""
    x = torch.rand(n, dtype=torch.float64)
    exp_vec, _ = compute_dctII_exp_vecs(
        n,
        dtype=torch.float64,
        device=x.device,
    )
    torch.testing.assert_close(dctII(x, exp_vec), naive_dctII(x))


@pytest.mark.parametrize("n", [2, 4, 5, 8, 9])
def test_inverse(n: int) -> None:
    """Test that idctII inverts dctII."""
    x = torch.rand((3, n), dtype=torch.float64)
    exp_vec, iexp_vec = compute_dctII_exp_vecs(
        n,
        dtype=torch.float64,
        device=x.device,
    )
    torch.testing.assert_close(idctII(dctII(x, exp_vec), iexp_vec), x)


def test_inverse_along_dimension() -> None:
    """Test transforms along a non-last dimension."""
    x = torch.rand((5, 3), dtype=torch.float64)
    exp_vec, iexp_vec = compute_dctII_exp_vecs(
        5,
        dtype=torch.float64,
        device=x.device,
    )
    y = dctII(x.movedim(0, -1), exp_vec).movedim(-1, 0)
    torch.testing.assert_close(idctII_along(y, 0, iexp_vec), x)
