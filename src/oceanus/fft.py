"""Fast transforms tools in Pytorch.

DCT-II are computed with a single FFT of a reordered sequence (Makhoul,
1980), along the last dimension.
"""

from __future__ import annotations

import torch


def compute_dctII_exp_vecs(  # noqa: N802
    n: int,
    *,
    dtype: torch.dtype,
    device: torch.device,
) -> tuple[torch.Tensor, torch.Tensor]:
    """Compute auxiliary vectors used in fast DCT-II computations.

    Args:
        n (int): Transform length.
        dtype (torch.dtype): Real dtype.
        device (torch.device): Device.

    Returns:
        tuple[torch.Tensor, torch.Tensor]: exp_vec, iexp_vec.
    """
    k = torch.arange(n, dtype=dtype, device=device)
    exp_vec = 2 * torch.exp(-1j * torch.pi * k / (2 * n))
    iexp_vec = torch.exp(1j * torch.pi * k / (2 * n))
    return exp_vec, iexp_vec


def dctII(x: torch.Tensor, exp_vec: torch.Tensor) -> torch.Tensor:  # noqa: N802
    """1D forward type-II discrete cosine transform (DCT-II).

    X_k = 2 Σ x_n cos(π k (2n+1) / 2N)

    Args:
        x (torch.Tensor): Real tensor, transformed along the last dim.
        exp_vec (torch.Tensor): Precomputed auxiliary vector.

    Returns:
        torch.Tensor: Transformed tensor.
    """
    v = torch.cat([x[..., ::2], torch.flip(x[..., 1::2], dims=(-1,))], dim=-1)
    return (torch.fft.fft(v) * exp_vec).real


def idctII(x: torch.Tensor, iexp_vec: torch.Tensor) -> torch.Tensor:  # noqa: N802
    """1D inverse type-II discrete cosine transform.

    Args:
        x (torch.Tensor): Real tensor, transformed along the last dim.
        iexp_vec (torch.Tensor): Precomputed auxiliary vector.

    Returns:
        torch.Tensor: Inverse transform of x.
    """
    n = x.shape[-1]
    x_rev = torch.flip(x, dims=(-1,))[..., :-1]
    v = (
        torch.cat(
            [x[..., 0:1], iexp_vec[..., 1:n] * (x[..., 1:n] - 1j * x_rev)],
            dim=-1,
        )
        / 2
    )
    V = torch.fft.ifft(v)  # noqa: N806
    y = torch.zeros_like(x)
    y[..., ::2] = V[..., : (n + 1) // 2].real
    y[..., 1::2] = torch.flip(V, dims=(-1,))[..., : n // 2].real
    return y


def dctII_along(  # noqa: N802
    x: torch.Tensor,
    dim: int,
    exp_vec: torch.Tensor,
) -> torch.Tensor:
    """DCT-II along any dimension.

    Args:
        x (torch.Tensor): Real tensor.
        dim (int): Dimension.
        exp_vec (torch.Tensor): Precomputed auxiliary vector.

    Returns:
        torch.Tensor: Transformed tensor.
    """
    return dctII(x.movedim(dim, -1), exp_vec).movedim(-1, dim)


def idctII_along(  # noqa: N802
    x: torch.Tensor,
    dim: int,
    iexp_vec: torch.Tensor,
) -> torch.Tensor:
    """Inverse DCT-II along any dimension.

    Args:
        x (torch.Tensor): Real tensor.
        dim (int): Dimension.
        iexp_vec (torch.Tensor): Precomputed auxiliary vector.

    Returns:
        torch.Tensor: Inverse transform.
    """
    return idctII(x.movedim(dim, -1), iexp_vec).movedim(-1, dim)
