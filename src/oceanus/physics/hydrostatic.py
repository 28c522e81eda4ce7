"""Hydrostatic pressure perturbation.

pHY′ is the downward integral of the buoyancy perturbation, from the
surface (z = 0) to depth:

    pHY′[Nz-1] = - ℑz(b)[Nz] Δz_f[Nz]
    pHY′[k]    = pHY′[k+1] - ℑz(b)[k+1] Δz_f[k+1]

where ℑz(b)[k] is the buoyancy averaged onto face k and Δz_f[k] the
center-to-center spacing at face k. Columns are independent, the vertical
recurrence is sequential.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from oceanus.architectures import Architecture, Event, launch
from oceanus.logging import getLogger
from oceanus.operators import interpolate_z_at_face

if TYPE_CHECKING:
    from oceanus.fields.core import Field

logger = getLogger(__name__)


def _update_hydrostatic_pressure(p_hy_prime: Field, b: Field) -> None:
    """Integrate buoyancy downwards, over every column at once.

    Args:
        p_hy_prime (Field): Hydrostatic pressure perturbation, written.
        b (Field): Cell-centered buoyancy perturbation, halo filled.
    """
    nz = b.grid.Nz
    dzf = b.grid.z.df
    p = p_hy_prime.interior
    p[..., nz - 1] = -interpolate_z_at_face(b, nz) * dzf[nz]
    for k in range(nz - 2, -1, -1):
        face = interpolate_z_at_face(b, k + 1)
        p[..., k] = p[..., k + 1] - face * dzf[k + 1]


def update_hydrostatic_pressure(
    p_hy_prime: Field,
    b: Field,
    arch: Architecture,
) -> Event:
    """Dispatch the hydrostatic pressure integration.

    Nothing is dispatched on grids with a flat vertical axis: p_hy_prime
    is left untouched. The returned event must be waited for before
    reading p_hy_prime or filling its halos.

    Args:
        p_hy_prime (Field): Hydrostatic pressure perturbation.
        b (Field): Cell-centered buoyancy perturbation, halo filled.
        arch (Architecture): Architecture to run on.

    Returns:
        Event: Completion event.
    """
    if b.grid.is_flat("z"):
        logger.debug("Flat vertical axis: hydrostatic pressure unchanged.")
        return Event(arch)
    return launch(arch, _update_hydrostatic_pressure, p_hy_prime, b)
