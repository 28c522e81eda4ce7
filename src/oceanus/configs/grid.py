"""Grid configuration."""

# ruff: noqa: TC001
from __future__ import annotations

from pydantic import BaseModel, PositiveFloat, PositiveInt

from oceanus.grid import Topology


class GridConfig(BaseModel):
    """Grid configuration."""

    size: tuple[PositiveInt, PositiveInt, PositiveInt]
    extent: tuple[PositiveFloat, PositiveFloat, PositiveFloat]
    topology: tuple[Topology, Topology, Topology] = (
        Topology.PERIODIC,
        Topology.PERIODIC,
        Topology.BOUNDED,
    )
    halo: PositiveInt = 1
