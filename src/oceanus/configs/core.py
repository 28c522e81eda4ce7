"""Configurations."""

# ruff: noqa: TC001
from __future__ import annotations

from typing import TYPE_CHECKING

import toml
from pydantic import BaseModel, Field
from typing_extensions import Self

from oceanus.boundary_conditions import BoundaryConditions
from oceanus.configs.grid import GridConfig
from oceanus.configs.models import ModelConfig
from oceanus.configs.physics import PhysicsConfig

if TYPE_CHECKING:
    from pathlib import Path


class Configuration(BaseModel):
    """Configuration."""

    grid: GridConfig
    model: ModelConfig = Field(default_factory=ModelConfig)
    physics: PhysicsConfig = Field(default_factory=PhysicsConfig)
    boundary_conditions: BoundaryConditions = Field(
        default_factory=BoundaryConditions,
    )

    @classmethod
    def from_toml(cls, file: Path | str) -> Self:
        """Load from a TOML file.

        Args:
            file (Path | str): File to load from.

        Returns:
            Self: Configuration.
        """
        return cls(**toml.load(file))
