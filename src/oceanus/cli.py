"""Command Line Interface of scripts."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from typing_extensions import Self

from oceanus.architectures import Architecture

if TYPE_CHECKING:
    from oceanus.configs.core import Configuration


@dataclass
class ScriptArgs:
    """Script arguments."""

    config: Path
    verbose: int
    arch: str | None = None

    @classmethod
    def from_cli(cls, args: list[str] | None = None) -> Self:
        """Parse script arguments.

        Args:
            args (list[str] | None, optional): Arguments to parse.
                Defaults to None (sys.argv).

        Returns:
            Self: ScriptArgs.
        """
        parser = argparse.ArgumentParser(
            description="Build an ocean model from a configuration file.",
        )
        parser.add_argument(
            "--config",
            required=True,
            type=Path,
            help="Configuration file path, relative to the repository root.",
        )
        parser.add_argument(
            "--arch",
            choices=Architecture.values(),
            default=None,
            help="Override the configured architecture.",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Verbosity, repeat for more (-vvv for debug messages).",
        )
        return cls(**vars(parser.parse_args(args)))

    def apply_overrides(self, configuration: Configuration) -> Configuration:
        """Apply command line overrides to a configuration.

        Args:
            configuration (Configuration): Loaded configuration.

        Returns:
            Configuration: Configuration with overridden values.
        """
        if self.arch is None:
            return configuration
        model = configuration.model.model_copy(update={"arch": self.arch})
        return configuration.model_copy(update={"model": model})
