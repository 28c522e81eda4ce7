"""Configuration Tools."""

from oceanus.configs.core import Configuration

__all__ = ["Configuration"]
