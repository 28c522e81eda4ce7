"""Tensor specs."""

from oceanus.specs._utils import TensorSpecs

__all__ = ["TensorSpecs"]
