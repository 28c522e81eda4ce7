"""Models."""

from oceanus.models.clock import Clock
from oceanus.models.core import Model
from oceanus.models.forcing import Forcing
from oceanus.models.instantiation import build_model, instantiate_model
from oceanus.models.outputs import Diagnostic, OutputWriter

__all__ = [
    "Clock",
    "Diagnostic",
    "Forcing",
    "Model",
    "OutputWriter",
    "build_model",
    "instantiate_model",
]
