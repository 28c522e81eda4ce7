"""Execution backends and kernel dispatch.

Kernels are column-parallel: a single dispatch covers every horizontal
column (i, j) of a grid at once. The returned Event is the only join
point; results must not be read before `Event.wait()` returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import torch
from typing_extensions import ParamSpec

from oceanus.exceptions import (
    ArchitectureUnavailableError,
    UnsupportedArchitectureError,
)
from oceanus.logging import getLogger
from oceanus.utils.names import Name

if TYPE_CHECKING:
    from collections.abc import Callable

logger = getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


class Architecture(Name):
    """Supported architectures."""

    CPU = "cpu"
    GPU = "gpu"


def resolve_architecture(arch: str | Architecture) -> Architecture:
    """Validate an architecture selector.

    Args:
        arch (str | Architecture): Architecture or its name.

    Raises:
        UnsupportedArchitectureError: If the selector is not supported.
        ArchitectureUnavailableError: If GPU is requested without CUDA.

    Returns:
        Architecture: Architecture.
    """
    try:
        architecture = Architecture.parse(arch)
    except ValueError:
        msg = (
            f"Unsupported architecture: {arch!r}. "
            f"Supported architectures are {', '.join(Architecture.values())}."
        )
        raise UnsupportedArchitectureError(msg) from None
    if architecture == Architecture.GPU and not torch.cuda.is_available():
        msg = "Architecture 'gpu' was requested but CUDA is not available."
        raise ArchitectureUnavailableError(msg)
    return architecture


def get_device(arch: Architecture) -> torch.device:
    """Torch device backing an architecture.

    Args:
        arch (Architecture): Architecture.

    Raises:
        UnsupportedArchitectureError: If the architecture is unknown.

    Returns:
        torch.device: Device.
    """
    if arch == Architecture.CPU:
        return torch.device("cpu")
    if arch == Architecture.GPU:
        return torch.device("cuda")
    msg = f"No device for architecture {arch!r}."
    raise UnsupportedArchitectureError(msg)


class Event:
    """Completion handle of a kernel dispatch."""

    def __init__(
        self,
        arch: Architecture,
        cuda_event: torch.cuda.Event | None = None,
    ) -> None:
        """Instantiate the event.

        Args:
            arch (Architecture): Architecture the kernel ran on.
            cuda_event (torch.cuda.Event | None, optional): Recorded CUDA
                event, only for GPU dispatches. Defaults to None.
        """
        self._arch = arch
        self._cuda_event = cuda_event

    @property
    def arch(self) -> Architecture:
        """Architecture."""
        return self._arch

    @property
    def done(self) -> bool:
        """Whether the dispatch has completed."""
        if self._cuda_event is None:
            return True
        return self._cuda_event.query()

    def wait(self) -> None:
        """Block until the dispatch has completed."""
        if self._cuda_event is not None:
            self._cuda_event.synchronize()


def launch(
    arch: Architecture,
    kernel: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Event:
    """Dispatch a column-parallel kernel on an architecture.

    Args:
        arch (Architecture): Architecture.
        kernel (Callable[P, T]): Kernel, vectorized over columns.
        *args (P.args): Kernel arguments.
        **kwargs (P.kwargs): Kernel keyword arguments.

    Raises:
        UnsupportedArchitectureError: If the architecture is unknown.

    Returns:
        Event: Completion event.
    """
    logger.debug("Launching %s on %s.", kernel.__name__, arch.value)
    if arch == Architecture.CPU:
        kernel(*args, **kwargs)
        return Event(arch)
    if arch == Architecture.GPU:
        kernel(*args, **kwargs)
        event = torch.cuda.Event()
        event.record()
        return Event(arch, event)
    msg = f"Unable to launch kernels on {arch!r}."
    raise UnsupportedArchitectureError(msg)
