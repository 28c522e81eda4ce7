"""Test architectures and kernel dispatch."""

import pytest
import torch

from oceanus.architectures import (
    Architecture,
    Event,
    get_device,
    launch,
    resolve_architecture,
)
from oceanus.exceptions import (
    ArchitectureUnavailableError,
    ConfigurationError,
    UnsupportedArchitectureError,
)


@pytest.mark.parametrize("arch", ["cpu", "CPU", Architecture.CPU])
def test_resolve_cpu(arch: str) -> None:
    """Test CPU selectors."""
    assert resolve_architecture(arch) == Architecture.CPU


@pytest.mark.parametrize("arch", ["tpu", "", "cuda"])
def test_unsupported_architecture(arch: str) -> None:
    """Test that unsupported selectors fail loudly."""
    with pytest.raises(UnsupportedArchitectureError, match="cpu, gpu"):
        resolve_architecture(arch)


def test_unsupported_is_configuration_error() -> None:
    """Test the error hierarchy."""
    with pytest.raises(ConfigurationError):
        resolve_architecture("tpu")


def test_unavailable_gpu(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test requesting a GPU without CUDA."""
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    with pytest.raises(ArchitectureUnavailableError):
        resolve_architecture("gpu")


def test_get_device() -> None:
    """Test devices of architectures."""
    assert get_device(Architecture.CPU) == torch.device("cpu")
    assert get_device(Architecture.GPU) == torch.device("cuda")


def test_launch_on_cpu() -> None:
    """Test that CPU dispatches run synchronously."""
    x = torch.zeros(3)

    def kernel(q: torch.Tensor, *, value: float) -> None:
        q.fill_(value)

    event = launch(Architecture.CPU, kernel, x, value=2.0)
    assert isinstance(event, Event)
    assert event.arch == Architecture.CPU
    assert event.done
    event.wait()
    torch.testing.assert_close(x, torch.full((3,), 2.0))


@pytest.mark.gpu
def test_launch_on_gpu() -> None:
    """Test GPU dispatches."""
    x = torch.zeros(3, device="cuda")
    event = launch(Architecture.GPU, torch.Tensor.fill_, x, 2.0)
    event.wait()
    assert event.done
    torch.testing.assert_close(x.cpu(), torch.full((3,), 2.0))
