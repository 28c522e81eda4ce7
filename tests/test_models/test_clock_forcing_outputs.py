"""Test clock, forcing and outputs."""

from __future__ import annotations

import pytest

from oceanus.models.clock import Clock
from oceanus.models.core import Model
from oceanus.models.forcing import Forcing
from oceanus.models.instantiation import build_model
from oceanus.models.outputs import Diagnostic, OutputWriter


class CountingWriter(OutputWriter):
    """Writer counting its calls."""

    def __init__(self) -> None:
        """Instantiate the writer."""
        self.calls = 0

    def write(self, model: Model) -> None:  # noqa: ARG002
        """Count calls."""
        self.calls += 1


class NoOpDiagnostic(Diagnostic):
    """Diagnostic doing nothing."""

    def run(self, model: Model) -> None:
        """Do nothing."""


def test_clock_tick() -> None:
    """Test clock ticking."""
    clock = Clock(10.0, 3)
    clock.tick(2.5)
    clock.tick(2.5)
    assert clock.time == 15.0
    assert clock.iteration == 5


def test_forcing_is_stored_not_called() -> None:
    """Test that forcing functions are kept as given."""
    calls = []

    def heat(*args) -> float:  # noqa: ANN002
        calls.append(args)
        return 0.0

    forcing = Forcing(T=heat)
    model = build_model((2, 2, 2), (1.0, 1.0, 1.0), forcing=forcing)
    assert model.forcing.T is heat
    assert model.forcing.u is None
    assert calls == []


def test_forcing_must_be_callable() -> None:
    """Test that non callable forcing raise."""
    with pytest.raises(TypeError, match="Forcing for S"):
        build_model((2, 2, 2), (1.0, 1.0, 1.0), forcing=Forcing(S=3.0))


def test_outputs_are_stored() -> None:
    """Test output writers and diagnostics lists."""
    writer = CountingWriter()
    diagnostic = NoOpDiagnostic()
    model = build_model(
        (2, 2, 2),
        (1.0, 1.0, 1.0),
        output_writers=[writer],
        diagnostics=(diagnostic,),
    )
    assert model.output_writers == [writer]
    assert model.diagnostics == [diagnostic]
    assert writer.calls == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"output_writers": [object()]},
        {"diagnostics": [CountingWriter()]},
    ],
)
def test_invalid_outputs(kwargs: dict) -> None:
    """Test that non conforming entries raise."""
    with pytest.raises(TypeError):
        build_model((2, 2, 2), (1.0, 1.0, 1.0), **kwargs)
