"""Simulation clock."""

from __future__ import annotations


class Clock:
    """Simulation time and iteration count."""

    def __init__(self, time: float = 0, iteration: int = 0) -> None:
        """Instantiate the clock.

        Args:
            time (float, optional): Time (s). Defaults to 0.
            iteration (int, optional): Iteration. Defaults to 0.
        """
        self._time = time
        self._iteration = iteration

    def __repr__(self) -> str:
        """String representation of the clock."""
        return f"Clock(time={self._time}, iteration={self._iteration})"

    @property
    def time(self) -> float:
        """Simulation time."""
        return self._time

    @property
    def iteration(self) -> int:
        """Iteration count."""
        return self._iteration

    def tick(self, dt: float) -> None:
        """Advance the clock by one time step.

        Args:
            dt (float): Time step (s).
        """
        self._time += dt
        self._iteration += 1
