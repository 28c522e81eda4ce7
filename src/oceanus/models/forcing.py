"""Forcing functions."""

# ruff: noqa: UP007
from __future__ import annotations

from typing import Callable, NamedTuple, Optional


class Forcing(NamedTuple):
    """Optional forcing functions for the u, v, w, T and S equations.

    The functions are stored only, the time stepper calls them.
    """

    u: Optional[Callable] = None
    v: Optional[Callable] = None
    w: Optional[Callable] = None
    T: Optional[Callable] = None
    S: Optional[Callable] = None

    def validate(self) -> None:
        """Check that every forcing is either None or callable.

        Raises:
            TypeError: If a forcing is neither None nor callable.
        """
        for name, func in zip(self._fields, self):
            if func is not None and not callable(func):
                msg = f"Forcing for {name} must be callable, got {func!r}."
                raise TypeError(msg)
