"""Output writers and diagnostics."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from oceanus.models.core import Model

T = TypeVar("T")


class OutputWriter(metaclass=ABCMeta):
    """Base class for output writers."""

    @abstractmethod
    def write(self, model: Model) -> None:
        """Write the model state.

        Args:
            model (Model): Model.
        """


class Diagnostic(metaclass=ABCMeta):
    """Base class for diagnostics."""

    @abstractmethod
    def run(self, model: Model) -> None:
        """Compute the diagnostic on the model state.

        Args:
            model (Model): Model.
        """


def validate_entries(entries: Iterable[T] | None, kind: type[T]) -> list[T]:
    """Check that every entry is an instance of a given base class.

    Args:
        entries (Iterable[T] | None): Entries.
        kind (type[T]): Expected base class.

    Raises:
        TypeError: If an entry is not an instance of kind.

    Returns:
        list[T]: Entries, as a new list.
    """
    entries = [] if entries is None else list(entries)
    for entry in entries:
        if not isinstance(entry, kind):
            msg = f"Expected {kind.__name__} instances, got {entry!r}."
            raise TypeError(msg)
    return entries
