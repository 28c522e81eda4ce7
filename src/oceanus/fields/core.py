"""Fields anchored on staggered grid locations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, NamedTuple, Union

import torch

from oceanus.exceptions import InvalidFieldDataError
from oceanus.grid import Staggering

if TYPE_CHECKING:
    from oceanus.grid import RegularCartesianGrid

FieldValue = Union[
    float,
    torch.Tensor,
    Callable[[torch.Tensor, torch.Tensor, torch.Tensor], torch.Tensor],
]


class Location(NamedTuple):
    """Staggered location of a field, one staggering per axis."""

    x: Staggering
    y: Staggering
    z: Staggering

    def __repr__(self) -> str:
        """Short representation, e.g. 'fcc'."""
        return "".join(s.value[0] for s in self)


C = Staggering.CENTER
F = Staggering.FACE

CELL = Location(C, C, C)
FACE_X = Location(F, C, C)
FACE_Y = Location(C, F, C)
FACE_Z = Location(C, C, F)
EDGE_XY = Location(F, F, C)


class Field:
    """Three-dimensional, halo-padded values at a staggered location.

    Data is (Nx+2Hx, Ny+2Hy, Nz+2Hz)-shaped and never resized: every
    operation writes in place.
    """

    def __init__(
        self,
        grid: RegularCartesianGrid,
        location: Location = CELL,
        *,
        name: str = "",
        dtype: torch.dtype | None = None,
        device: torch.device | None = None,
    ) -> None:
        """Instantiate the field, filled with zeros.

        Args:
            grid (RegularCartesianGrid): Grid.
            location (Location, optional): Staggered location.
                Defaults to CELL.
            name (str, optional): Field name. Defaults to "".
            dtype (torch.dtype | None, optional): Dtype, defaults to the
                grid's.
            device (torch.device | None, optional): Device, defaults to the
                grid's.
        """
        self._grid = grid
        self._location = location
        self._name = name
        self._data = torch.zeros(
            grid.padded_shape,
            dtype=dtype or grid.dtype,
            device=device or grid.device,
        )
        self._interior = self._data[self.interior_slices]

    def __repr__(self) -> str:
        """String representation of the field."""
        name = self._name or "Field"
        return (
            f"{name} at {self.location!r} "
            f"- {tuple(self._data.shape)} {self.dtype} on {self.device}"
        )

    @property
    def name(self) -> str:
        """Field name."""
        return self._name

    @property
    def grid(self) -> RegularCartesianGrid:
        """Grid."""
        return self._grid

    @property
    def location(self) -> Location:
        """Staggered location."""
        return self._location

    @property
    def data(self) -> torch.Tensor:
        """Data, including halos."""
        return self._data

    @property
    def interior(self) -> torch.Tensor:
        """View on the data without halos.

        └── (Nx, Ny, Nz)-shaped
        """
        return self._interior

    @property
    def dtype(self) -> torch.dtype:
        """Data type."""
        return self._data.dtype

    @property
    def device(self) -> torch.device:
        """Device."""
        return self._data.device

    @property
    def interior_slices(self) -> tuple[slice, slice, slice]:
        """Slices selecting the interior within data."""
        return tuple(
            slice(axis.halo, axis.halo + axis.n) for axis in self._grid.axes
        )

    def nodes(self) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        """Node coordinates at the field location.

        Returns:
            tuple[torch.Tensor, torch.Tensor, torch.Tensor]: x, y and z,
                respectively (Nx,1,1), (1,Ny,1) and (1,1,Nz)-shaped.
        """
        x, y, z = (
            axis.nodes(s).to(device=self.device)
            for axis, s in zip(self._grid.axes, self._location)
        )
        return x.view(-1, 1, 1), y.view(1, -1, 1), z.view(1, 1, -1)

    def fill(self, value: float) -> None:
        """Fill the whole data, halos included.

        Args:
            value (float): Value.
        """
        self._data.fill_(value)

    def set(self, value: FieldValue) -> None:
        """Set interior values.

        Args:
            value (FieldValue): Scalar, tensor (interior or data shaped) or
                function of the node coordinates (x, y, z).

        Raises:
            InvalidFieldDataError: If the tensor shape matches neither
                the interior nor the data.
        """
        if callable(value):
            x, y, z = self.nodes()
            value = torch.broadcast_to(value(x, y, z), self._interior.shape)
        if not isinstance(value, torch.Tensor):
            self._interior.fill_(value)
            return
        if tuple(value.shape) == tuple(self._data.shape):
            self._data.copy_(value)
            return
        try:
            self._interior.copy_(value)
        except RuntimeError as e:
            msg = (
                f"Unable to write a {tuple(value.shape)}-shaped tensor into "
                f"a {tuple(self._interior.shape)}-shaped interior."
            )
            raise InvalidFieldDataError(msg) from e
