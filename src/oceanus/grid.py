"""Regular cartesian staggered grids.

Cell centers and faces along each axis:

    face 0    center 0    face 1    center 1    face 2 ...  face n
      |-----------o-----------|-----------o-----------|  ...  |

Fields store n values per axis: index i is either center i or face i (the
face on the west/south/bottom side of cell i). The last face of a bounded
axis (east/north wall, sea surface) lives in the halo.

The vertical axis points upward: the bottom face is z = -Lz (face 0) and
the surface face is z = 0 (face Nz).
"""

from __future__ import annotations

import math
from functools import cached_property
from typing import TYPE_CHECKING

import torch

from oceanus.exceptions import FlatAxisError, InvalidGridError
from oceanus.specs import defaults
from oceanus.utils.names import Name

if TYPE_CHECKING:
    from oceanus.masks import Masks

AXES = ("x", "y", "z")


class Topology(Name):
    """Axis topology."""

    PERIODIC = "periodic"
    BOUNDED = "bounded"
    FLAT = "flat"


class Staggering(Name):
    """Node position within a cell, along one axis."""

    CENTER = "center"
    FACE = "face"


class GridAxis:
    """Single axis of a regular grid."""

    def __init__(
        self,
        *,
        name: str,
        n: int,
        length: float,
        topology: Topology,
        halo: int,
        origin: float,
        dtype: torch.dtype,
        device: torch.device,
    ) -> None:
        """Instantiate the axis.

        Args:
            name (str): Axis name ('x', 'y' or 'z').
            n (int): Number of cells.
            length (float): Axis extent (ignored if flat).
            topology (Topology): Axis topology.
            halo (int): Halo width (ignored if flat).
            origin (float): Coordinate of face 0.
            dtype (torch.dtype): Coordinates dtype.
            device (torch.device): Coordinates device.
        """
        self._name = name
        self._topology = topology
        specs = {"dtype": dtype, "device": device}
        if self.is_flat:
            self._n = 1
            self._length = 0.0
            self._halo = 0
            self._faces = torch.zeros(2, **specs)
            self._centers = torch.zeros(1, **specs)
            return
        self._n = n
        self._length = float(length)
        self._halo = halo
        self._delta = self._length / n
        self._faces = origin + self._delta * torch.arange(n + 1, **specs)
        self._centers = 0.5 * (self._faces[1:] + self._faces[:-1])

    def __repr__(self) -> str:
        """String representation of the axis."""
        if self.is_flat:
            return f"{self.name}: Flat"
        return (
            f"{self.name}: {self.topology.value}, {self.n} cells, "
            f"Δ{self.name} = {self._delta}, halo = {self.halo}"
        )

    @property
    def name(self) -> str:
        """Axis name."""
        return self._name

    @property
    def n(self) -> int:
        """Number of cells."""
        return self._n

    @property
    def length(self) -> float:
        """Axis extent."""
        return self._length

    @property
    def halo(self) -> int:
        """Halo width."""
        return self._halo

    @property
    def topology(self) -> Topology:
        """Axis topology."""
        return self._topology

    @property
    def is_flat(self) -> bool:
        """Whether the axis is flat."""
        return self._topology == Topology.FLAT

    @property
    def centers(self) -> torch.Tensor:
        """Cell centers coordinates.

        └── (n,)-shaped
        """
        return self._centers

    @property
    def faces(self) -> torch.Tensor:
        """Cell faces coordinates.

        └── (n+1,)-shaped
        """
        return self._faces

    @property
    def delta(self) -> float:
        """Uniform spacing."""
        self._raise_if_flat()
        return self._delta

    @cached_property
    def dc(self) -> torch.Tensor:
        """Face-to-face spacing of cells (located at centers).

        └── (n,)-shaped
        """
        self._raise_if_flat()
        return torch.full_like(self._centers, self._delta)

    @cached_property
    def df(self) -> torch.Tensor:
        """Center-to-center spacing (located at faces).

        └── (n+1,)-shaped
        """
        self._raise_if_flat()
        return torch.full_like(self._faces, self._delta)

    def nodes(self, staggering: Staggering) -> torch.Tensor:
        """Coordinates of the n stored nodes for a given staggering.

        Args:
            staggering (Staggering): Center or face.

        Returns:
            torch.Tensor: (n,)-shaped coordinates.
        """
        if staggering == Staggering.CENTER:
            return self._centers
        return self._faces[: self._n]

    def _raise_if_flat(self) -> None:
        """Raise an error if the axis is flat.

        Raises:
            FlatAxisError: If the axis is flat.
        """
        if self.is_flat:
            msg = f"The {self.name} axis is flat: spacing is undefined."
            raise FlatAxisError(msg)


class RegularCartesianGrid:
    """Regular cartesian grid, immutable once built."""

    def __init__(
        self,
        size: tuple[int, int, int],
        extent: tuple[float, float, float],
        *,
        topology: tuple[str | Topology, str | Topology, str | Topology] = (
            Topology.PERIODIC,
            Topology.PERIODIC,
            Topology.BOUNDED,
        ),
        halo: int = 1,
        mask: torch.Tensor | None = None,
        dtype: torch.dtype | str | None = None,
        device: torch.device | str | None = None,
    ) -> None:
        """Instantiate the grid.

        Args:
            size (tuple[int, int, int]): Number of cells (Nx, Ny, Nz).
            extent (tuple[float, float, float]): Domain size (Lx, Ly, Lz),
                in meters.
            topology (tuple[str | Topology, ...], optional): Axes
                topologies. Defaults to (periodic, periodic, bounded).
            halo (int, optional): Halo width for non-flat axes, at most
                the number of cells of each of them and at least 1 when z
                is not flat. Defaults to 1.
            mask (torch.Tensor | None, optional): Active cells mask,
                (Nx, Ny, Nz)-shaped. Defaults to None (all active).
            dtype (torch.dtype | str | None, optional): Coordinates dtype.
                Defaults to None.
            device (torch.device | str | None, optional): Device.
                Defaults to None.
        """
        topologies = self._validate(size, extent, topology, halo)
        self._specs = defaults.get(dtype=dtype, device=device)
        origins = (0.0, 0.0, -float(extent[2]))
        self._axes = tuple(
            GridAxis(
                name=name,
                n=n,
                length=length,
                topology=topo,
                halo=halo,
                origin=origin,
                **self._specs,
            )
            for name, n, length, topo, origin in zip(
                AXES,
                size,
                extent,
                topologies,
                origins,
            )
        )
        self._mask = self._validate_mask(mask)

    def __repr__(self) -> str:
        """String representation of the grid."""
        lines = [
            f"RegularCartesianGrid{{{self.dtype}}} on {self.device}",
            f"├── {self.x}",
            f"├── {self.y}",
            f"└── {self.z}",
        ]
        return "\n".join(lines)

    @staticmethod
    def _validate(
        size: tuple[int, int, int],
        extent: tuple[float, float, float],
        topology: tuple[str | Topology, str | Topology, str | Topology],
        halo: int,
    ) -> tuple[Topology, Topology, Topology]:
        """Validate grid parameters.

        Args:
            size (tuple[int, int, int]): Number of cells.
            extent (tuple[float, float, float]): Domain size.
            topology (tuple[str | Topology, ...]): Topologies.
            halo (int): Halo width.

        Raises:
            InvalidGridError: If any parameter is invalid.

        Returns:
            tuple[Topology, Topology, Topology]: Parsed topologies.
        """
        for name, value in (
            ("size", size),
            ("extent", extent),
            ("topology", topology),
        ):
            if len(value) != len(AXES):
                msg = f"Grid {name} must have 3 entries, got {value}."
                raise InvalidGridError(msg)
        try:
            topologies = tuple(Topology.parse(t) for t in topology)
        except ValueError as e:
            raise InvalidGridError(str(e)) from e
        if isinstance(halo, bool) or not isinstance(halo, int) or halo < 0:
            msg = f"Halo must be a non-negative integer, got {halo!r}."
            raise InvalidGridError(msg)
        for name, n, length, topo in zip(AXES, size, extent, topologies):
            if isinstance(n, bool) or not isinstance(n, int):
                msg = f"N{name} must be an integer, got {n!r}."
                raise InvalidGridError(msg)
            if topo == Topology.FLAT:
                if n != 1:
                    msg = f"Flat axis {name} must have 1 cell, got {n}."
                    raise InvalidGridError(msg)
                continue
            if n <= 0:
                msg = f"N{name} must be positive, got {n}."
                raise InvalidGridError(msg)
            if not math.isfinite(length) or length <= 0:
                msg = f"L{name} must be positive and finite, got {length}."
                raise InvalidGridError(msg)
            if halo > n:
                msg = (
                    f"Halo ({halo}) can't be wider than N{name} ({n}) "
                    f"on non-flat axis {name}."
                )
                raise InvalidGridError(msg)
            if name == "z" and halo < 1:
                msg = "Non-flat z axis requires a halo of at least 1."
                raise InvalidGridError(msg)
        return topologies

    def _validate_mask(self, mask: torch.Tensor | None) -> torch.Tensor:
        """Validate the active cells mask.

        Args:
            mask (torch.Tensor | None): Mask.

        Raises:
            InvalidGridError: If the mask shape doesn't match the grid.

        Returns:
            torch.Tensor: Mask, 1 for active cells and 0 otherwise.
        """
        if mask is None:
            return torch.ones(self.interior_shape, **self._specs)
        if tuple(mask.shape) != self.interior_shape:
            msg = (
                f"Mask must be {self.interior_shape}-shaped, "
                f"got {tuple(mask.shape)}."
            )
            raise InvalidGridError(msg)
        return (mask != 0).to(**self._specs)

    @property
    def dtype(self) -> torch.dtype:
        """Coordinates dtype."""
        return self._specs["dtype"]

    @property
    def device(self) -> torch.device:
        """Device."""
        return self._specs["device"]

    @property
    def x(self) -> GridAxis:
        """X axis."""
        return self._axes[0]

    @property
    def y(self) -> GridAxis:
        """Y axis."""
        return self._axes[1]

    @property
    def z(self) -> GridAxis:
        """Z axis."""
        return self._axes[2]

    @property
    def axes(self) -> tuple[GridAxis, GridAxis, GridAxis]:
        """X, Y and Z axes."""
        return self._axes

    def axis(self, name: str) -> GridAxis:
        """Axis from its name.

        Args:
            name (str): 'x', 'y' or 'z'.

        Returns:
            GridAxis: Axis.
        """
        return self._axes[AXES.index(name)]

    def is_flat(self, name: str) -> bool:
        """Whether a given axis is flat.

        Args:
            name (str): 'x', 'y' or 'z'.

        Returns:
            bool: True if flat.
        """
        return self.axis(name).is_flat

    @property
    def topology(self) -> tuple[Topology, Topology, Topology]:
        """Axes topologies."""
        return tuple(a.topology for a in self._axes)

    @property
    def Nx(self) -> int:  # noqa: N802
        """Number of cells in the x direction."""
        return self.x.n

    @property
    def Ny(self) -> int:  # noqa: N802
        """Number of cells in the y direction."""
        return self.y.n

    @property
    def Nz(self) -> int:  # noqa: N802
        """Number of cells in the z direction."""
        return self.z.n

    @property
    def Lx(self) -> float:  # noqa: N802
        """Domain length in the x direction."""
        return self.x.length

    @property
    def Ly(self) -> float:  # noqa: N802
        """Domain length in the y direction."""
        return self.y.length

    @property
    def Lz(self) -> float:  # noqa: N802
        """Domain depth."""
        return self.z.length

    @property
    def size(self) -> tuple[int, int, int]:
        """(Nx, Ny, Nz)."""
        return tuple(a.n for a in self._axes)

    @property
    def halo(self) -> tuple[int, int, int]:
        """(Hx, Hy, Hz)."""
        return tuple(a.halo for a in self._axes)

    @property
    def interior_shape(self) -> tuple[int, int, int]:
        """Shape of fields interior."""
        return self.size

    @property
    def padded_shape(self) -> tuple[int, int, int]:
        """Shape of fields data, including halos."""
        return tuple(a.n + 2 * a.halo for a in self._axes)

    @property
    def xC(self) -> torch.Tensor:  # noqa: N802
        """X coordinates of cell centers."""
        return self.x.centers

    @property
    def xF(self) -> torch.Tensor:  # noqa: N802
        """X coordinates of cell faces."""
        return self.x.faces

    @property
    def yC(self) -> torch.Tensor:  # noqa: N802
        """Y coordinates of cell centers."""
        return self.y.centers

    @property
    def yF(self) -> torch.Tensor:  # noqa: N802
        """Y coordinates of cell faces."""
        return self.y.faces

    @property
    def zC(self) -> torch.Tensor:  # noqa: N802
        """Z coordinates of cell centers."""
        return self.z.centers

    @property
    def zF(self) -> torch.Tensor:  # noqa: N802
        """Z coordinates of cell faces."""
        return self.z.faces

    @property
    def mask(self) -> torch.Tensor:
        """Active cells mask at cell centers."""
        return self._mask

    @cached_property
    def masks(self) -> Masks:
        """Active nodes masks at every staggered location."""
        from oceanus.masks import Masks  # noqa: PLC0415

        return Masks(self)
