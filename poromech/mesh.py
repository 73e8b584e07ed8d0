"""Mesh data structures: points, cells and their geometric kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GeoKind(Enum):
    """Geometric kind of a cell (shape and number of nodes)."""

    LIN2 = "Lin2"
    TRI3 = "Tri3"
    TRI15 = "Tri15"
    QUA4 = "Qua4"
    QUA8 = "Qua8"
    QUA9 = "Qua9"
    TET4 = "Tet4"
    HEX20 = "Hex20"

    def nnode(self) -> int:
        """Returns the number of nodes of this kind of cell."""
        return _NNODE[self]


_NNODE = {
    GeoKind.LIN2: 2,
    GeoKind.TRI3: 3,
    GeoKind.TRI15: 15,
    GeoKind.QUA4: 4,
    GeoKind.QUA8: 8,
    GeoKind.QUA9: 9,
    GeoKind.TET4: 4,
    GeoKind.HEX20: 20,
}


@dataclass
class Point:
    """A mesh point with an identifier, a marker and its coordinates."""

    id: int
    marker: int
    coords: tuple[float, ...]

    def __post_init__(self) -> None:
        self.coords = tuple(float(x) for x in self.coords)


@dataclass
class Cell:
    """A mesh cell with an attribute, a geometric kind and its point ids."""

    id: int
    attribute: int
    kind: GeoKind
    points: tuple[int, ...]

    def __post_init__(self) -> None:
        self.points = tuple(self.points)
        expected = self.kind.nnode()
        if len(self.points) != expected:
            raise ValueError(
                f"cell {self.id} of kind {self.kind.value} needs {expected} points, "
                f"got {len(self.points)}"
            )


@dataclass
class Mesh:
    """A finite element mesh in two or three dimensions."""

    ndim: int
    points: list[Point] = field(default_factory=list)
    cells: list[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.ndim not in (2, 3):
            raise ValueError(f"ndim must be 2 or 3, got {self.ndim}")
        self.points = list(self.points)
        self.cells = list(self.cells)
        for point in self.points:
            if len(point.coords) != self.ndim:
                raise ValueError(
                    f"point {point.id} has {len(point.coords)} coordinates; expected {self.ndim}"
                )
        npoint = len(self.points)
        for cell in self.cells:
            bad = [p for p in cell.points if not 0 <= p < npoint]
            if bad:
                raise ValueError(f"cell {cell.id} refers to missing points {bad}")

    @staticmethod
    def empty(ndim: int) -> Mesh:
        """Returns a mesh with no points and no cells."""
        return Mesh(ndim)

    def npoint(self) -> int:
        """Returns the number of points."""
        return len(self.points)

    def ncell(self) -> int:
        """Returns the number of cells."""
        return len(self.cells)