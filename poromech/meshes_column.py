"""Sample meshes of a soil column made of two layers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from poromech.mesh import Cell, GeoKind, Mesh, Point


def _build(
    coords: Iterable[Sequence[float]],
    cells: Iterable[tuple[int, GeoKind, Sequence[int]]],
) -> Mesh:
    """Builds a 2D mesh with unmarked points numbered in order."""
    return Mesh(
        ndim=2,
        points=[Point(id=i, marker=0, coords=tuple(xy)) for i, xy in enumerate(coords)],
        cells=[
            Cell(id=i, attribute=att, kind=kind, points=tuple(pts))
            for i, (att, kind, pts) in enumerate(cells)
        ],
    )


def column_two_layers_qua4() -> Mesh:
    """Returns a Qua4 column 0.5 wide and 3.0 tall with two layers split at y = 1.0.

    The bottom layer (cells 0 and 1) has attribute 1; the top layer
    (cells 2 to 5) has attribute 2.
    """
    ys = (0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0)
    coords = [(x, y) for x in (0.0, 0.5) for y in ys]
    cells = [
        (1, (0, 7, 8, 1)),
        (1, (1, 8, 9, 2)),
        (2, (2, 9, 10, 3)),
        (2, (3, 10, 11, 4)),
        (2, (4, 11, 12, 5)),
        (2, (5, 12, 13, 6)),
    ]
    return _build(coords, [(att, GeoKind.QUA4, pts) for att, pts in cells])


def column_two_layers_qua9() -> Mesh:
    """Returns a Qua9 column 0.75 wide and 3.0 tall with two layers.

    The two bottom cells have attribute 2; the two top cells have attribute 1.
    """
    coords = [
        (0.000, 0.000),
        (0.750, 0.000),
        (0.000, 0.750),
        (0.750, 0.750),
        (0.000, 1.500),
        (0.750, 1.500),
        (0.000, 2.250),
        (0.750, 2.250),
        (0.000, 3.000),
        (0.750, 3.000),
        (0.375, 0.000),
        (0.375, 0.750),
        (0.375, 1.500),
        (0.375, 2.250),
        (0.375, 3.000),
        (0.000, 0.375),
        (0.750, 0.375),
        (0.000, 1.125),
        (0.750, 1.125),
        (0.000, 1.875),
        (0.750, 1.875),
        (0.000, 2.625),
        (0.750, 2.625),
        (0.375, 0.375),
        (0.375, 1.125),
        (0.375, 1.875),
        (0.375, 2.625),
    ]
    cells = [
        (2, (0, 1, 3, 2, 10, 16, 11, 15, 23)),
        (2, (2, 3, 5, 4, 11, 18, 12, 17, 24)),
        (1, (4, 5, 7, 6, 12, 20, 13, 19, 25)),
        (1, (6, 7, 9, 8, 13, 22, 14, 21, 26)),
    ]
    return _build(coords, [(att, GeoKind.QUA9, pts) for att, pts in cells])