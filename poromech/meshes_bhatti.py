"""Sample meshes from Bhatti (2005), Fundamental Finite Element Analysis and Applications."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from poromech.mesh import Cell, GeoKind, Mesh, Point


def _build(
    points: Iterable[tuple[int, Sequence[float]]],
    cells: Iterable[tuple[int, GeoKind, Sequence[int]]],
) -> Mesh:
    """Builds a 2D mesh from (marker, coords) points and (attribute, kind, points) cells."""
    return Mesh(
        ndim=2,
        points=[
            Point(id=i, marker=marker, coords=tuple(xy))
            for i, (marker, xy) in enumerate(points)
        ],
        cells=[
            Cell(id=i, attribute=att, kind=kind, points=tuple(pts))
            for i, (att, kind, pts) in enumerate(cells)
        ],
    )


def bhatti_example_1d4_truss() -> Mesh:
    """Returns the rod (Lin2) truss mesh of Bhatti's Example 1.4 (page 25)."""
    points = [
        (-100, (0.0, 0.0)),
        (-200, (1500.0, 3500.0)),
        (0, (0.0, 5000.0)),
        (-300, (5000.0, 5000.0)),
    ]
    cells = [
        (1, GeoKind.LIN2, (0, 1)),
        (1, GeoKind.LIN2, (1, 3)),
        (2, GeoKind.LIN2, (0, 2)),
        (2, GeoKind.LIN2, (2, 3)),
        (3, GeoKind.LIN2, (2, 1)),
    ]
    return _build(points, cells)


def bhatti_example_1d5_heat() -> Mesh:
    """Returns the Tri3 heat-transfer mesh of Bhatti's Example 1.5 (page 28)."""
    points = [
        (-100, (0.0, 0.0)),
        (0, (0.2, 0.0)),
        (0, (0.2, 0.3)),
        (-200, (0.0, 0.1)),
        (0, (0.1, 0.1)),
    ]
    conn = [(0, 1, 4), (1, 2, 4), (3, 4, 2), (0, 4, 3)]
    return _build(points, [(1, GeoKind.TRI3, pts) for pts in conn])


def bhatti_example_6d22_heat() -> Mesh:
    """Returns the Qua8 heat-transfer mesh of Bhatti's Example 6.22 (page 449)."""
    coords = [
        (0.0, 0.03),
        (0.015, 0.03),
        (0.03, 0.03),
        (0.03, 0.0225),
        (0.03, 0.015),
        (0.045, 0.015),
        (0.06, 0.015),
        (0.06, 0.0075),
        (0.06, 0.0),
        (0.03, 0.0),
        (0.0, 0.0),
        (0.0, 0.015),
        (0.015, 0.0075),
    ]
    conn = [
        (10, 4, 2, 0, 12, 3, 1, 11),
        (10, 8, 6, 4, 9, 7, 5, 12),
    ]
    return _build(((0, xy) for xy in coords), [(1, GeoKind.QUA8, pts) for pts in conn])


def bhatti_example_1d6_bracket() -> Mesh:
    """Returns the Tri3 plane-stress bracket mesh of Bhatti's Example 1.6 (page 32)."""
    points = [
        (-100, (0.0, 0.0)),
        (-100, (0.0, 2.0)),
        (0, (2.0, 0.0)),
        (0, (2.0, 1.5)),
        (0, (4.0, 0.0)),
        (0, (4.0, 1.0)),
    ]
    conn = [(0, 2, 3), (3, 1, 0), (2, 4, 5), (5, 3, 2)]
    return _build(points, [(1, GeoKind.TRI3, pts) for pts in conn])