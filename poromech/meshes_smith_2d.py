"""Two-dimensional sample meshes from Smith, Griffiths and Margetts (2014), chapter 5."""

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


def smith_example_5d2_tri3() -> Mesh:
    """Returns the Tri3 mesh of Smith's Example 5.2 (Figure 5.2, page 173)."""
    coords = [(x, y) for y in (0.0, -0.5, -1.0) for x in (0.0, 0.5, 1.0)]
    conn = [
        (1, 0, 3), (3, 4, 1), (2, 1, 4), (4, 5, 2),
        (4, 3, 6), (6, 7, 4), (5, 4, 7), (7, 8, 5),
    ]
    return _build(coords, [(1, GeoKind.TRI3, pts) for pts in conn])


def smith_example_5d7_tri15() -> Mesh:
    """Returns the Tri15 mesh of Smith's Example 5.7 (Figure 5.7, page 178)."""
    xs = (0.0, 0.25, 0.5, 0.75, 1.0, 2.25, 3.5, 4.75, 6.0)
    ys = (0.0, -0.5, -1.0, -1.5, -2.0)
    coords = [(x, y) for x in xs for y in ys]
    conn = [
        (20, 0, 4, 10, 2, 12, 15, 5, 1, 3, 8, 16, 11, 6, 7),
        (4, 24, 20, 14, 22, 12, 9, 19, 23, 21, 16, 8, 13, 18, 17),
        (40, 20, 24, 30, 22, 32, 35, 25, 21, 23, 28, 36, 31, 26, 27),
        (24, 44, 40, 34, 42, 32, 29, 39, 43, 41, 36, 28, 33, 38, 37),
    ]
    return _build(coords, [(1, GeoKind.TRI15, pts) for pts in conn])


def smith_example_5d11_qua4() -> Mesh:
    """Returns the Qua4 mesh of Smith's Example 5.11 (Figure 5.11, page 180)."""
    coords = [(x, y) for x in (0.0, 10.0, 20.0, 30.0) for y in (0.0, -5.0, -10.0)]
    conn = [
        (1, 4, 3, 0), (2, 5, 4, 1), (4, 7, 6, 3),
        (5, 8, 7, 4), (7, 10, 9, 6), (8, 11, 10, 7),
    ]
    return _build(coords, [(1, GeoKind.QUA4, pts) for pts in conn])


def smith_example_5d15_qua8() -> Mesh:
    """Returns the Qua8 mesh of Smith's Example 5.15 (Figure 5.15, page 183)."""
    full_row = (0.0, 1.5, 3.0, 4.5, 6.0)
    mid_row = (0.0, 3.0, 6.0)
    ys = (0.0, -1.5, -3.0, -4.5, -6.0, -7.5, -9.0)
    coords = [
        (x, y)
        for row, y in enumerate(ys)
        for x in (full_row if row % 2 == 0 else mid_row)
    ]
    conn = [
        (8, 10, 2, 0, 9, 6, 1, 5),
        (10, 12, 4, 2, 11, 7, 3, 6),
        (16, 18, 10, 8, 17, 14, 9, 13),
        (18, 20, 12, 10, 19, 15, 11, 14),
        (24, 26, 18, 16, 25, 22, 17, 21),
        (26, 28, 20, 18, 27, 23, 19, 22),
    ]
    return _build(coords, [(1, GeoKind.QUA8, pts) for pts in conn])


def smith_example_5d17_qua4() -> Mesh:
    """Returns the two-material Qua4 mesh of Smith's Example 5.17 (Figure 5.17, page 187)."""
    coords = [(x, y) for x in (0.0, 4.0, 10.0, 30.0) for y in (0.0, -4.0, -10.0)]
    cells = [
        (1, (1, 4, 3, 0)),
        (2, (2, 5, 4, 1)),
        (1, (4, 7, 6, 3)),
        (2, (5, 8, 7, 4)),
        (1, (7, 10, 9, 6)),
        (2, (8, 11, 10, 7)),
    ]
    return _build(coords, [(att, GeoKind.QUA4, pts) for att, pts in cells])


def smith_example_5d27_qua9() -> Mesh:
    """Returns the Qua9 mesh of Smith's Example 5.27 (Figure 5.27, page 200)."""
    xs = (0.0, 1.5, 3.0, 4.5, 6.0)
    ys = (0.0, -1.5, -3.0, -4.5, -6.0, -7.5, -9.0)
    coords = [(x, y) for y in ys for x in xs]
    conn = [
        (10, 12, 2, 0, 11, 7, 1, 5, 6),
        (20, 22, 12, 10, 21, 17, 11, 15, 16),
        (30, 32, 22, 20, 31, 27, 21, 25, 26),
        (12, 14, 4, 2, 13, 9, 3, 7, 8),
        (22, 24, 14, 12, 23, 19, 13, 17, 18),
        (32, 34, 24, 22, 33, 29, 23, 27, 28),
    ]
    return _build(coords, [(1, GeoKind.QUA9, pts) for pts in conn])