"""Three-dimensional sample meshes from Smith, Griffiths and Margetts (2014)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from poromech.mesh import Cell, GeoKind, Mesh, Point


def _build(
    coords: Iterable[Sequence[float]],
    cells: Iterable[tuple[int, GeoKind, Sequence[int]]],
) -> Mesh:
    """Builds a 3D mesh with unmarked points numbered in order."""
    return Mesh(
        ndim=3,
        points=[Point(id=i, marker=0, coords=tuple(xyz)) for i, xyz in enumerate(coords)],
        cells=[
            Cell(id=i, attribute=att, kind=kind, points=tuple(pts))
            for i, (att, kind, pts) in enumerate(cells)
        ],
    )


def smith_example_4d22_frame_3d() -> Mesh:
    """Returns the 3D frame (Lin2) mesh of Smith's Example 4.22 (Figure 4.22, page 138)."""
    coords = [(0.0, 5.0, 5.0), (5.0, 5.0, 5.0), (5.0, 5.0, 0.0), (5.0, 0.0, 0.0)]
    conn = [(1, 0), (2, 1), (3, 2)]
    return _build(coords, [(1, GeoKind.LIN2, pts) for pts in conn])


def _hex20_coords() -> list[tuple[float, float, float]]:
    full_z = (0.0, -1.0, -2.0)
    coords = []
    for iy in range(7):
        y = 0.5 * iy
        if iy % 2 == 0:
            for iz in range(5):
                z = -0.5 * iz
                xs = (0.0, 0.25, 0.5) if iz % 2 == 0 else (0.0, 0.5)
                coords.extend((x, y, z) for x in xs)
        else:
            coords.extend((x, y, z) for z in full_z for x in (0.0, 0.5))
    return coords


def smith_example_5d24_hex20() -> Mesh:
    """Returns the two-material Hex20 mesh of Smith's Example 5.24 (Figure 5.24, page 195)."""
    cells = [
        (1, (5, 7, 26, 24, 0, 2, 21, 19, 6, 16, 25, 15, 1, 14, 20, 13, 3, 4, 23, 22)),
        (2, (10, 12, 31, 29, 5, 7, 26, 24, 11, 18, 30, 17, 6, 16, 25, 15, 8, 9, 28, 27)),
        (1, (24, 26, 45, 43, 19, 21, 40, 38, 25, 35, 44, 34, 20, 33, 39, 32, 22, 23, 42, 41)),
        (2, (29, 31, 50, 48, 24, 26, 45, 43, 30, 37, 49, 36, 25, 35, 44, 34, 27, 28, 47, 46)),
        (1, (43, 45, 64, 62, 38, 40, 59, 57, 44, 54, 63, 53, 39, 52, 58, 51, 41, 42, 61, 60)),
        (2, (48, 50, 69, 67, 43, 45, 64, 62, 49, 56, 68, 55, 44, 54, 63, 53, 46, 47, 66, 65)),
    ]
    return _build(_hex20_coords(), [(att, GeoKind.HEX20, pts) for att, pts in cells])


def smith_example_5d30_tet4() -> Mesh:
    """Returns the Tet4 unit-cube mesh of Smith's Example 5.30 (Figure 5.30, page 202)."""
    coords = [(x, y, z) for y in (0.0, 1.0) for z in (0.0, -1.0) for x in (0.0, 1.0)]
    conn = [
        (0, 3, 2, 6),
        (0, 1, 3, 6),
        (0, 4, 1, 6),
        (5, 7, 3, 6),
        (5, 3, 1, 6),
        (5, 1, 4, 6),
    ]
    return _build(coords, [(1, GeoKind.TET4, pts) for pts in conn])