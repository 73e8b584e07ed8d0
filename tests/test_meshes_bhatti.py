import pytest

from poromech.mesh import GeoKind
from poromech.meshes_bhatti import (
    bhatti_example_1d4_truss,
    bhatti_example_1d5_heat,
    bhatti_example_1d6_bracket,
    bhatti_example_6d22_heat,
)


def _polygon_area(coords):
    pairs = zip(coords, coords[1:] + coords[:1])
    return abs(sum(x0 * y1 - x1 * y0 for (x0, y0), (x1, y1) in pairs)) / 2.0


def _corner_area(mesh, ncorner):
    return sum(
        _polygon_area([mesh.points[p].coords for p in cell.points[:ncorner]])
        for cell in mesh.cells
    )


@pytest.mark.parametrize(
    "factory, npoint, ncell",
    [
        (bhatti_example_1d4_truss, 4, 5),
        (bhatti_example_1d5_heat, 5, 4),
        (bhatti_example_6d22_heat, 13, 2),
        (bhatti_example_1d6_bracket, 6, 4),
    ],
)
def test_sizes(factory, npoint, ncell):
    mesh = factory()
    assert mesh.npoint() == npoint
    assert mesh.ncell() == ncell
    assert mesh.ndim == 2
    assert [p.id for p in mesh.points] == list(range(npoint))
    assert [c.id for c in mesh.cells] == list(range(ncell))


def test_truss_markers_and_cells():
    mesh = bhatti_example_1d4_truss()
    assert [p.marker for p in mesh.points] == [-100, -200, 0, -300]
    assert mesh.points[1].coords == (1500.0, 3500.0)
    assert [c.attribute for c in mesh.cells] == [1, 1, 2, 2, 3]
    assert mesh.cells[4].points == (2, 1)
    assert all(c.kind is GeoKind.LIN2 for c in mesh.cells)


def test_heat_1d5_geometry():
    mesh = bhatti_example_1d5_heat()
    assert [p.marker for p in mesh.points] == [-100, 0, 0, -200, 0]
    assert mesh.cells[2].points == (3, 4, 2)
    assert _corner_area(mesh, 3) == pytest.approx(0.04)


def test_heat_6d22_geometry():
    mesh = bhatti_example_6d22_heat()
    assert all(p.marker == 0 for p in mesh.points)
    assert mesh.points[12].coords == (0.015, 0.0075)
    assert mesh.cells[0].points == (10, 4, 2, 0, 12, 3, 1, 11)
    assert mesh.cells[1].kind is GeoKind.QUA8
    assert _corner_area(mesh, 4) == pytest.approx(0.00135)


def test_bracket_geometry():
    mesh = bhatti_example_1d6_bracket()
    assert [p.marker for p in mesh.points] == [-100, -100, 0, 0, 0, 0]
    assert mesh.cells[3].points == (5, 3, 2)
    assert _corner_area(mesh, 3) == pytest.approx(6.0)


def test_meshes_are_independent_copies():
    first = bhatti_example_1d4_truss()
    first.points.pop()
    assert bhatti_example_1d4_truss().npoint() == 4