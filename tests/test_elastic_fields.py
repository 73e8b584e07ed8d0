import math

import pytest

from poromech.elastic_fields import (
    elastic_solution_horizontal_displacement_field,
    elastic_solution_shear_displacement_field,
    elastic_solution_vertical_displacement_field,
    generate_horizontal_displacement_field,
    generate_shear_displacement_field,
    generate_vertical_displacement_field,
    mandel_vector,
)
from poromech.mesh import Mesh, Point
from poromech.meshes_column import column_two_layers_qua4


def _mesh_3d():
    return Mesh(
        ndim=3,
        points=[
            Point(id=0, marker=0, coords=(0.0, 0.0, 0.0)),
            Point(id=1, marker=0, coords=(1.0, 2.0, 3.0)),
            Point(id=2, marker=0, coords=(-1.5, 0.5, 4.0)),
        ],
    )


def _hooke(young, poisson, strain):
    lam = young * poisson / ((1.0 + poisson) * (1.0 - 2.0 * poisson))
    mu = young / (2.0 * (1.0 + poisson))
    trace = sum(strain[:3])
    return [lam * trace * (1.0 if i < 3 else 0.0) + 2.0 * mu * e for i, e in enumerate(strain)]


def test_mandel_vector_2d_shear():
    vec = mandel_vector([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 0.0]], 2)
    assert vec == pytest.approx((0.0, 0.0, 0.0, math.sqrt(2.0)))


def test_mandel_vector_3d_components_order():
    vec = mandel_vector([[1.0, 4.0, 6.0], [4.0, 2.0, 5.0], [6.0, 5.0, 3.0]], 3)
    s = math.sqrt(2.0)
    assert vec == pytest.approx((1.0, 2.0, 3.0, 4.0 * s, 5.0 * s, 6.0 * s))


def test_mandel_vector_rejects_asymmetric():
    with pytest.raises(ValueError):
        mandel_vector([[0.0, 1.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 0.0]], 3)


def test_mandel_vector_rejects_out_of_plane_in_2d():
    with pytest.raises(ValueError):
        mandel_vector([[0.0, 0.0, 1.0], [0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], 2)


def test_mandel_vector_rejects_bad_ndim():
    with pytest.raises(ValueError):
        mandel_vector([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]], 1)


@pytest.mark.parametrize("mesh", [column_two_layers_qua4(), _mesh_3d()])
def test_horizontal_field(mesh):
    eps = 0.01
    uu = generate_horizontal_displacement_field(mesh, eps)
    nd = mesh.ndim
    assert len(uu) == nd * mesh.npoint()
    for p, point in enumerate(mesh.points):
        assert uu[nd * p] == pytest.approx(eps * point.coords[0])
        assert all(v == 0.0 for v in uu[nd * p + 1 : nd * (p + 1)])


@pytest.mark.parametrize("mesh", [column_two_layers_qua4(), _mesh_3d()])
def test_vertical_field(mesh):
    eps = -0.02
    uu = generate_vertical_displacement_field(mesh, eps)
    nd = mesh.ndim
    assert len(uu) == nd * mesh.npoint()
    for p, point in enumerate(mesh.points):
        assert uu[nd * p] == 0.0
        assert uu[nd * p + 1] == pytest.approx(eps * point.coords[1])


@pytest.mark.parametrize("mesh", [column_two_layers_qua4(), _mesh_3d()])
def test_shear_field_uses_engineering_strain(mesh):
    eps = 0.005
    uu = generate_shear_displacement_field(mesh, eps)
    nd = mesh.ndim
    for p, point in enumerate(mesh.points):
        assert uu[nd * p] == pytest.approx(2.0 * eps * point.coords[1])
        assert uu[nd * p + 1] == 0.0


def test_empty_mesh_gives_empty_field():
    assert generate_horizontal_displacement_field(Mesh.empty(2), 0.1) == []


@pytest.mark.parametrize("ndim, size", [(2, 4), (3, 6)])
def test_solution_satisfies_hooke_law(ndim, size):
    young, poisson, eps = 1500.0, 0.25, 0.003
    results = [
        elastic_solution_horizontal_displacement_field(young, poisson, ndim, eps),
        elastic_solution_vertical_displacement_field(young, poisson, ndim, eps),
        elastic_solution_shear_displacement_field(young, poisson, ndim, eps),
    ]
    for strain, stress in results:
        assert len(strain) == size
        assert len(stress) == size
        assert list(stress) == pytest.approx(_hooke(young, poisson, strain))


def test_horizontal_strain_has_single_component():
    strain, stress = elastic_solution_horizontal_displacement_field(1000.0, 0.2, 2, 0.01)
    assert strain == pytest.approx((0.01, 0.0, 0.0, 0.0))
    assert stress[1] == pytest.approx(stress[2])
    assert stress[1] / stress[0] == pytest.approx(0.2 / 0.8)


def test_vertical_stress_ratio():
    strain, stress = elastic_solution_vertical_displacement_field(1000.0, 0.3, 3, -0.01)
    assert strain[1] == -0.01
    assert stress[0] == pytest.approx(stress[2])
    assert stress[0] / stress[1] == pytest.approx(0.3 / 0.7)
    assert stress[3:] == (0.0, 0.0, 0.0)


def test_shear_has_no_normal_stress():
    strain, stress = elastic_solution_shear_displacement_field(1500.0, 0.25, 2, 0.01)
    assert stress[:3] == (0.0, 0.0, 0.0)
    assert strain[3] == pytest.approx(math.sqrt(2.0) * 0.01)
    shear_modulus = 1500.0 / (2.0 * 1.25)
    assert stress[3] == pytest.approx(2.0 * shear_modulus * strain[3])


def test_solution_rejects_bad_ndim():
    with pytest.raises(ValueError):
        elastic_solution_horizontal_displacement_field(1500.0, 0.25, 4, 0.01)
    with pytest.raises(ValueError):
        elastic_solution_vertical_displacement_field(1500.0, 0.25, 4, 0.01)
    with pytest.raises(ValueError):
        elastic_solution_shear_displacement_field(1500.0, 0.25, 4, 0.01)