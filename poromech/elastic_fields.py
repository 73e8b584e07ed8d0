"""Displacement fields and matching linear-elastic solutions for verification.

The displacement generators assume a mesh whose cells all have the same kind.
Tensors are returned as Mandel vectors: (xx, yy, zz, √2·xy) in 2D and
(xx, yy, zz, √2·xy, √2·yz, √2·xz) in 3D.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from poromech.mesh import Mesh

_SQRT_2 = math.sqrt(2.0)

Matrix3 = Sequence[Sequence[float]]


def _check_ndim(ndim: int) -> None:
    if ndim not in (2, 3):
        raise ValueError(f"ndim must be 2 or 3, got {ndim}")


def mandel_vector(matrix: Matrix3, ndim: int) -> tuple[float, ...]:
    """Returns the Mandel representation of a symmetric 3x3 matrix.

    In 2D the xz and yz components must be zero.
    """
    _check_ndim(ndim)
    rows = [tuple(float(v) for v in row) for row in matrix]
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("matrix must be 3x3")
    for i, j in ((0, 1), (1, 2), (0, 2)):
        if rows[i][j] != rows[j][i]:
            raise ValueError(f"matrix is not symmetric at ({i}, {j})")
    diagonal = (rows[0][0], rows[1][1], rows[2][2])
    if ndim == 2:
        if rows[0][2] != 0.0 or rows[1][2] != 0.0:
            raise ValueError("a 2D tensor must have zero xz and yz components")
        return diagonal + (_SQRT_2 * rows[0][1],)
    return diagonal + (
        _SQRT_2 * rows[0][1],
        _SQRT_2 * rows[1][2],
        _SQRT_2 * rows[0][2],
    )


def _displacement_field(mesh: Mesh, dof: int, coord: int, factor: float) -> list[float]:
    uu = [0.0] * (mesh.ndim * mesh.npoint())
    for p, point in enumerate(mesh.points):
        uu[dof + mesh.ndim * p] = factor * point.coords[coord]
    return uu


def generate_horizontal_displacement_field(mesh: Mesh, eps_xx: float) -> list[float]:
    """Returns the displacements ux = ε_xx·x of a horizontal stretching."""
    return _displacement_field(mesh, 0, 0, eps_xx)


def generate_vertical_displacement_field(mesh: Mesh, eps_yy: float) -> list[float]:
    """Returns the displacements uy = ε_yy·y of a vertical stretching."""
    return _displacement_field(mesh, 1, 1, eps_yy)


def generate_shear_displacement_field(mesh: Mesh, eps_xy: float) -> list[float]:
    """Returns the displacements ux = γ_xy·y of a simple shear, with γ_xy = 2·ε_xy."""
    return _displacement_field(mesh, 0, 1, 2.0 * eps_xy)


def _stiffness_factor(young: float, poisson: float) -> float:
    return young / ((1.0 + poisson) * (1.0 - 2.0 * poisson))


def _diagonal(a: float, b: float, c: float) -> list[list[float]]:
    return [[a, 0.0, 0.0], [0.0, b, 0.0], [0.0, 0.0, c]]


def _offdiagonal_xy(v: float) -> list[list[float]]:
    return [[0.0, v, 0.0], [v, 0.0, 0.0], [0.0, 0.0, 0.0]]


def elastic_solution_horizontal_displacement_field(
    young: float, poisson: float, ndim: int, eps_xx: float
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Returns (strain, stress) of a plane-strain or 3D horizontal stretching."""
    c = _stiffness_factor(young, poisson)
    strain = mandel_vector(_diagonal(eps_xx, 0.0, 0.0), ndim)
    lateral = c * eps_xx * poisson
    stress = mandel_vector(_diagonal(c * eps_xx * (1.0 - poisson), lateral, lateral), ndim)
    return strain, stress


def elastic_solution_vertical_displacement_field(
    young: float, poisson: float, ndim: int, eps_yy: float
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Returns (strain, stress) of a plane-strain or 3D vertical stretching."""
    c = _stiffness_factor(young, poisson)
    strain = mandel_vector(_diagonal(0.0, eps_yy, 0.0), ndim)
    lateral = c * eps_yy * poisson
    stress = mandel_vector(_diagonal(lateral, c * eps_yy * (1.0 - poisson), lateral), ndim)
    return strain, stress


def elastic_solution_shear_displacement_field(
    young: float, poisson: float, ndim: int, eps_xy: float
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Returns (strain, stress) of a plane-strain or 3D simple shear."""
    c = _stiffness_factor(young, poisson)
    strain = mandel_vector(_offdiagonal_xy(eps_xy), ndim)
    stress = mandel_vector(_offdiagonal_xy(c * (1.0 - 2.0 * poisson) * eps_xy), ndim)
    return strain, stress