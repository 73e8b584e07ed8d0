# poromech

Building blocks for finite element simulations of solids and porous media:
parameter sets, textbook meshes and closed-form elastic reference states.

## Modules

- `poromech.models` — frozen dataclasses holding constitutive model
  parameters:
  - stress–strain models: `LinearElastic`, `VonMises`, `DruckerPrager`,
    `CamClay` (type alias `StressStrain`);
  - liquid retention models: `BrooksCorey`, `VanGenuchten`,
    `PedrosoWilliams` (type alias `LiquidRetention`);
  - conductivity models: `Constant`, `IsotropicLinear`,
    `PedrosoZhangEhlers` (type alias `Conductivity`).

  `LinearElastic`, `VonMises`, `BrooksCorey`, `PedrosoWilliams`, `Constant`
  and `PedrosoZhangEhlers` have a `sample()` constructor with ready-made
  values. Fields whose natural name is `lambda` are called `lambda_`.
- `poromech.parameters` — parameter sets for fluids (`ParamRealDensity`,
  `ParamFluids`) and for each kind of element (`ParamDiffusion`, `ParamRod`,
  `ParamBeam`, `ParamSolid`, `ParamPorousLiq`, `ParamPorousLiqGas`,
  `ParamPorousSldLiq`, `ParamPorousSldLiqGas`), each with `sample...()`
  constructors.
- `poromech.mesh` — a small mesh model: `Mesh` (with `Mesh.empty(ndim)`,
  `npoint()` and `ncell()`), `Point`, `Cell` and the `GeoKind` enum
  (`LIN2`, `TRI3`, `TRI15`, `QUA4`, `QUA8`, `QUA9`, `TET4`, `HEX20`, each
  with `nnode()`). Meshes check that every point has `ndim` coordinates and
  every cell refers to existing points and has the right number of them.
- `poromech.meshes_bhatti` — `bhatti_example_1d4_truss`,
  `bhatti_example_1d5_heat`, `bhatti_example_6d22_heat`,
  `bhatti_example_1d6_bracket`.
- `poromech.meshes_smith_2d` — `smith_example_5d2_tri3`,
  `smith_example_5d7_tri15`, `smith_example_5d11_qua4`,
  `smith_example_5d15_qua8`, `smith_example_5d17_qua4`,
  `smith_example_5d27_qua9`.
- `poromech.meshes_smith_3d` — `smith_example_4d22_frame_3d`,
  `smith_example_5d24_hex20`, `smith_example_5d30_tet4`.
- `poromech.meshes_column` — `column_two_layers_qua4`,
  `column_two_layers_qua9`.
- `poromech.elastic_fields` — homogeneous displacement fields
  (`generate_horizontal_displacement_field`,
  `generate_vertical_displacement_field`,
  `generate_shear_displacement_field`) and the matching plane-strain / 3D
  linear-elastic `(strain, stress)` states
  (`elastic_solution_horizontal_displacement_field`,
  `elastic_solution_vertical_displacement_field`,
  `elastic_solution_shear_displacement_field`). Tensors are returned as
  Mandel vectors via `mandel_vector(matrix, ndim)`: four components in 2D,
  six in 3D.

## Installation

```
pip install .
```

## Usage

```python
from poromech.parameters import ParamSolid, ParamPorousSldLiq
from poromech.meshes_bhatti import bhatti_example_1d5_heat
from poromech.elastic_fields import (
    generate_horizontal_displacement_field,
    elastic_solution_horizontal_displacement_field,
)

solid = ParamSolid.sample_von_mises()
print(solid.stress_strain.z_ini)  # 9.0

porous = ParamPorousSldLiq.sample_brooks_corey_constant_elastic()
print(porous.earth_pres_coef_ini)  # 0.25

mesh = bhatti_example_1d5_heat()
print(mesh.npoint(), mesh.ncell())  # 5 4

uu = generate_horizontal_displacement_field(mesh, 0.01)  # ndim * npoint values
strain, stress = elastic_solution_horizontal_displacement_field(1500.0, 0.25, 2, 0.01)
```

## What this package does not do

It holds data and reference solutions only. It does not assemble or solve
finite element systems, evaluate the constitutive models, read or write
mesh or result files, draw meshes, or export results for visualisation.
There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```