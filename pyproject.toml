[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poromech"
version = "0.1.0"
description = "Material parameters, sample meshes and reference elastic fields for porous media mechanics simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["finite elements", "porous media", "mechanics", "meshes", "elasticity"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["poromech"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
