"""Constitutive model parameters, textbook sample meshes and closed-form elastic reference fields."""

__version__ = "0.1.0"