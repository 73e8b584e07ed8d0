"""Parameter sets for elements, materials and fluids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from poromech.models import (
    BrooksCorey,
    Conductivity,
    Constant,
    LinearElastic,
    LiquidRetention,
    StressStrain,
    VonMises,
)


def _at_rest_coefficient(poisson: float) -> float:
    """Returns the at-rest earth pressure coefficient K0 = nu / (1 - nu)."""
    return poisson / (1.0 - poisson)


@dataclass(frozen=True)
class ParamRealDensity:
    """Intrinsic (real) density: compressibility, reference pressure, density and temperature."""

    cc: float
    p_ref: float
    rho_ref: float
    tt_ref: float

    @staticmethod
    def sample_water(incompressible: bool) -> ParamRealDensity:
        """Returns sample parameters for the density of clean water (SI units)."""
        cc = 1e-12 if incompressible else 4.53e-7  # Mg/(m³ kPa)
        return ParamRealDensity(cc=cc, p_ref=0.0, rho_ref=1.0, tt_ref=25.0)

    @staticmethod
    def sample_dry_air() -> ParamRealDensity:
        """Returns sample parameters for the density of dry air (SI units)."""
        return ParamRealDensity(cc=1.17e-5, p_ref=0.0, rho_ref=0.0012, tt_ref=25.0)


@dataclass(frozen=True)
class ParamFluids:
    """Densities of the liquid and, if any, the gas constituents."""

    density_liquid: ParamRealDensity
    density_gas: Optional[ParamRealDensity] = None

    @staticmethod
    def sample_water(incompressible: bool) -> ParamFluids:
        """Returns sample parameters for water (SI units)."""
        return ParamFluids(
            density_liquid=ParamRealDensity.sample_water(incompressible),
            density_gas=None,
        )

    @staticmethod
    def sample_water_and_dry_air(incompressible: bool) -> ParamFluids:
        """Returns sample parameters for water and dry air (SI units)."""
        return ParamFluids(
            density_liquid=ParamRealDensity.sample_water(incompressible),
            density_gas=ParamRealDensity.sample_dry_air(),
        )


@dataclass(frozen=True)
class ParamDiffusion:
    """Diffusion problem: transient coefficient, conductivity and optional source term."""

    rho: float
    conductivity: Conductivity
    source: Optional[float] = None

    @staticmethod
    def sample() -> ParamDiffusion:
        """Returns sample parameters."""
        return ParamDiffusion(rho=1.0, conductivity=Constant.sample(), source=None)


@dataclass(frozen=True)
class ParamRod:
    """Linear-elastic rod: density, Young's modulus and cross-sectional area."""

    density: float
    young: float
    area: float

    @staticmethod
    def sample() -> ParamRod:
        """Returns sample parameters."""
        return ParamRod(density=1.0, young=1000.0, area=1.0)


@dataclass(frozen=True)
class ParamBeam:
    """Euler-Bernoulli beam: moduli, area, moments of inertia and torsional constant."""

    density: float
    young: float
    shear: float
    area: float
    ii_11: float
    ii_22: float
    jj_tt: float

    @staticmethod
    def sample() -> ParamBeam:
        """Returns sample parameters."""
        return ParamBeam(
            density=1.0,
            young=1000.0,
            shear=1000.0,
            area=1.0,
            ii_11=1.0,
            ii_22=1.0,
            jj_tt=1.0,
        )


@dataclass(frozen=True)
class ParamSolid:
    """Solid mechanics: density and stress-strain model."""

    density: float
    stress_strain: StressStrain

    @staticmethod
    def sample_linear_elastic() -> ParamSolid:
        """Returns sample parameters with the linear elastic model."""
        return ParamSolid(density=1.0, stress_strain=LinearElastic.sample())

    @staticmethod
    def sample_von_mises() -> ParamSolid:
        """Returns sample parameters with the von Mises model."""
        return ParamSolid(density=1.0, stress_strain=VonMises.sample())


@dataclass(frozen=True)
class ParamPorousLiq:
    """Seepage with liquid only."""

    porosity_initial: float
    retention_liquid: LiquidRetention
    conductivity_liquid: Conductivity

    @staticmethod
    def sample_brooks_corey_constant() -> ParamPorousLiq:
        """Returns a sample with Brooks-Corey retention and constant conductivity."""
        return ParamPorousLiq(
            porosity_initial=0.4,
            retention_liquid=BrooksCorey.sample(),
            conductivity_liquid=Constant.sample(),
        )


@dataclass(frozen=True)
class ParamPorousLiqGas:
    """Seepage with liquid and gas."""

    porosity_initial: float
    retention_liquid: LiquidRetention
    conductivity_liquid: Conductivity
    conductivity_gas: Conductivity

    @staticmethod
    def sample_brooks_corey_constant() -> ParamPorousLiqGas:
        """Returns a sample with Brooks-Corey retention and constant conductivities."""
        return ParamPorousLiqGas(
            porosity_initial=0.4,
            retention_liquid=BrooksCorey.sample(),
            conductivity_liquid=Constant.sample(),
            conductivity_gas=Constant.sample(),
        )


@dataclass(frozen=True)
class ParamPorousSldLiq:
    """Porous media mechanics with solid and liquid."""

    earth_pres_coef_ini: float
    porosity_initial: float
    density_solid: float
    stress_strain: StressStrain
    retention_liquid: LiquidRetention
    conductivity_liquid: Conductivity

    @staticmethod
    def sample_brooks_corey_constant_elastic() -> ParamPorousSldLiq:
        """Returns a sample with Brooks-Corey retention, constant conductivity and elasticity."""
        return ParamPorousSldLiq(
            earth_pres_coef_ini=_at_rest_coefficient(0.2),
            porosity_initial=0.4,
            density_solid=2.7,
            stress_strain=LinearElastic.sample(),
            retention_liquid=BrooksCorey.sample(),
            conductivity_liquid=Constant.sample(),
        )


@dataclass(frozen=True)
class ParamPorousSldLiqGas:
    """Porous media mechanics with solid, liquid and gas."""

    earth_pres_coef_ini: float
    porosity_initial: float
    density_solid: float
    stress_strain: StressStrain
    retention_liquid: LiquidRetention
    conductivity_liquid: Conductivity
    conductivity_gas: Conductivity

    @staticmethod
    def sample_brooks_corey_constant_elastic() -> ParamPorousSldLiqGas:
        """Returns a sample with Brooks-Corey retention, constant conductivities and elasticity."""
        return ParamPorousSldLiqGas(
            earth_pres_coef_ini=_at_rest_coefficient(0.2),
            porosity_initial=0.4,
            density_solid=2.7,
            stress_strain=LinearElastic.sample(),
            retention_liquid=BrooksCorey.sample(),
            conductivity_liquid=Constant.sample(),
            conductivity_gas=Constant.sample(),
        )