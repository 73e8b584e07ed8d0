"""Parameters of constitutive models: stress-strain, liquid retention and conductivity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# stress-strain models ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LinearElastic:
    """Linear elastic model."""

    young: float
    poisson: float

    @staticmethod
    def sample() -> LinearElastic:
        """Returns sample parameters."""
        return LinearElastic(young=1500.0, poisson=0.25)


@dataclass(frozen=True)
class VonMises:
    """von Mises plasticity model; z_ini is the initial von Mises stress on the yield surface."""

    young: float
    poisson: float
    hh: float
    z_ini: float

    @staticmethod
    def sample() -> VonMises:
        """Returns sample parameters."""
        return VonMises(young=1500.0, poisson=0.25, hh=800.0, z_ini=9.0)


@dataclass(frozen=True)
class DruckerPrager:
    """Drucker-Prager plasticity model."""

    young: float
    poisson: float
    c: float
    phi: float
    hh: float


@dataclass(frozen=True)
class CamClay:
    """Modified Cambridge (Cam) clay model."""

    mm: float
    lambda_: float
    kappa: float


StressStrain = Union[LinearElastic, VonMises, DruckerPrager, CamClay]


# liquid retention models ------------------------------------------------------------------------


@dataclass(frozen=True)
class BrooksCorey:
    """Brooks-Corey liquid retention model."""

    lambda_: float
    pc_ae: float
    sl_min: float
    sl_max: float

    @staticmethod
    def sample() -> BrooksCorey:
        """Returns sample parameters."""
        return BrooksCorey(lambda_=0.1, pc_ae=0.1, sl_min=0.1, sl_max=0.99)


@dataclass(frozen=True)
class VanGenuchten:
    """van Genuchten liquid retention model."""

    alpha: float
    m: float
    n: float
    sl_min: float
    sl_max: float
    pc_min: float


@dataclass(frozen=True)
class PedrosoWilliams:
    """Pedroso-Williams liquid retention model, optionally with hysteresis."""

    with_hysteresis: bool
    lambda_d: float
    lambda_w: float
    beta_d: float
    beta_w: float
    beta_1: float
    beta_2: float
    x_rd: float
    x_rw: float
    y_0: float
    y_r: float

    @staticmethod
    def sample() -> PedrosoWilliams:
        """Returns sample parameters."""
        return PedrosoWilliams(
            with_hysteresis=True,
            lambda_d=3.0,
            lambda_w=3.0,
            beta_d=6.0,
            beta_w=6.0,
            beta_1=6.0,
            beta_2=6.0,
            x_rd=2.0,
            x_rw=2.0,
            y_0=1.0,
            y_r=0.005,
        )


LiquidRetention = Union[BrooksCorey, VanGenuchten, PedrosoWilliams]


# conductivity models ----------------------------------------------------------------------------


@dataclass(frozen=True)
class Constant:
    """Constant conductivity tensor with components along x, y and z."""

    kx: float
    ky: float
    kz: float

    @staticmethod
    def sample() -> Constant:
        """Returns sample parameters."""
        return Constant(kx=1e-2, ky=1e-2, kz=1e-2)


@dataclass(frozen=True)
class IsotropicLinear:
    """Isotropic conductivity k = (1 + beta T) kr I."""

    kr: float
    beta: float


@dataclass(frozen=True)
class PedrosoZhangEhlers:
    """Pedroso-Zhang-Ehlers conductivity model."""

    kx: float
    ky: float
    kz: float
    lambda_0: float
    lambda_1: float
    alpha: float
    beta: float

    @staticmethod
    def sample() -> PedrosoZhangEhlers:
        """Returns sample parameters."""
        return PedrosoZhangEhlers(
            kx=1e-2,
            ky=1e-2,
            kz=1e-2,
            lambda_0=0.001,
            lambda_1=1.2,
            alpha=0.01,
            beta=10.0,
        )


Conductivity = Union[Constant, IsotropicLinear, PedrosoZhangEhlers]