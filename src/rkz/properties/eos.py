"""Z-factor from a cubic equation of state.

The cubic in Z is solved in closed form and the largest positive real root is
returned. Inside the two-phase dome this is the vapour root; no phase
equilibrium is attempted, so for sub-critical liquid states the result is the
(metastable) gas-like solution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from math import sqrt
from typing import List, Tuple

from rkz.common.exceptions import (
    InvalidPressure,
    InvalidTemperature,
    NumericalFailure,
    UnknownEosModel,
)

from .impl import cubic_models  # noqa: F401  (registers vdw, rk, srk, pr)
from .impl.cubic import solve_cubic_real
from .impl.registry import CubicModel, build
from .mixture import EffectiveProperties
from .utils.units import R_L_BAR_PER_MOL_K as R

logger = logging.getLogger(__name__)


class EosModel(str, Enum):
    VDW = "vdw"
    RK = "rk"
    SRK = "srk"
    PR = "pr"

    @classmethod
    def parse(cls, text: str) -> "EosModel":
        key = str(text).strip().lower().replace("_", "-").replace(" ", "-")
        model = _ALIASES.get(key)
        if model is None:
            known = ", ".join(m.value for m in cls)
            raise UnknownEosModel(f"Unknown equation of state '{text}' (expected one of {known})")
        return model

    @property
    def table(self) -> CubicModel:
        return build(self.value)


_ALIASES = {
    "vdw": EosModel.VDW,
    "van-der-waals": EosModel.VDW,
    "vanderwaals": EosModel.VDW,
    "rk": EosModel.RK,
    "redlich-kwong": EosModel.RK,
    "srk": EosModel.SRK,
    "soave-redlich-kwong": EosModel.SRK,
    "pr": EosModel.PR,
    "peng-robinson": EosModel.PR,
}


@dataclass(frozen=True)
class Condition:
    pressure: float     # bar abs
    temperature: float  # K

    def __post_init__(self):
        if not self.temperature > 0.0:
            raise InvalidTemperature(f"Temperature must be >0 K, got {self.temperature:g} K")
        if self.pressure < 0.0:
            raise InvalidPressure(f"Absolute pressure must be >=0 bar, got {self.pressure:g} bar")


def mixture_ab(model: EosModel, props: EffectiveProperties, T: float) -> Tuple[float, float]:
    """Return (a·alpha(T), b) of the gas or mixture under ``model``."""

    eos = EosModel(model).table
    if not props.uses_quadratic_mixing:
        return eos.attraction(props.Tc, props.Pc, props.omega, T), eos.covolume(props.Tc, props.Pc)

    comps = props.components
    a_i = [eos.attraction(c.gas.Tc, c.gas.Pc, c.gas.omega, T) for c in comps]
    b_i = [eos.covolume(c.gas.Tc, c.gas.Pc) for c in comps]
    a_mix = 0.0
    for i, ci in enumerate(comps):
        for j, cj in enumerate(comps):
            a_mix += ci.fraction * cj.fraction * sqrt(a_i[i] * a_i[j])
    b_mix = sum(c.fraction * b for c, b in zip(comps, b_i))
    return a_mix, b_mix


def cubic_coefficients(
    model: EosModel, props: EffectiveProperties, pressure: float, temperature: float
) -> Tuple[float, float, float]:
    """(c2, c1, c0) of Z^3 + c2 Z^2 + c1 Z + c0 = 0 at P [bar abs], T [K]."""

    cond = Condition(pressure, temperature)
    a, b = mixture_ab(model, props, cond.temperature)
    A = a * cond.pressure / (R * cond.temperature) ** 2
    B = b * cond.pressure / (R * cond.temperature)
    return EosModel(model).table.cubic(A, B)


def z_roots(model: EosModel, props: EffectiveProperties, pressure: float, temperature: float) -> List[float]:
    """All real roots of the cubic in Z, ascending."""
    return solve_cubic_real(*cubic_coefficients(model, props, pressure, temperature))


def solve_z(model: EosModel, props: EffectiveProperties, pressure: float, temperature: float) -> float:
    """Z-factor at ``pressure`` [bar abs] and ``temperature`` [K].

    Raises
    ------
    InvalidTemperature
        ``temperature`` is not above 0 K.
    InvalidPressure
        ``pressure`` is negative.
    NumericalFailure
        The cubic has no positive real root.
    """

    roots = z_roots(model, props, pressure, temperature)
    positive = [z for z in roots if z > 0.0]
    if not positive:
        raise NumericalFailure(
            f"No positive Z root for {EosModel(model).value} at P={pressure:g} bar, T={temperature:g} K "
            f"(real roots: {roots})"
        )
    Z = max(positive)
    if len(positive) > 1:
        logger.debug("Multiple Z roots %s at P=%g bar, T=%g K; vapour root %g selected", positive, pressure, temperature, Z)
    return Z
