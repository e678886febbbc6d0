"""Coefficient tables of the four cubic equations of state.

Van der Waals, Redlich-Kwong (1949), Soave-Redlich-Kwong (1972) and
Peng-Robinson (1976). Critical constants in K and bar, R in L·bar/(mol·K).
"""

import math
from typing import Tuple

from .registry import CubicModel, register
from ..utils.units import R_L_BAR_PER_MOL_K as R

RK_OMEGA_A = 0.42748
RK_OMEGA_B = 0.08664
PR_OMEGA_A = 0.45724
PR_OMEGA_B = 0.07780


def srk_m(omega: float) -> float:
    return 0.480 + 1.574 * omega - 0.176 * omega * omega


def pr_kappa(omega: float) -> float:
    return 0.37464 + 1.54226 * omega - 0.26992 * omega * omega


def _soave_alpha(m: float, Tr: float) -> float:
    return (1.0 + m * (1.0 - math.sqrt(Tr))) ** 2


def _rk_cubic(A: float, B: float) -> Tuple[float, float, float]:
    return -1.0, A - B - B * B, -A * B


@register("vdw")
def _factory_vdw() -> CubicModel:
    def attraction(Tc, Pc, omega, T):
        return 27.0 * (R * Tc) ** 2 / (64.0 * Pc)

    def covolume(Tc, Pc):
        return R * Tc / (8.0 * Pc)

    def cubic(A, B):
        return -(1.0 + B), A, -A * B

    return CubicModel("Van der Waals", attraction, covolume, cubic)


@register("rk")
def _factory_rk() -> CubicModel:
    def attraction(Tc, Pc, omega, T):
        a = RK_OMEGA_A * R * R * Tc ** 2.5 / Pc
        return a / math.sqrt(T)

    def covolume(Tc, Pc):
        return RK_OMEGA_B * R * Tc / Pc

    return CubicModel("Redlich-Kwong", attraction, covolume, _rk_cubic)


@register("srk")
def _factory_srk() -> CubicModel:
    def attraction(Tc, Pc, omega, T):
        a = RK_OMEGA_A * (R * Tc) ** 2 / Pc
        return a * _soave_alpha(srk_m(omega), T / Tc)

    def covolume(Tc, Pc):
        return RK_OMEGA_B * R * Tc / Pc

    return CubicModel("Soave-Redlich-Kwong", attraction, covolume, _rk_cubic)


@register("pr")
def _factory_pr() -> CubicModel:
    def attraction(Tc, Pc, omega, T):
        a = PR_OMEGA_A * (R * Tc) ** 2 / Pc
        return a * _soave_alpha(pr_kappa(omega), T / Tc)

    def covolume(Tc, Pc):
        return PR_OMEGA_B * R * Tc / Pc

    def cubic(A, B):
        return -(1.0 - B), A - 3.0 * B * B - 2.0 * B, -(A * B - B * B - B ** 3)

    return CubicModel("Peng-Robinson", attraction, covolume, cubic)
