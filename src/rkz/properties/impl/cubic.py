"""Closed-form real roots of a monic cubic."""

import math
from typing import List

_DISC_EPS = 1e-15


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def solve_cubic_real(a: float, b: float, c: float) -> List[float]:
    """Solve z^3 + a z^2 + b z + c = 0 and return all real roots, ascending.

    Depressed form t^3 + p t + q = 0 with z = t - a/3; Cardano when one real
    root exists, trigonometric form for three distinct real roots.
    """

    shift = a / 3.0
    p = b - a * a / 3.0
    q = (2.0 * a ** 3) / 27.0 - (a * b) / 3.0 + c
    discriminant = (q / 2.0) ** 2 + (p / 3.0) ** 3

    if discriminant > _DISC_EPS:
        sqrt_disc = math.sqrt(discriminant)
        u = _cbrt(-q / 2.0 + sqrt_disc)
        v = _cbrt(-q / 2.0 - sqrt_disc)
        return [u + v - shift]

    if discriminant < -_DISC_EPS:
        r = math.sqrt(-p ** 3 / 27.0)
        phi = math.acos(max(-1.0, min(1.0, -q / (2.0 * r))))
        m = 2.0 * math.sqrt(-p / 3.0)
        roots = [
            m * math.cos(phi / 3.0) - shift,
            m * math.cos((phi + 2.0 * math.pi) / 3.0) - shift,
            m * math.cos((phi + 4.0 * math.pi) / 3.0) - shift,
        ]
        return sorted(roots)

    # repeated root: t1 = 2u (simple), t2 = -u (double); u = 0 is a triple root
    u = _cbrt(-q / 2.0)
    return sorted({2.0 * u - shift, -u - shift})
