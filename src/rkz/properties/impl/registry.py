from dataclasses import dataclass
from typing import Callable, Dict, Tuple


@dataclass(frozen=True)
class CubicModel:
    """Table entry of one cubic equation of state.

    ``attraction(Tc, Pc, omega, T)`` returns a·alpha(T) and ``covolume(Tc, Pc)``
    returns b, both in L/bar/mol units; ``cubic(A, B)`` returns (c2, c1, c0) of
    Z^3 + c2 Z^2 + c1 Z + c0 = 0.
    """

    name: str
    attraction: Callable[[float, float, float, float], float]
    covolume: Callable[[float, float], float]
    cubic: Callable[[float, float], Tuple[float, float, float]]


REGISTRY: Dict[str, CubicModel] = {}  # EosModel value -> CubicModel


def register(name: str):
    def deco(fn):
        REGISTRY[name] = fn()
        return fn
    return deco


def build(name: str) -> CubicModel:
    if name not in REGISTRY:
        raise KeyError(f"EOS '{name}' not registered")
    return REGISTRY[name]
