"""Mixture specification parsing and mixing rules.

A mixture is written as ``term ('+' term)*`` with ``term := [fraction '%'] gasId``,
e.g. ``80%N2+O2`` or ``CH4+5%CO2+2.5%N2``. Terms without a percentage share what
is left of 100 % evenly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from rkz.common.exceptions import (
    DuplicateComponent,
    MixtureFractionMismatch,
    MixtureOverflow,
    MixtureSyntaxError,
)

from .gases import DEFAULT_DATABASE, Gas, GasDatabase

logger = logging.getLogger(__name__)

FRACTION_EPS = 1e-9


class MixingRule(str, Enum):
    KAY = "kay"              # pseudo-critical linear mixing of Tc, Pc, omega
    QUADRATIC = "quadratic"  # van der Waals one-fluid a/b mixing


@dataclass(frozen=True)
class MixtureComponent:
    gas: Gas
    fraction: float


@dataclass(frozen=True)
class Mixture:
    components: Tuple[MixtureComponent, ...]

    @property
    def is_pure(self) -> bool:
        return len(self.components) == 1

    def fractions(self) -> dict:
        return {c.gas.id: c.fraction for c in self.components}


@dataclass(frozen=True)
class EffectiveProperties:
    """Tc [K], Pc [bar] and omega of a pure gas or a resolved mixture."""

    Tc: float
    Pc: float
    omega: float
    components: Tuple[MixtureComponent, ...] = ()
    mixing_rule: MixingRule = MixingRule.KAY

    @staticmethod
    def from_gas(gas: Gas) -> "EffectiveProperties":
        return EffectiveProperties(
            Tc=gas.Tc,
            Pc=gas.Pc,
            omega=gas.omega,
            components=(MixtureComponent(gas, 1.0),),
        )

    @property
    def uses_quadratic_mixing(self) -> bool:
        return self.mixing_rule is MixingRule.QUADRATIC and len(self.components) > 1


def _split_term(term: str) -> Tuple[Optional[float], str]:
    if "%" not in term:
        return None, term
    frac_text, gas_id = term.split("%", 1)
    try:
        frac = float(frac_text.strip())
    except ValueError as exc:
        raise MixtureSyntaxError(f"Can't parse '{frac_text.strip()}' as a percentage in term '{term}'") from exc
    if not frac > 0.0:
        raise MixtureSyntaxError(f"Mixture fraction must be positive, got {frac_text.strip()}% in term '{term}'")
    return frac, gas_id.strip()


def resolve_mixture(spec: str, database: Optional[GasDatabase] = None) -> Mixture:
    """Parse a mixture specification into a :class:`Mixture` whose fractions sum to 1."""

    db = DEFAULT_DATABASE if database is None else database
    terms = [t.strip() for t in spec.split("+")]
    if any(not t for t in terms):
        raise MixtureSyntaxError(f"Empty term in mixture specification '{spec}'")

    parsed: List[Tuple[Optional[float], Gas]] = []
    seen = set()
    for term in terms:
        frac, gas_id = _split_term(term)
        if not gas_id:
            raise MixtureSyntaxError(f"Missing gas identifier in term '{term}'")
        gas = db.lookup(gas_id)
        if gas.id in seen:
            raise DuplicateComponent(f"Gas '{gas.id}' appears more than once in '{spec}'")
        seen.add(gas.id)
        parsed.append((frac, gas))

    explicit = sum(f for f, _ in parsed if f is not None)
    n_implicit = sum(1 for f, _ in parsed if f is None)
    if explicit > 100.0 + FRACTION_EPS:
        raise MixtureOverflow(f"Mixture fractions in '{spec}' add up to {explicit:g}% (> 100%)")

    remainder = 100.0 - explicit
    if n_implicit == 0:
        if abs(remainder) > FRACTION_EPS:
            raise MixtureFractionMismatch(f"Mixture fractions in '{spec}' add up to {explicit:g}%, expected 100%")
        share = 0.0
    else:
        if remainder <= FRACTION_EPS:
            raise MixtureFractionMismatch(
                f"No fraction left for the {n_implicit} component(s) without percentage in '{spec}'"
            )
        share = remainder / n_implicit

    percents = [share if f is None else f for f, _ in parsed]
    total = sum(percents)
    components = tuple(MixtureComponent(gas, pct / total) for pct, (_, gas) in zip(percents, parsed))
    logger.debug("Resolved mixture '%s' -> %s", spec, {c.gas.id: c.fraction for c in components})
    return Mixture(components=components)


def effective_properties(mixture: Mixture, mixing_rule: MixingRule = MixingRule.KAY) -> EffectiveProperties:
    """Molar-fraction weighted (pseudo-critical) Tc, Pc and omega of a mixture."""

    if mixture.is_pure:
        gas = mixture.components[0].gas
        return EffectiveProperties(gas.Tc, gas.Pc, gas.omega, mixture.components, MixingRule(mixing_rule))

    Tc = sum(c.fraction * c.gas.Tc for c in mixture.components)
    Pc = sum(c.fraction * c.gas.Pc for c in mixture.components)
    omega = sum(c.fraction * c.gas.omega for c in mixture.components)
    return EffectiveProperties(
        Tc=Tc,
        Pc=Pc,
        omega=omega,
        components=mixture.components,
        mixing_rule=MixingRule(mixing_rule),
    )
