"""Convenience exports for gas properties and cubic equations of state."""

from .eos import Condition, EosModel, cubic_coefficients, solve_z, z_roots
from .gases import DEFAULT_DATABASE, Gas, GasDatabase, list_gases, lookup
from .mixture import (
    EffectiveProperties,
    MixingRule,
    Mixture,
    MixtureComponent,
    effective_properties,
    resolve_mixture,
)

__all__ = [
    "Condition",
    "DEFAULT_DATABASE",
    "EffectiveProperties",
    "EosModel",
    "Gas",
    "GasDatabase",
    "MixingRule",
    "Mixture",
    "MixtureComponent",
    "cubic_coefficients",
    "effective_properties",
    "list_gases",
    "lookup",
    "resolve_mixture",
    "solve_z",
    "z_roots",
]
