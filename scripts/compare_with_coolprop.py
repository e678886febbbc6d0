#!/usr/bin/env python
"""Compare cubic-EOS Z-factors of a pure gas against CoolProp HEOS."""

from __future__ import annotations

import argparse
import csv
import sys
from typing import Dict, List

try:
    from CoolProp.CoolProp import PropsSI
except ImportError as exc:  # pragma: no cover - requires optional dependency
    raise SystemExit(
        "CoolProp is required for the reference comparison. Install it with 'pip install CoolProp'."
    ) from exc

from rkz.properties import EffectiveProperties, EosModel, lookup, solve_z
from rkz.common.exceptions import EvaluationError
from rkz.properties.utils.units import celsius_to_kelvin
from rkz.sweep import expand

# rkz gas id -> CoolProp fluid string
COOLPROP_NAMES: Dict[str, str] = {
    "H2": "Hydrogen",
    "D2": "Deuterium",
    "He": "Helium",
    "Ne": "Neon",
    "Ar": "Argon",
    "Kr": "Krypton",
    "Xe": "Xenon",
    "N2": "Nitrogen",
    "O2": "Oxygen",
    "Air": "Air",
    "F2": "Fluorine",
    "CO": "CarbonMonoxide",
    "CO2": "CarbonDioxide",
    "H2O": "Water",
    "NH3": "Ammonia",
    "H2S": "HydrogenSulfide",
    "SO2": "SulfurDioxide",
    "N2O": "NitrousOxide",
    "HCl": "HydrogenChloride",
    "SF6": "SulfurHexafluoride",
    "CH4": "Methane",
    "C2H6": "Ethane",
    "C3H8": "Propane",
    "nC4H10": "n-Butane",
    "iC4H10": "IsoButane",
    "nC5H12": "n-Pentane",
    "nC6H14": "n-Hexane",
    "C2H4": "Ethylene",
    "C3H6": "Propylene",
    "CH3OH": "Methanol",
    "R134a": "R134a",
}


def reference_z(fluid: str, p_bar: float, T_K: float) -> float:
    return PropsSI("Z", "T", T_K, "P", p_bar * 1e5, fluid)


def compare(gas_id: str, pressures: List[float], t_c: float) -> List[List[str]]:
    gas = lookup(gas_id)
    fluid = COOLPROP_NAMES.get(gas.id)
    if fluid is None:
        raise SystemExit(f"No CoolProp fluid known for gas '{gas.id}'")
    props = EffectiveProperties.from_gas(gas)
    T_K = celsius_to_kelvin(t_c)

    rows = []
    for p in pressures:
        row = [f"{p:g}", f"{reference_z(fluid, p, T_K):.6f}"]
        for model in EosModel:
            try:
                row.append(f"{solve_z(model, props, p, T_K):.6f}")
            except EvaluationError as exc:
                row.append(type(exc).__name__)
        rows.append(row)
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("gas", help="Pure gas id (see 'rkz --list-gas')")
    parser.add_argument("--pressure", default="1:301:25", help="Absolute pressure range in bar, start:stop[:step]")
    parser.add_argument("--temperature", type=float, default=15.0, help="Temperature in °C")
    args = parser.parse_args()

    writer = csv.writer(sys.stdout, lineterminator="\n")
    writer.writerow(["P [bar]", "CoolProp"] + [m.value for m in EosModel])
    writer.writerows(compare(args.gas, expand(args.pressure), args.temperature))


if __name__ == "__main__":
    main()
