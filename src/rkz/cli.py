"""Compute the compressibility (Z) factor of gases and gas mixtures.

If a range is given for pressure or temperature, the result is written in CSV
format: one row per pressure, one column per temperature.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rkz.common.exceptions import ZFactorError
from rkz.properties.eos import EosModel
from rkz.properties.gases import DEFAULT_DATABASE, GasDatabase
from rkz.properties.mixture import MixingRule
from rkz.sweep.grid import ResultGrid, evaluate, format_z

logger = logging.getLogger("rkz")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="rkz", description=__doc__)
    parser.add_argument(
        "-g", "--gas",
        help="Gas id or mixture, e.g. 'N2' or '80%%N2+O2' (--list-gas to show referenced gases)",
    )
    parser.add_argument(
        "-e", "--eos", default="pr",
        help="Equation of state: vdw, rk, srk or pr (default: %(default)s)",
    )
    parser.add_argument(
        "-T", "--temperature",
        help="Temperature in °C. A range can be given as start:stop[:step]; use --temperature=-20:40 for negative values",
    )
    parser.add_argument(
        "-P", "--pressure",
        help="Absolute pressure in bar (gauge with --rel-pressure). A range can be given as start:stop[:step]",
    )
    parser.add_argument(
        "-r", "--rel-pressure",
        help="Treat pressures as relative to this reference, in hPa or 'stdatm' (1013.25 hPa)",
    )
    parser.add_argument(
        "--mixing", default=MixingRule.KAY.value, choices=[m.value for m in MixingRule],
        help="Mixing rule for mixtures (default: %(default)s)",
    )
    parser.add_argument("--gas-table", type=Path, help="JSON gas table to use instead of the built-in one")
    parser.add_argument("--precision", type=int, help="Number of decimals printed for Z")
    parser.add_argument("--list-gas", action="store_true", help="Print a list of referenced gases")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    return parser.parse_args(argv)


def print_gas_list(database: GasDatabase) -> None:
    print("Gases referenced by rkz:")
    print("    ID      Name")
    for g in database:
        print(f"    {g.id:<8}{g.name}")


def run(args: argparse.Namespace) -> int:
    database = GasDatabase.from_json(args.gas_table) if args.gas_table else DEFAULT_DATABASE
    logger.debug("Using gas table %s (%d gases)", args.gas_table or "built-in", len(database))

    done_something = False
    if args.list_gas:
        print_gas_list(database)
        done_something = True

    query = (args.gas, args.temperature, args.pressure)
    if all(v is None for v in query):
        if not done_something:
            print("No parameter supplied.", file=sys.stderr)
            return 1
        return 0
    if any(v is None for v in query):
        print("Insufficient parameters. Please specify gas, temperature and pressure", file=sys.stderr)
        return 1

    result = evaluate(
        args.gas,
        EosModel.parse(args.eos),
        args.pressure,
        args.temperature,
        relative_to=args.rel_pressure,
        mixing_rule=MixingRule(args.mixing),
        database=database,
    )
    if isinstance(result, ResultGrid):
        sys.stdout.write(result.to_csv(args.precision))
    else:
        print(format_z(result, args.precision))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    try:
        return run(args)
    except (ZFactorError, OSError, ValueError, KeyError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
