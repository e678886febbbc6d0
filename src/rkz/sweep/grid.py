"""Z-factor over a pressure x temperature grid.

Pressures are in bar (absolute, or gauge when a reference is given),
temperatures in °C. Rows follow the expanded pressure sequence and columns the
expanded temperature sequence. A cell that cannot be evaluated holds a
:class:`CellError` instead of a value; the rest of the grid is unaffected.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from rkz.common.exceptions import EvaluationError, InvalidReference
from rkz.properties.eos import EosModel, solve_z
from rkz.properties.gases import GasDatabase
from rkz.properties.mixture import EffectiveProperties, MixingRule, effective_properties, resolve_mixture
from rkz.properties.utils.units import STD_ATM_HPA, celsius_to_kelvin, hpa_to_bar

from .ranges import expand

logger = logging.getLogger(__name__)

Reference = Union[None, str, float]


@dataclass(frozen=True)
class CellError:
    kind: str
    message: str

    @staticmethod
    def from_exception(exc: EvaluationError) -> "CellError":
        return CellError(kind=type(exc).__name__, message=str(exc))

    def __str__(self) -> str:
        return self.kind


Cell = Union[float, CellError]


@dataclass
class ResultGrid:
    pressures: List[float]           # bar, as requested
    absolute_pressures: List[float]  # bar abs, as evaluated
    temperatures: List[float]        # °C
    cells: Dict[Tuple[int, int], Cell] = field(default_factory=dict)

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.pressures), len(self.temperatures)

    def value(self, i: int, j: int) -> Cell:
        return self.cells[(i, j)]

    def errors(self) -> Dict[Tuple[int, int], CellError]:
        return {ij: c for ij, c in self.cells.items() if isinstance(c, CellError)}

    def rows(self) -> List[List[Cell]]:
        n_p, n_t = self.shape
        return [[self.cells[(i, j)] for j in range(n_t)] for i in range(n_p)]

    def to_array(self) -> np.ndarray:
        """Z values as an (n_pressure, n_temperature) array, NaN where a cell failed."""
        out = np.full(self.shape, np.nan)
        for (i, j), c in self.cells.items():
            if not isinstance(c, CellError):
                out[i, j] = c
        return out

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            self.to_array(),
            index=pd.Index(self.pressures, name="P [bar]"),
            columns=pd.Index(self.temperatures, name="T [°C]"),
        )

    def to_csv(self, precision: Optional[int] = None) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow([""] + [format_axis(t) for t in self.temperatures])
        for p, row in zip(self.pressures, self.rows()):
            writer.writerow([format_axis(p)] + [format_z(c, precision) for c in row])
        return buf.getvalue()


def format_axis(value: float) -> str:
    return format(value, ".10g")


def format_z(cell: Cell, precision: Optional[int] = None) -> str:
    if isinstance(cell, CellError):
        return str(cell)
    if precision is None:
        return repr(float(cell))
    return f"{cell:.{precision}f}"


def reference_bar(relative_to: Reference) -> float:
    """Relative-pressure reference in bar; ``None`` means absolute pressures."""

    if relative_to is None:
        return 0.0
    if isinstance(relative_to, str):
        text = relative_to.strip()
        if text.lower() == "stdatm":
            return hpa_to_bar(STD_ATM_HPA)
        try:
            hpa = float(text)
        except ValueError as exc:
            raise InvalidReference(f"Relative pressure must be a value in hPa or 'stdatm', got '{relative_to}'") from exc
    else:
        hpa = float(relative_to)
    if not (math.isfinite(hpa) and hpa > 0.0):
        raise InvalidReference(f"Relative pressure reference must be a positive value in hPa, got {relative_to}")
    return hpa_to_bar(hpa)


def _evaluate_row(model: EosModel, props: EffectiveProperties, pressure: float, temps_k: Sequence[float]) -> List[Cell]:
    row: List[Cell] = []
    for T in temps_k:
        try:
            row.append(solve_z(model, props, pressure, T))
        except EvaluationError as exc:
            logger.debug("Cell P=%g bar, T=%g K failed: %s", pressure, T, exc)
            row.append(CellError.from_exception(exc))
    return row


def evaluate_grid(
    model: EosModel,
    props: EffectiveProperties,
    pressures: Sequence[float],
    temperatures: Sequence[float],
    reference: float = 0.0,
    max_workers: Optional[int] = None,
) -> ResultGrid:
    """Evaluate every (pressure, temperature) pair; ``temperatures`` in °C."""

    model = EosModel(model)
    p_abs = [p + reference for p in pressures]
    temps_k = [celsius_to_kelvin(t) for t in temperatures]

    if max_workers is not None and max_workers > 1 and len(p_abs) > 1:
        n = len(p_abs)
        with ProcessPoolExecutor(max_workers=max_workers) as pool:
            rows = list(pool.map(_evaluate_row, [model] * n, [props] * n, p_abs, [temps_k] * n))
    else:
        rows = [_evaluate_row(model, props, p, temps_k) for p in p_abs]

    grid = ResultGrid(pressures=list(pressures), absolute_pressures=p_abs, temperatures=list(temperatures))
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            grid.cells[(i, j)] = cell

    failed = grid.errors()
    if failed:
        logger.warning("%d of %d grid cells could not be evaluated", len(failed), len(grid.cells))
    return grid


def evaluate(
    gas_spec: str,
    model: Union[EosModel, str],
    pressure_spec: str,
    temperature_spec: str,
    relative_to: Reference = None,
    mixing_rule: MixingRule = MixingRule.KAY,
    database: Optional[GasDatabase] = None,
    max_workers: Optional[int] = None,
) -> Union[float, ResultGrid]:
    """Z-factor of ``gas_spec`` for scalar or range pressure/temperature specs.

    Returns a float when both specs are scalars, a :class:`ResultGrid` otherwise.
    Input errors raise before any evaluation; in a grid, evaluation errors are
    stored per cell, for a scalar they raise.
    """

    eos = model if isinstance(model, EosModel) else EosModel.parse(model)
    mixture = resolve_mixture(gas_spec, database)
    props = effective_properties(mixture, mixing_rule)
    pressures = expand(pressure_spec)
    temperatures = expand(temperature_spec)
    ref = reference_bar(relative_to)
    logger.debug(
        "Evaluating %s with %s: %d pressure(s) x %d temperature(s), reference %g bar",
        gas_spec, eos.value, len(pressures), len(temperatures), ref,
    )

    if len(pressures) == 1 and len(temperatures) == 1:
        return solve_z(eos, props, pressures[0] + ref, celsius_to_kelvin(temperatures[0]))
    return evaluate_grid(eos, props, pressures, temperatures, reference=ref, max_workers=max_workers)
