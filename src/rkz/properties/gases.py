"""Read-only table of gas identities and critical constants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Tuple, Union

from rkz.common.exceptions import DuplicateComponent, GasNotFound

from .impl.loader import DEFAULT_GAS_TABLE, load_gas_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gas:
    id: str
    name: str
    Tc: float  # K
    Pc: float  # bar
    omega: float


class GasDatabase:
    """Immutable id -> :class:`Gas` mapping with case-insensitive lookup."""

    def __init__(self, gases: Iterable[Gas]):
        ordered: List[Gas] = []
        index = {}
        for gas in gases:
            key = gas.id.lower()
            if key in index:
                raise DuplicateComponent(f"Gas '{gas.id}' is listed more than once in the gas table")
            index[key] = gas
            ordered.append(gas)
        self._gases: Tuple[Gas, ...] = tuple(ordered)
        self._index = MappingProxyType(index)

    @staticmethod
    def from_json(json_path: Union[str, Path]) -> "GasDatabase":
        rows = load_gas_rows(json_path)
        db = GasDatabase(Gas(**row) for row in rows)
        logger.debug("Loaded %d gases from %s", len(db), json_path)
        return db

    def lookup(self, gas_id: str) -> Gas:
        gas = self._index.get(gas_id.strip().lower())
        if gas is None:
            raise GasNotFound(f"The requested gas '{gas_id}' is not referenced")
        return gas

    def __contains__(self, gas_id: object) -> bool:
        return isinstance(gas_id, str) and gas_id.strip().lower() in self._index

    def __iter__(self) -> Iterator[Gas]:
        return iter(self._gases)

    def __len__(self) -> int:
        return len(self._gases)


DEFAULT_DATABASE = GasDatabase.from_json(DEFAULT_GAS_TABLE)


def lookup(gas_id: str) -> Gas:
    return DEFAULT_DATABASE.lookup(gas_id)


def list_gases() -> List[Gas]:
    return list(DEFAULT_DATABASE)
