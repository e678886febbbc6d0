import json
from pathlib import Path
from typing import Any, Dict, List, Union

from ..utils.units import assert_unit

DEFAULT_GAS_TABLE = Path(__file__).resolve().parents[1] / "data" / "gases.json"

_REQUIRED = ("id", "name", "Tc", "Pc", "omega")


def load_gas_rows(json_path: Union[str, Path] = DEFAULT_GAS_TABLE) -> List[Dict[str, Any]]:
    """Read a gas table and return one dict per gas with Tc [K], Pc [bar], omega."""
    p = Path(json_path)
    data = json.loads(p.read_text(encoding="utf-8"))
    meta = data.get("metadata", {})
    assert_unit(meta.get("T_unit", "K"), "K", "critical temperature")
    assert_unit(meta.get("P_unit", "bar"), "bar", "critical pressure")

    rows: List[Dict[str, Any]] = []
    for entry in data["gases"]:
        for k in _REQUIRED:
            if k not in entry:
                raise KeyError(f"Missing '{k}' in gas entry {entry!r} of {p}")
        rows.append(
            {
                "id": str(entry["id"]).strip(),
                "name": str(entry["name"]),
                "Tc": float(entry["Tc"]),
                "Pc": float(entry["Pc"]),
                "omega": float(entry["omega"]),
            }
        )
    return rows
