import dataclasses
import json

import pytest

from rkz.common.exceptions import DuplicateComponent, GasNotFound
from rkz.properties.gases import DEFAULT_DATABASE, GasDatabase, list_gases, lookup


def write_table(tmp_path, gases, T_unit="K", P_unit="bar"):
    fp = tmp_path / "gases.json"
    payload = {"metadata": {"T_unit": T_unit, "P_unit": P_unit}, "gases": gases}
    fp.write_text(json.dumps(payload), encoding="utf-8")
    return fp


def test_lookup_is_case_insensitive():
    assert lookup("n2") is lookup("N2")
    assert lookup(" co2 ").name == "Carbon dioxide"
    assert "he" in DEFAULT_DATABASE
    assert "unobtainium" not in DEFAULT_DATABASE


def test_lookup_unknown_gas():
    with pytest.raises(GasNotFound):
        lookup("unobtainium")


def test_default_table_content():
    gases = list_gases()
    assert len(gases) >= 24
    ids = [g.id.lower() for g in gases]
    assert len(ids) == len(set(ids))
    for g in gases:
        assert g.Tc > 0.0 and g.Pc > 0.0
        assert -1.0 < g.omega < 1.0

    n2 = lookup("N2")
    assert abs(n2.Tc - 126.19) < 1e-9
    assert abs(n2.Pc - 33.96) < 1e-9
    assert abs(n2.omega - 0.037) < 1e-12


def test_table_is_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        lookup("N2").Tc = 0.0
    with pytest.raises(TypeError):
        DEFAULT_DATABASE._index["xx"] = lookup("N2")


def test_custom_table(tmp_path):
    fp = write_table(tmp_path, [
        {"id": "X1", "name": "Test gas 1", "Tc": 300, "Pc": 50, "omega": 0},
        {"id": "X2", "name": "Test gas 2", "Tc": 400, "Pc": 40, "omega": 0.1},
    ])
    db = GasDatabase.from_json(fp)
    assert len(db) == 2
    assert [g.id for g in db] == ["X1", "X2"]
    assert db.lookup("x2").Tc == 400.0
    with pytest.raises(GasNotFound):
        db.lookup("N2")


def test_custom_table_unit_mismatch(tmp_path):
    fp = write_table(tmp_path, [{"id": "X1", "name": "Test", "Tc": 300, "Pc": 5e6, "omega": 0}], P_unit="Pa")
    with pytest.raises(ValueError):
        GasDatabase.from_json(fp)


def test_custom_table_duplicate_id(tmp_path):
    fp = write_table(tmp_path, [
        {"id": "X1", "name": "Test", "Tc": 300, "Pc": 50, "omega": 0},
        {"id": "x1", "name": "Test again", "Tc": 310, "Pc": 51, "omega": 0},
    ])
    with pytest.raises(DuplicateComponent):
        GasDatabase.from_json(fp)


def test_custom_table_missing_field(tmp_path):
    fp = write_table(tmp_path, [{"id": "X1", "name": "Test", "Tc": 300, "Pc": 50}])
    with pytest.raises(KeyError):
        GasDatabase.from_json(fp)
