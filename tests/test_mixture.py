import pytest

from rkz.common.exceptions import (
    DuplicateComponent,
    GasNotFound,
    MixtureFractionMismatch,
    MixtureOverflow,
    MixtureSyntaxError,
)
from rkz.properties.gases import lookup
from rkz.properties.mixture import (
    EffectiveProperties,
    MixingRule,
    effective_properties,
    resolve_mixture,
)


def test_remainder_is_shared_by_implicit_terms():
    fr = resolve_mixture("80%N2+O2").fractions()
    assert list(fr) == ["N2", "O2"]
    assert abs(fr["N2"] - 0.80) < 1e-12
    assert abs(fr["O2"] - 0.20) < 1e-12

    fr = resolve_mixture("N2+O2").fractions()
    assert abs(fr["N2"] - 0.5) < 1e-12
    assert abs(fr["O2"] - 0.5) < 1e-12

    fr = resolve_mixture("CH4 + 5%CO2 + 2.5%N2").fractions()
    assert abs(fr["CH4"] - 0.925) < 1e-12
    assert abs(fr["CO2"] - 0.05) < 1e-12
    assert abs(fr["N2"] - 0.025) < 1e-12


def test_fractions_sum_to_one():
    for spec in ["N2+O2+Ar", "78.08%N2+20.95%O2+Ar+CO2", "33%H2+33%He+34%Ne"]:
        mix = resolve_mixture(spec)
        assert abs(sum(c.fraction for c in mix.components) - 1.0) < 1e-12
        assert all(c.fraction > 0.0 for c in mix.components)


def test_single_gas_is_pure():
    mix = resolve_mixture("ch4")
    assert mix.is_pure
    assert mix.components[0].gas is lookup("CH4")
    assert mix.components[0].fraction == 1.0
    assert resolve_mixture("100%CH4").fractions() == {"CH4": 1.0}


def test_pure_gas_equivalence():
    for gas_id in ["N2", "CH4", "H2", "CO2"]:
        direct = EffectiveProperties.from_gas(lookup(gas_id))
        assert effective_properties(resolve_mixture(gas_id)) == direct


def test_overflow():
    with pytest.raises(MixtureOverflow):
        resolve_mixture("60%N2+50%O2")
    with pytest.raises(MixtureOverflow):
        resolve_mixture("60%N2+50%O2+Ar")


def test_fraction_mismatch():
    with pytest.raises(MixtureFractionMismatch):
        resolve_mixture("60%N2+30%O2")
    with pytest.raises(MixtureFractionMismatch):
        resolve_mixture("100%N2+O2")


def test_unknown_and_duplicate_gas():
    with pytest.raises(GasNotFound):
        resolve_mixture("80%N2+XX")
    with pytest.raises(GasNotFound):
        resolve_mixture("60%N2+50%XX")
    with pytest.raises(DuplicateComponent):
        resolve_mixture("N2+n2")


@pytest.mark.parametrize("spec", ["N2++O2", "", "abc%N2+O2", "0%N2+O2", "-10%N2+O2", "50%+N2", "%N2"])
def test_syntax_errors(spec):
    with pytest.raises(MixtureSyntaxError):
        resolve_mixture(spec)


def test_kay_mixing():
    props = effective_properties(resolve_mixture("N2+O2"))
    n2, o2 = lookup("N2"), lookup("O2")
    assert abs(props.Tc - 0.5 * (n2.Tc + o2.Tc)) < 1e-12
    assert abs(props.Pc - 0.5 * (n2.Pc + o2.Pc)) < 1e-12
    assert abs(props.omega - 0.5 * (n2.omega + o2.omega)) < 1e-12
    assert props.mixing_rule is MixingRule.KAY
    assert not props.uses_quadratic_mixing


def test_quadratic_rule_only_applies_to_mixtures():
    assert effective_properties(resolve_mixture("N2+O2"), MixingRule.QUADRATIC).uses_quadratic_mixing
    assert not effective_properties(resolve_mixture("N2"), MixingRule.QUADRATIC).uses_quadratic_mixing
