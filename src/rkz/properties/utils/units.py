R_L_BAR_PER_MOL_K = 0.08314462618  # L·bar·mol^-1·K^-1
ZERO_CELSIUS_K = 273.15
HPA_PER_BAR = 1000.0
STD_ATM_HPA = 1013.25


def celsius_to_kelvin(t_c: float) -> float:
    return t_c + ZERO_CELSIUS_K


def hpa_to_bar(p_hpa: float) -> float:
    return p_hpa / HPA_PER_BAR


def assert_unit(actual: str, expected: str, what: str):
    if actual != expected:
        raise ValueError(f"Unit mismatch for {what}: got '{actual}', expected '{expected}'")
