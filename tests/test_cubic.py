from rkz.properties.impl.cubic import solve_cubic_real


def assert_roots(roots, expected, tol=1e-9):
    assert len(roots) == len(expected)
    for r, e in zip(roots, expected):
        assert abs(r - e) < tol


def test_three_distinct_roots():
    # (z-1)(z-2)(z-3)
    assert_roots(solve_cubic_real(-6.0, 11.0, -6.0), [1.0, 2.0, 3.0])


def test_three_roots_with_negative_one():
    # (z+0.5)(z-0.1)(z-0.9)
    a = -(-0.5 + 0.1 + 0.9)
    b = (-0.5 * 0.1) + (-0.5 * 0.9) + (0.1 * 0.9)
    c = -(-0.5 * 0.1 * 0.9)
    assert_roots(solve_cubic_real(a, b, c), [-0.5, 0.1, 0.9])


def test_single_real_root():
    # (z-2)(z^2+1)
    assert_roots(solve_cubic_real(-2.0, 1.0, -2.0), [2.0])


def test_single_negative_real_root():
    # (z+3)(z^2+z+1)
    assert_roots(solve_cubic_real(4.0, 4.0, 3.0), [-3.0])


def test_double_root():
    # (z-1)^2 (z-4)
    assert_roots(solve_cubic_real(-6.0, 9.0, -4.0), [1.0, 4.0])


def test_triple_root():
    # (z-0.375)^3
    roots = solve_cubic_real(-1.125, 0.421875, -0.052734375)
    assert roots
    for r in roots:
        assert abs(r - 0.375) < 1e-5


def test_roots_satisfy_polynomial():
    a, b, c = -1.0, 0.07, -0.0012
    for z in solve_cubic_real(a, b, c):
        assert abs(z ** 3 + a * z * z + b * z + c) < 1e-12
