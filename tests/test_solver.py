import pytest
from polyroots import solver
from polyroots.solver import solve, trim_coefficients, round_root
from polyroots.types import RealRoot, ComplexRoot

def _sorted_values(res):
    return sorted(r.value for r in res.roots)

def test_quadratic_two_real_roots():
    res = solve("x^2 - 3x + 2")
    assert res.ok and res.error is None
    assert res.strategy == "quadratic"
    assert len(res.roots) == 2
    assert _sorted_values(res) == [1.0, 2.0]

def test_cubic_shortcut_exact_order():
    res = solve("x^3 - x")
    assert res.roots == [RealRoot(0.0), RealRoot(1.0), RealRoot(-1.0)]
    assert res.coefficients == [1.0, 0.0, -1.0, 0.0]

def test_complex_conjugate_pair():
    res = solve("x^2 + 1")
    assert res.roots == [ComplexRoot(0.0, 1.0), ComplexRoot(0.0, -1.0)]

def test_empty_expression():
    for text in ("", "   ", None):
        res = solve(text)
        assert not res.ok
        assert res.error_kind == "EmptyExpression"
        assert res.error == "No polynomial expression provided"
        assert res.roots == []

@pytest.mark.parametrize("text", ["5", "0", "-3", "x"])
def test_constant_polynomial(text):
    res = solve(text)
    assert res.error_kind == "ConstantPolynomial"
    assert res.error == "Constant polynomial has no roots"
    assert res.roots == []

def test_invalid_expression():
    res = solve("invalid")
    assert res.error_kind == "InvalidExpression"
    assert res.error.startswith("Invalid polynomial expression")
    assert res.roots == []

def test_zero_leading_coefficient_is_internal_error():
    res = solve("0x^2 + x + 1")
    assert not res.ok
    assert res.error_kind == "SolverInternalError"
    assert res.error.startswith("An error occurred while solving the polynomial")
    assert res.roots == []

def test_repeated_root_is_returned_twice():
    res = solve("x^2 - 2x + 1")
    assert res.roots == [RealRoot(1.0), RealRoot(1.0)]

def test_cubic_roots_are_rounded():
    res = solve("x^3 - 1")
    assert res.strategy == "cubic"
    assert res.roots == [RealRoot(1.0), ComplexRoot(-0.5, 0.866025), ComplexRoot(-0.5, -0.866025)]

def test_cubic_three_real_roots():
    res = solve("x^3 - 6x^2 + 11x - 6")
    assert _sorted_values(res) == [1.0, 2.0, 3.0]

def test_cubic_with_zero_low_order_terms_is_not_trimmed():
    res = solve("x^3 - 2x^2")
    assert res.strategy == "cubic"
    assert res.coefficients == [1.0, -2.0, 0.0, 0.0]
    assert res.roots == [RealRoot(0.0), RealRoot(2.0), RealRoot(0.0)]

def test_trailing_zero_trim_drops_zero_root_outside_cubics():
    # [1, -3, 0] is trimmed to [1, -3]; the root at 0 is not reported
    res = solve("x^2 - 3x")
    assert res.coefficients == [1.0, -3.0]
    assert res.strategy == "linear"
    assert res.roots == [RealRoot(3.0)]

def test_newton_fallback_reports_real_roots_only():
    res = solve("x^4 - 1")
    assert res.strategy == "newton"
    assert _sorted_values(res) == [-1.0, 1.0]

def test_newton_degree_five_is_incomplete():
    res = solve("x^5 - 1")
    assert res.strategy == "newton"
    assert [r.value for r in res.roots] == [1.0]

def test_newton_without_real_roots_is_an_error():
    res = solve("x^4 + 1")
    assert res.error_kind == "SolverInternalError"
    assert res.roots == []

def test_solve_is_idempotent():
    for text in ("x^2 - 3x + 2", "x^3 - 1", "x^4 - 1", "invalid", ""):
        assert solve(text) == solve(text)

def test_trace_records_each_stage():
    res = solve("x^2 - 3x + 2")
    assert [t["kind"] for t in res.trace] == ["parse", "strategy", "roots"]
    assert res.steps[0] == "Parsed coefficients: [1.0, -3.0, 2.0]"

    failed = solve("7")
    assert [t["kind"] for t in failed.trace] == ["parse", "error"]

def test_trim_coefficients():
    assert trim_coefficients([1.0, -3.0, 0.0]) == [1.0, -3.0]
    assert trim_coefficients([0.0, 0.0, 0.0]) == [0.0]
    assert trim_coefficients([1.0, 0.0, 0.0, 0.0]) == [1.0, 0.0, 0.0, 0.0]
    assert trim_coefficients([1.0, 0.0, 0.0, 0.0, 0.0]) == [1.0]

def test_round_root_folds_negative_zero():
    r = round_root(ComplexRoot(-0.0000001, 2.1234567))
    assert r == ComplexRoot(0.0, 2.123457)
    assert str(r.re) == "0.0"

def test_overflowing_coefficient_is_invalid_expression():
    res = solve("9" * 400 + "x^2 + x + 1")
    assert res.error_kind == "InvalidExpression"
    assert res.roots == []

def test_degree_above_cap_is_invalid_expression():
    res = solve("x^50000000")
    assert res.error_kind == "InvalidExpression"
    assert "maximum degree" in res.error

@pytest.mark.parametrize("bad", [RealRoot(float("nan")), ComplexRoot(1.0, float("inf"))])
def test_non_finite_root_is_internal_error(monkeypatch, bad):
    monkeypatch.setattr(solver, "select_strategy", lambda length: ("linear", lambda c: [bad]))
    res = solve("2x - 4")
    assert not res.ok
    assert res.error_kind == "SolverInternalError"
    assert "non-finite root" in res.error
    assert res.roots == []

def test_result_to_dict_uses_wire_roots():
    out = solve("x^2 + 1").to_dict()
    assert out["roots"] == [{"re": 0.0, "im": 1.0}, {"re": 0.0, "im": -1.0}]
    assert out["error"] is None and out["strategy"] == "quadratic"
