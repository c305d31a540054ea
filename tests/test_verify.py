import pytest
from polyroots.verify import residuals, verify_roots
from polyroots.solver import solve
from polyroots.types import RealRoot, ComplexRoot

def test_exact_real_roots_have_zero_residual():
    out = verify_roots([1.0, -3.0, 2.0], [RealRoot(2.0), RealRoot(1.0)])
    assert out["residuals"] == pytest.approx([0.0, 0.0])
    assert out["passed"] and out["complete"]
    assert out["expected_roots"] == 2 and out["found_roots"] == 2

def test_complex_roots_are_substituted_as_complex():
    res = residuals([1.0, 0.0, 1.0], [ComplexRoot(0.0, 1.0), ComplexRoot(0.0, -1.0)])
    assert res == pytest.approx([0.0, 0.0], abs=1e-12)

def test_wrong_root_fails():
    out = verify_roots([1.0, -3.0, 2.0], [RealRoot(5.0)])
    assert out["max_residual"] == pytest.approx(12.0)
    assert not out["passed"]
    assert not out["complete"]

def test_rounded_cubic_roots_pass():
    res = solve("x^3 - 1")
    out = verify_roots(res.coefficients, res.roots)
    assert out["passed"] and out["complete"]

def test_newton_result_is_flagged_incomplete():
    res = solve("x^4 - 1")
    out = verify_roots(res.coefficients, res.roots)
    assert out["passed"]
    assert out["expected_roots"] == 4
    assert out["found_roots"] == 2
    assert not out["complete"]
