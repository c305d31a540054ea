# -----------------------------------------------------------------------------
# Root verification
# Purpose:
#   Substitute returned roots back into the polynomial (via SymPy) and report
#   residuals plus whether the root set is complete for the degree. Used by the
#   API so callers can see when the Newton fallback missed roots.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Dict, List, Sequence
from sympy import symbols, Poly, I, N

from .types import Root, ComplexRoot

TOL = 1e-4

_x = symbols("x")

def _as_sympy(root: Root):
    if isinstance(root, ComplexRoot):
        return root.re + root.im * I
    return root.value

def residuals(coefficients: Sequence[float], roots: Sequence[Root]) -> List[float]:
    """|p(r)| for every root r."""
    expr = Poly(list(coefficients), _x).as_expr()
    return [float(abs(N(expr.subs(_x, _as_sympy(r))))) for r in roots]

def verify_roots(coefficients: Sequence[float], roots: Sequence[Root], tol: float = TOL) -> Dict[str, Any]:
    """
    Residual check for a solved polynomial.
    - passed: every residual within tol scaled by the largest coefficient
      magnitude (roots are rounded, so an absolute bound would reject
      polynomials with large coefficients)
    - complete: as many roots as the degree
    """
    res = residuals(coefficients, roots)
    scale = max(1.0, max(abs(c) for c in coefficients))
    worst = max(res) if res else 0.0
    degree = len(coefficients) - 1
    return {
        "residuals": res,
        "max_residual": worst,
        "passed": worst <= tol * scale,
        "expected_roots": degree,
        "found_roots": len(roots),
        "complete": len(roots) == degree,
    }
