# -----------------------------------------------------------------------------
# Solver: text → coefficients → roots
# Responsibilities:
#   • Parse the expression (EmptyExpression / InvalidExpression on failure)
#   • Trim trailing zero coefficients, except for length-4 (cubic) vectors
#   • Reject constants (ConstantPolynomial)
#   • Dispatch to the degree strategy and round every root component
#   • Absorb every failure into a SolveResult; solve() never raises
# -----------------------------------------------------------------------------

# src/polyroots/solver.py
from __future__ import annotations
import math
from typing import List, Sequence, Tuple

from .parser import parse_polynomial
from .strategies import select_strategy
from .tracer import Tracer
from .types import (
    Root, RealRoot, ComplexRoot, SolveResult,
    PolynomialError, ConstantPolynomial, SolverInternalError,
)

ROUND = 6


def trim_coefficients(coefficients: Sequence[float]) -> List[float]:
    """
    Drop trailing zeros from the constant end of the vector while more than
    one coefficient remains. Length-4 vectors are returned untouched so that
    cubics with zero low-order terms still reach the cubic solver.
    """
    out = list(coefficients)
    if len(out) == 4:
        return out
    while len(out) > 1 and out[-1] == 0:
        out.pop()
    return out

def _round(v: float, places: int = ROUND) -> float:
    # + 0.0 folds -0.0 into 0.0
    return round(v, places) + 0.0

def _finite(root: Root) -> bool:
    if isinstance(root, ComplexRoot):
        return math.isfinite(root.re) and math.isfinite(root.im)
    return math.isfinite(root.value)

def round_root(root: Root, places: int = ROUND) -> Root:
    if isinstance(root, ComplexRoot):
        return ComplexRoot(_round(root.re, places), _round(root.im, places))
    return RealRoot(_round(root.value, places))

def find_roots(coefficients: Sequence[float]) -> Tuple[str, List[Root]]:
    """
    Roots of an already-trimmed vector, unrounded.
    Returns (strategy name, roots); raises ConstantPolynomial for length 1.
    """
    if len(coefficients) < 2:
        raise ConstantPolynomial()
    name, strategy = select_strategy(len(coefficients))
    return name, strategy(coefficients)

def _failure(expression: str, err: PolynomialError, tracer: Tracer,
             coefficients: Sequence[float] = (), strategy: str | None = None) -> SolveResult:
    tracer.add("error", {"kind": err.kind, "message": str(err)}, note=str(err))
    return SolveResult(
        ok=False,
        expression=expression,
        coefficients=list(coefficients),
        strategy=strategy,
        roots=[],
        steps=tracer.notes(),
        trace=tracer.steps(),
        error=str(err),
        error_kind=err.kind,
    )

def solve(expression: str) -> SolveResult:
    """
    Solve a polynomial given as text.

    Always returns a SolveResult: on success `roots` holds every root found
    (each component rounded to 6 places) and `error` is None; on failure
    `roots` is empty and `error` / `error_kind` name the problem.
    """
    tracer = Tracer()
    coefficients: List[float] = []
    strategy: str | None = None
    try:
        parsed = parse_polynomial(expression)
        tracer.add("parse", {"coefficients": parsed}, note=f"Parsed coefficients: {parsed}")

        coefficients = trim_coefficients(parsed)
        if coefficients != parsed:
            tracer.add("trim", {"before": parsed, "after": coefficients},
                       note=f"Trimmed trailing zeros: {coefficients}")
        elif len(parsed) == 4:
            tracer.add("trim", {"skipped": True, "reason": "cubic"})

        if len(coefficients) == 1:
            raise ConstantPolynomial()

        strategy, roots = find_roots(coefficients)
        tracer.add("strategy", {"name": strategy, "degree": len(coefficients) - 1},
                   note=f"Degree {len(coefficients) - 1}: using {strategy} solver")
        if not roots:
            # only the Newton fallback can come back empty
            raise SolverInternalError(f"{strategy} search found no real roots")

        rounded = [round_root(r) for r in roots]
        if not all(_finite(r) for r in rounded):
            raise SolverInternalError(f"{strategy} solver produced a non-finite root")
        tracer.add("roots", {"count": len(rounded)}, note=f"Found {len(rounded)} root(s)")
    except PolynomialError as e:
        return _failure(expression, e, tracer, coefficients, strategy)
    except Exception as e:
        return _failure(expression, SolverInternalError(str(e)), tracer, coefficients, strategy)

    return SolveResult(
        ok=True,
        expression=expression,
        coefficients=coefficients,
        strategy=strategy,
        roots=rounded,
        steps=tracer.notes(),
        trace=tracer.steps(),
    )
