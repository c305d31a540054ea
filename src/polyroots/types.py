# -----------------------------------------------------------------------------
# Types module: Shared dataclasses and errors for the root solver
# Purpose:
#   Define the root representation (real | complex), the structured solve
#   result returned to callers, and the error taxonomy used by the parser
#   and solver.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Union

@dataclass(frozen=True)
class RealRoot:
    """A real root. Serialises to a plain number at the boundary."""
    value: float

@dataclass(frozen=True)
class ComplexRoot:
    """
    A non-real root.
    - re: real part
    - im: imaginary part (sign distinguishes the two halves of a conjugate pair)
    """
    re: float
    im: float

Root = Union[RealRoot, ComplexRoot]


# ---------------- errors ------------------------------------------------------

class PolynomialError(Exception):
    # Base class; `kind` is the name reported in SolveResult.error_kind
    kind = "PolynomialError"

class EmptyExpression(PolynomialError):
    kind = "EmptyExpression"

    def __init__(self, message: str = "No polynomial expression provided"):
        super().__init__(message)

class InvalidExpression(PolynomialError):
    """
    Raised by the parser when the text does not match the term grammar.
    `position` is the index into the normalised (whitespace-free, lowercased)
    text where parsing stopped.
    """
    kind = "InvalidExpression"

    def __init__(self, message: str = "Invalid polynomial expression", position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)

class ConstantPolynomial(PolynomialError):
    kind = "ConstantPolynomial"

    def __init__(self, message: str = "Constant polynomial has no roots"):
        super().__init__(message)

class SolverInternalError(PolynomialError):
    kind = "SolverInternalError"

    def __init__(self, detail: str):
        super().__init__(f"An error occurred while solving the polynomial: {detail}")


# ---------------- results -----------------------------------------------------

def root_to_wire(root: Root) -> Union[float, Dict[str, float]]:
    # Boundary shape: number for real roots, {re, im} for complex ones
    if isinstance(root, ComplexRoot):
        return {"re": root.re, "im": root.im}
    return root.value

def roots_to_wire(roots: List[Root]) -> List[Union[float, Dict[str, float]]]:
    return [root_to_wire(r) for r in roots]

@dataclass
class SolveResult:
    # Structured response used by the API layer and the UI
    ok: bool
    expression: str
    coefficients: List[float] = field(default_factory=list)
    strategy: str | None = None
    roots: List[Root] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)
    trace: List[Dict[str, Any]] = field(default_factory=list)
    error: str | None = None
    error_kind: str | None = None  # PolynomialError.kind of the failure

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "expression": self.expression,
            "coefficients": list(self.coefficients),
            "strategy": self.strategy,
            "roots": roots_to_wire(self.roots),
            "steps": list(self.steps),
            "trace": list(self.trace),
            "error": self.error,
            "error_kind": self.error_kind,
        }
