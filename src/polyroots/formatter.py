# -----------------------------------------------------------------------------
# Formatters
# Purpose:
#   Render coefficient vectors back to the text form the parser accepts, and
#   render roots for display ("re ± im i").
# -----------------------------------------------------------------------------

from __future__ import annotations
from decimal import Decimal
from typing import List, Sequence

from .types import Root, ComplexRoot

ROUND = 6

def _magnitude(a: float) -> str:
    # 2.0 → "2", 2.5 → "2.5", 1e-05 → "0.00001" (the parser has no exponent notation)
    a = float(a)
    if a.is_integer():
        return str(int(a))
    return format(Decimal(repr(a)), "f")

def format_polynomial(coefficients: Sequence[float]) -> str:
    """
    Descending-power coefficients to canonical text.
      [1, -3, 2]   → "x^2 - 3x + 2"
      [-1, 3, -2]  → "-x^2 + 3x - 2"
      [0, 0, 0]    → "0"
      []           → ""
    """
    if not coefficients:
        return ""
    deg = len(coefficients) - 1
    out: List[str] = []
    for i, c in enumerate(coefficients):
        if c == 0:
            continue
        power = deg - i
        a = abs(c)
        if out:
            sign = " - " if c < 0 else " + "
        else:
            sign = "-" if c < 0 else ""
        num = "" if a == 1 and power > 0 else _magnitude(a)
        if power == 0:
            term = _magnitude(a)
        elif power == 1:
            term = f"{num}x"
        else:
            term = f"{num}x^{power}"
        out.append(sign + term)
    return "".join(out) or "0"

def format_root(root: Root, precision: int = ROUND) -> str:
    if isinstance(root, ComplexRoot):
        if root.im == 0:
            return f"{root.re:.{precision}f}"
        sign = "+" if root.im > 0 else "-"
        return f"{root.re:.{precision}f} {sign} {abs(root.im):.{precision}f}i"
    return f"{root.value:.{precision}f}"
