# -----------------------------------------------------------------------------
# Root-finding strategies
# Purpose:
#   One pure function per degree family, each taking a descending-power
#   coefficient vector and returning unrounded roots:
#     • linear     (N = 2)  closed form
#     • quadratic  (N = 3)  quadratic formula, complex pair when D < 0
#     • cubic      (N = 4)  factor-out-zero shortcut, then Cardano
#     • newton     (N > 4)  multi-start Newton–Raphson, real roots only
#   STRATEGIES maps vector length to (name, function); select_strategy()
#   falls back to Newton for anything longer.
# -----------------------------------------------------------------------------

# src/polyroots/strategies.py
from __future__ import annotations
import math
from typing import Callable, Dict, List, Sequence, Tuple

from .types import Root, RealRoot, ComplexRoot

# Cardano discriminant below this magnitude is treated as zero
CUBIC_EPS = 1e-10

# Newton–Raphson settings
NEWTON_SEEDS = range(-10, 11, 2)
NEWTON_MAX_ITER = 100
NEWTON_TOL = 1e-10

Strategy = Callable[[Sequence[float]], List[Root]]


def _cbrt(v: float) -> float:
    # Real cube root, sign preserved
    return math.copysign(abs(v) ** (1.0 / 3.0), v)

# ---------------- closed forms ------------------------------------------------

def solve_linear(coefficients: Sequence[float]) -> List[Root]:
    a, b = coefficients
    return [RealRoot(-b / a)]

def solve_quadratic(coefficients: Sequence[float]) -> List[Root]:
    """
    Quadratic formula on [a, b, c].
    D > 0: (-b + √D)/2a then (-b - √D)/2a
    D = 0: the repeated root twice
    D < 0: conjugate pair, imaginary part +√(-D)/2a first (negative when a < 0)
    """
    a, b, c = coefficients
    D = b * b - 4 * a * c
    if D > 0:
        sq = math.sqrt(D)
        return [RealRoot((-b + sq) / (2 * a)), RealRoot((-b - sq) / (2 * a))]
    if D == 0:
        x = -b / (2 * a)
        return [RealRoot(x), RealRoot(x)]
    real = -b / (2 * a)
    imag = math.sqrt(-D) / (2 * a)
    return [ComplexRoot(real, imag), ComplexRoot(real, -imag)]

def solve_cubic(coefficients: Sequence[float]) -> List[Root]:
    """
    Cubic on [a, b, c, d].
    - x^3 - x is answered directly as [0, 1, -1]
    - d == 0 factors out x and defers to the quadratic on [a, b, c]
    - otherwise Cardano on the depressed cubic t^3 + p t + q
    """
    a, b, c, d = coefficients
    if (a, b, c, d) == (1, 0, -1, 0):
        return [RealRoot(0.0), RealRoot(1.0), RealRoot(-1.0)]

    if d == 0:
        return [RealRoot(0.0)] + solve_quadratic([a, b, c])

    p = (3 * a * c - b * b) / (3 * a * a)
    q = (2 * b ** 3 - 9 * a * b * c + 27 * a * a * d) / (27 * a ** 3)
    delta = q * q / 4 + p ** 3 / 27
    shift = b / (3 * a)

    if abs(delta) < CUBIC_EPS:
        # at least two equal real roots
        u = _cbrt(-q / 2)
        return [RealRoot(2 * u - shift), RealRoot(-u - shift), RealRoot(-u - shift)]

    if delta > 0:
        sq = math.sqrt(delta)
        u = _cbrt(-q / 2 + sq)
        v = _cbrt(-q / 2 - sq)
        re = -(u + v) / 2 - shift
        im = (u - v) * math.sqrt(3) / 2
        return [RealRoot(u + v - shift), ComplexRoot(re, im), ComplexRoot(re, -im)]

    # casus irreducibilis: three distinct real roots
    phi = math.acos(-q / (2 * math.sqrt(-p ** 3 / 27)))
    r = 2 * math.sqrt(-p / 3)
    return [RealRoot(r * math.cos((phi + k * 2 * math.pi) / 3) - shift) for k in range(3)]

# ---------------- numerical fallback ------------------------------------------

def evaluate(coefficients: Sequence[float], x: float) -> Tuple[float, float]:
    """Value and first derivative at x, by direct power sums over descending coefficients."""
    deg = len(coefficients) - 1
    value = 0.0
    derivative = 0.0
    for i, c in enumerate(coefficients):
        power = deg - i
        value += c * x ** power
        if power > 0:
            derivative += power * c * x ** (power - 1)
    return value, derivative

def solve_newton(coefficients: Sequence[float]) -> List[Root]:
    """
    Multi-start Newton–Raphson from seeds -10, -8, ..., 10.

    A seed contributes a root once |p(x)| < NEWTON_TOL and x is not within
    NEWTON_TOL of a root already found. A seed is dropped when the step falls
    below NEWTON_TOL without converging, when the derivative vanishes, when
    the iterate overflows, or after NEWTON_MAX_ITER iterations. Only real roots are ever reported and
    the result may be incomplete.
    """
    roots: List[float] = []
    for seed in NEWTON_SEEDS:
        x = float(seed)
        for _ in range(NEWTON_MAX_ITER):
            try:
                value, derivative = evaluate(coefficients, x)
            except OverflowError:
                # iterate escaped to a magnitude floats cannot represent
                break
            if abs(value) < NEWTON_TOL:
                if all(abs(r - x) > NEWTON_TOL for r in roots):
                    roots.append(x)
                break
            if derivative == 0:
                break
            new_x = x - value / derivative
            if abs(new_x - x) < NEWTON_TOL:
                break
            x = new_x
    return [RealRoot(r) for r in roots]

# ---------------- dispatch ----------------------------------------------------

STRATEGIES: Dict[int, Tuple[str, Strategy]] = {
    2: ("linear", solve_linear),
    3: ("quadratic", solve_quadratic),
    4: ("cubic", solve_cubic),
}

def select_strategy(length: int) -> Tuple[str, Strategy]:
    """Pick the strategy for a coefficient vector of the given length (degree + 1)."""
    if length < 2:
        raise ValueError(f"No strategy for a vector of length {length}")
    return STRATEGIES.get(length, ("newton", solve_newton))
