# --- Polynomial Root Solver API (FastAPI) -------------------------------------
# Purpose: Thin HTTP layer over the polyroots core:
#   /solve  text → roots (errors are returned as data, never raised)
#   /parse  text → coefficient vector (400 on bad input)
#   /format coefficients → canonical text
# ------------------------------------------------------------------------------

from __future__ import annotations
import platform
from typing import List
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from polyroots import tracing
from polyroots.formatter import format_polynomial
from polyroots.models import SolveOutput, Verification
from polyroots.parser import parse_polynomial
from polyroots.solver import solve as solve_expression
from polyroots.types import PolynomialError
from polyroots.verify import verify_roots

# Load .env for TRACE_DIR / TRACE_ENABLED and friends
load_dotenv()
VERSION = "1.0.0"

app = FastAPI(title="Polynomial Root Solver API")

# ----------------------------- Schemas ----------------------------------------
class ExpressionRequest(BaseModel):
    # Polynomial in x, e.g. "x^2 - 3x + 2"
    expression: str

class FormatRequest(BaseModel):
    # Descending-power coefficients, e.g. [1, -3, 2]
    coefficients: List[float]

class Parsed(BaseModel):
    coefficients: List[float]
    formatted: str
    degree: int

class Formatted(BaseModel):
    text: str

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.post("/solve", response_model=SolveOutput)
def solve(req: ExpressionRequest):
    """
    Solve the polynomial and attach a residual check of the returned roots.
    Solver failures (empty, invalid, constant, internal) come back with
    ok=False and error/error_kind set; the HTTP status stays 200.
    """
    res = solve_expression(req.expression)
    out = SolveOutput(
        **res.to_dict(),
        formatted=format_polynomial(res.coefficients) if res.coefficients else None,
    )
    if res.ok:
        out.verification = Verification(**verify_roots(res.coefficients, res.roots))

    if tracing.TRACE_ENABLED:
        meta = {"version": VERSION, "platform": platform.platform()}
        out.trace_path = tracing.save_trace(meta, {"expression": req.expression}, out)
    return out

@app.post("/parse", response_model=Parsed)
def parse(req: ExpressionRequest):
    try:
        coeffs = parse_polynomial(req.expression)
    except PolynomialError as e:
        # 400: input does not match the polynomial grammar (or is empty)
        raise HTTPException(status_code=400, detail={"error": str(e), "error_kind": e.kind})
    return Parsed(coefficients=coeffs, formatted=format_polynomial(coeffs), degree=len(coeffs) - 1)

@app.post("/format", response_model=Formatted)
def format_(req: FormatRequest):
    return Formatted(text=format_polynomial(req.coefficients))
