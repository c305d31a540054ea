from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

class ComplexOut(BaseModel):
    re: float
    im: float

# real roots travel as plain numbers, complex ones as {re, im}
RootOut = Union[float, ComplexOut]

class Verification(BaseModel):
    residuals: List[float] = Field(default_factory=list)
    max_residual: float = 0.0
    passed: bool = True
    expected_roots: int = 0
    found_roots: int = 0
    complete: bool = True

class SolveOutput(BaseModel):
    ok: bool
    expression: str
    coefficients: List[float] = Field(default_factory=list)
    formatted: Optional[str] = None
    strategy: Optional[str] = None
    roots: List[RootOut] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    trace: List[Dict[str, Any]] = Field(default_factory=list)
    verification: Optional[Verification] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    trace_path: Optional[str] = None

class TraceRecord(BaseModel):
    meta: Dict[str, Any]
    input: Dict[str, Any]
    output: SolveOutput
