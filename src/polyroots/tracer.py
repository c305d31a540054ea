# -----------------------------------------------------------------------------
# Solve trace collector
# Purpose:
#   Record what one solve did (parsed coefficients, trimming, strategy,
#   roots, errors) as structured {kind, detail} records, alongside the short
#   human-readable lines shown to users as "steps".
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional

@dataclass
class TraceStep:
    kind: str
    detail: Dict[str, Any]

class Tracer:
    def __init__(self):
        self._records: List[TraceStep] = []
        self._lines: List[str] = []

    def add(self, kind: str, detail: Dict[str, Any], note: Optional[str] = None):
        """Append a structured record; `note` also goes to the readable step list."""
        self._records.append(TraceStep(kind, detail))
        if note:
            self._lines.append(note)

    def notes(self) -> List[str]:
        return list(self._lines)

    def steps(self) -> List[Dict[str, Any]]:
        # plain dicts for JSON responses and trace files
        return [{"kind": r.kind, "detail": dict(r.detail)} for r in self._records]
