from __future__ import annotations
import os
import json
import time
from typing import Any, Dict
from .models import SolveOutput, TraceRecord

TRACE_DIR = os.getenv("TRACE_DIR", "traces")
TRACE_ENABLED = os.getenv("TRACE_ENABLED", "0") == "1"

def ts() -> str:
    return time.strftime("%Y%m%d_%H%M%SZ", time.gmtime())

def save_trace(meta: Dict[str, Any], user_input: Dict[str, Any], output: SolveOutput) -> str:
    record = TraceRecord(meta=meta, input=user_input, output=output)
    os.makedirs(TRACE_DIR, exist_ok=True)
    fname = f"solve_{ts()}_{time.monotonic_ns() % 1_000_000:06d}.json"
    fpath = os.path.join(TRACE_DIR, fname)
    with open(fpath, "w", encoding="utf-8") as f:
        json.dump(record.model_dump(), f, indent=2)
    return fpath
