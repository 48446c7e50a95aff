# fibops/closest_fibonacci.py
from __future__ import annotations

import os
import time
from typing import Any, Dict, List

from . import register_op


def nearest_fibonacci(n: int) -> int:
    """
    Return the largest Fibonacci number (0, 1, 1, 2, 3, 5, ...) that is <= n.

    Anything <= 0 gives 0. Python ints don't overflow, so every integer input
    has an answer.
    """
    if isinstance(n, bool):
        raise TypeError("nearest_fibonacci() expects an int, not bool")
    i = int(n)

    a, b = 0, 1
    while b <= i:
        a, b = b, a + b
    return a


def _max_bits() -> int:
    """CLOSEST_FIB_MAX_BITS, or 0 (no cap) when unset or not a number."""
    raw = os.getenv("CLOSEST_FIB_MAX_BITS", "").strip()
    return int(raw) if raw.isdigit() else 0


def _coerce(raw: Any, field: str, max_bits: int) -> int:
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f"payload.{field} must be an int")
    try:
        n = int(raw)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"payload.{field} must be an int")

    if max_bits and abs(n).bit_length() > max_bits:
        raise ValueError(f"payload.{field} too large (max {max_bits} bits)")
    return n


@register_op("closest_fibonacci")
def map_closest_fibonacci(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Largest Fibonacci number <= n, for payload.n or each of payload.values."""
    max_bits = _max_bits()

    if "values" in payload:
        if payload.get("n") is not None:
            raise ValueError("payload takes either n or values, not both")

        raw_values = payload["values"]
        if not isinstance(raw_values, list):
            raise ValueError("payload.values must be a list")

        values: List[int] = [
            _coerce(raw, f"values[{idx}]", max_bits) for idx, raw in enumerate(raw_values)
        ]

        start = time.time()
        results = [nearest_fibonacci(v) for v in values]
        elapsed_ms = (time.time() - start) * 1000.0

        return {
            "values": values,
            "results": results,
            "compute_time_ms": elapsed_ms,
        }

    n_raw = payload.get("n")
    if n_raw is None:
        raise ValueError("payload.n is required")

    n = _coerce(n_raw, "n", max_bits)

    start = time.time()
    result = nearest_fibonacci(n)
    elapsed_ms = (time.time() - start) * 1000.0

    return {
        "n": n,
        "result": result,
        "compute_time_ms": elapsed_ms,
    }
