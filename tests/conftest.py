"""Test fixtures and configuration for closest-fibonacci tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT_PATH = Path(__file__).resolve().parents[1]
if str(_ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(_ROOT_PATH))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLOSEST_FIB_MAX_BITS", raising=False)


@pytest.fixture
def fib_terms() -> list[int]:
    """Fibonacci terms 0, 1, 1, 2, ... up to a bit past 10**40."""
    terms = [0, 1]
    while terms[-1] <= 10**40:
        terms.append(terms[-1] + terms[-2])
    return terms
