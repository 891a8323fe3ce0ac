"""Pytest helpers for the rootfind library."""

from __future__ import annotations

import numpy as np
import pytest


class RecordingFn:
    """Callable that records every location it is evaluated at."""

    def __init__(self, fn):
        self.fn = fn
        self.calls: list[float] = []

    def __call__(self, x: float) -> float:
        self.calls.append(x)
        return self.fn(x)


@pytest.fixture
def recording():
    """Factory fixture wrapping a function so its calls can be inspected."""

    def _make(fn) -> RecordingFn:
        return RecordingFn(fn)

    return _make


@pytest.fixture
def rng():
    """Seeded RNG factory."""

    def _rng(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _rng
