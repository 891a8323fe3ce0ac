from __future__ import annotations

import math
import threading
from concurrent.futures import ThreadPoolExecutor

from rootfind.typing import ScalarFn


class EvaluationCounter:
    """Wrap ``f`` and count its invocations for a single solve.

    Values are converted with ``float()`` so numpy scalars and 0-d arrays are
    accepted. The counter is safe to share between the two threads of a
    concurrent pair.
    """

    __slots__ = ("_fn", "_lock", "count")

    def __init__(self, fn: ScalarFn, start: int = 0) -> None:
        self._fn = fn
        self._lock = threading.Lock()
        self.count = start

    def __call__(self, x: float) -> float:
        with self._lock:
            self.count += 1
        return float(self._fn(x))

    def exhausted(self, max_evaluations: int) -> bool:
        """True once the count is past a positive ``max_evaluations`` cap."""
        return max_evaluations > 0 and self.count > max_evaluations


def evaluate_pair(
    f: ScalarFn, a: float, b: float, *, concurrent: bool = False
) -> tuple[float, float | None]:
    """Evaluate ``f(a)`` and ``f(b)``.

    With ``concurrent=True`` both run on a two-worker pool and the call returns
    only once both have finished. Sequentially, a NaN at ``a`` skips ``b`` and
    the second value is returned as ``None``.
    """
    if concurrent:
        with ThreadPoolExecutor(max_workers=2) as ex:
            fut_a = ex.submit(f, a)
            fut_b = ex.submit(f, b)
            return float(fut_a.result()), float(fut_b.result())

    fa = float(f(a))
    if math.isnan(fa):
        return fa, None
    return fa, float(f(b))
