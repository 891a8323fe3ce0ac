from __future__ import annotations

import math

import pytest

from rootfind import Bound, RootStatus
from rootfind.numerics.bisection import bisection_method
from rootfind.types import opposite_sign


class BracketSpy:
    """Function wrapper that replays bisection to check the held bracket."""

    def __init__(self, fn, lo: Bound, hi: Bound):
        self.fn = fn
        self.lo = lo
        self.hi = hi
        self.brackets: list[tuple[Bound, Bound]] = []

    def __call__(self, x: float) -> float:
        value = self.fn(x)
        if value > 0 and self.lo.value > 0 or value < 0 and self.lo.value < 0:
            self.lo = Bound(x, value)
        else:
            self.hi = Bound(x, value)
        self.brackets.append((self.lo, self.hi))
        return value


def test_converges_on_linear_bracket():
    f = lambda x: x - 7.0  # noqa: E731
    res = bisection_method(f, Bound(-3.0, -10.0), Bound(10.0, 3.0), 1e-12)

    assert res.converged
    assert res.method == "bisection"
    assert res.root == pytest.approx(7.0, abs=1e-12)
    assert res.evaluations == res.iterations


def test_evaluation_offset_counts_toward_cap():
    f = lambda x: x - 7.0  # noqa: E731
    res = bisection_method(
        f,
        Bound(-3.0, -10.0),
        Bound(10.0, 3.0),
        1e-14,
        evaluations=2,
        max_evaluations=5,
    )

    assert res.status is RootStatus.MAX_EVALUATIONS
    assert res.evaluations == 6
    assert res.iterations == 4


def test_iteration_ceiling_reports_evaluation_limit():
    f = lambda x: x - 7.0  # noqa: E731
    res = bisection_method(f, Bound(-3.0, -10.0), Bound(10.0, 3.0), 1e-14, max_iter=2)

    assert res.status is RootStatus.MAX_EVALUATIONS
    assert res.iterations == 2
    assert res.bracket == (6.75, 10.0)
    assert res.root == 6.75


@pytest.mark.parametrize("root", [0.123, -41.5, 1e-3, 999.9])
@pytest.mark.parametrize("max_iter", [1, 5, 30])
def test_opposite_sign_invariant_holds_every_step(root: float, max_iter: int):
    fn = lambda x: math.atan(x - root)  # noqa: E731
    lo, hi = Bound(-1000.0, fn(-1000.0)), Bound(1000.0, fn(1000.0))
    spy = BracketSpy(fn, lo, hi)
    res = bisection_method(spy, lo, hi, 1e-15, max_iter=max_iter)

    for a, b in spy.brackets[:-1]:
        assert opposite_sign(a.value, b.value)
        assert a.loc < b.loc
    if not res.converged:
        a, b = res.bracket
        assert opposite_sign(fn(a), fn(b))


def test_nan_midpoint_stops_with_best_bound():
    calls = []

    def f(x):
        calls.append(x)
        return math.nan

    res = bisection_method(f, Bound(0.0, -2.0), Bound(4.0, 1.0), 1e-12)

    assert res.status is RootStatus.NAN
    assert calls == [2.0]
    assert res.root == 4.0
    assert res.f_at_root == 1.0
