from __future__ import annotations

import math
import threading
from dataclasses import FrozenInstanceError, replace

import pytest

from rootfind import (
    EvaluationLimitError,
    FindSettings,
    NaNEncounteredError,
    NoBracketError,
    RootResult,
    RootStatus,
)
from rootfind.numerics.evaluation import EvaluationCounter, evaluate_pair


def test_defaults():
    s = FindSettings()

    assert s.known_min_value is None and s.known_max_value is None
    assert s.max_evaluations == 0
    assert s.concurrent is False
    assert s.search_max_iter == 100
    assert s.bisection_max_iter == 100


def test_settings_are_immutable():
    s = FindSettings()
    with pytest.raises(FrozenInstanceError):
        s.max_evaluations = 3  # type: ignore[misc]
    assert replace(s, max_evaluations=3).max_evaluations == 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"known_min_value": math.nan},
        {"known_max_value": math.inf},
        {"search_max_iter": 0},
        {"bisection_max_iter": -1},
        {"max_evaluations": 2.5},
    ],
)
def test_invalid_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        FindSettings(**kwargs)


def test_counter_counts_and_converts():
    counter = EvaluationCounter(lambda x: x * 2, start=3)

    assert counter(2) == 4.0
    assert isinstance(counter(1), float)
    assert counter.count == 5
    assert counter.exhausted(4)
    assert not counter.exhausted(5)
    assert not counter.exhausted(0)


def test_concurrent_pair_runs_both_evaluations_at_once():
    barrier = threading.Barrier(2, timeout=5)

    def f(x):
        barrier.wait()
        return x + 1.0

    assert evaluate_pair(f, 1.0, 2.0, concurrent=True) == (2.0, 3.0)


def test_sequential_pair_skips_second_after_nan():
    calls = []

    def f(x):
        calls.append(x)
        return math.nan

    fa, fb = evaluate_pair(f, 1.0, 2.0)

    assert math.isnan(fa)
    assert fb is None
    assert calls == [1.0]


def test_pair_propagates_function_errors():
    def f(x):
        raise ZeroDivisionError("boom")

    with pytest.raises(ZeroDivisionError):
        evaluate_pair(f, 1.0, 2.0, concurrent=True)


@pytest.mark.parametrize(
    "status,exc_type",
    [
        (RootStatus.NAN, NaNEncounteredError),
        (RootStatus.MAX_EVALUATIONS, EvaluationLimitError),
        (RootStatus.NO_BRACKET, NoBracketError),
    ],
)
def test_raise_for_status_maps_failures(status, exc_type):
    res = RootResult(root=1.5, status=status, evaluations=4, f_at_root=0.2)

    with pytest.raises(exc_type, match=status.value) as excinfo:
        res.raise_for_status()
    assert excinfo.value.result is res
    assert excinfo.value.best_estimate == 1.5


def test_raise_for_status_noop_on_success():
    res = RootResult(root=1.5, status=RootStatus.CONVERGED, evaluations=4, f_at_root=0.0)

    res.raise_for_status()
    assert res.converged
