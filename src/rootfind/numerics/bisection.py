from __future__ import annotations

import logging
import math

from rootfind.config import DEFAULT_MAX_ITER
from rootfind.numerics.evaluation import EvaluationCounter
from rootfind.types import Bound, RootResult, RootStatus, best_bound, same_sign
from rootfind.typing import ScalarFn

logger = logging.getLogger(__name__)


def bisection_method(
    f: ScalarFn,
    min_bound: Bound,
    max_bound: Bound,
    tol: float,
    *,
    evaluations: int = 0,
    max_evaluations: int = 0,
    max_iter: int = DEFAULT_MAX_ITER,
) -> RootResult:
    """Refine an opposite-sign bracket by bisection until ``|f(mid)| < tol``.

    The bracket is not re-validated: ``min_bound`` and ``max_bound`` must be
    finite, ordered, and of strictly opposite sign. ``evaluations`` counts
    evaluations already spent, so ``max_evaluations`` caps the whole solve.

    On failure the result's ``root`` is the held bound with the smaller ``|f|``.
    Hitting ``max_iter`` is reported the same way as exceeding the evaluation cap.
    """
    counter = EvaluationCounter(f, start=evaluations)
    lo, hi = min_bound, max_bound

    for it in range(1, max_iter + 1):
        mid = (lo.loc + hi.loc) / 2.0
        fmid = counter(mid)

        if math.isnan(fmid):
            logger.debug("NaN at bisection midpoint %r", mid)
            return _failed(lo, hi, RootStatus.NAN, counter.count, it)

        if abs(fmid) < tol:
            return RootResult(
                root=mid,
                status=RootStatus.CONVERGED,
                evaluations=counter.count,
                f_at_root=fmid,
                iterations=it,
                method="bisection",
                bracket=(lo.loc, hi.loc),
            )

        if counter.exhausted(max_evaluations):
            return _failed(lo, hi, RootStatus.MAX_EVALUATIONS, counter.count, it)

        # Keep the bracket
        if same_sign(lo.value, fmid):
            lo = Bound(mid, fmid)
        else:
            hi = Bound(mid, fmid)

    return _failed(lo, hi, RootStatus.MAX_EVALUATIONS, counter.count, max_iter)


def _failed(
    lo: Bound, hi: Bound, status: RootStatus, evaluations: int, iterations: int
) -> RootResult:
    best = best_bound(lo, hi)
    logger.debug(
        "Bisection stopped (%s) after %d iterations; best estimate %r",
        status.value,
        iterations,
        best,
    )
    return RootResult(
        root=best.loc if best is not None else math.nan,
        status=status,
        evaluations=evaluations,
        f_at_root=best.value if best is not None else math.nan,
        iterations=iterations,
        method="bisection",
        bracket=(lo.loc, hi.loc),
    )
