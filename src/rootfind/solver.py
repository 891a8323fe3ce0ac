from __future__ import annotations

import logging
import math

from rootfind.config import FindSettings
from rootfind.numerics.bisection import bisection_method
from rootfind.numerics.bounds import resolve_bounds
from rootfind.types import RootResult, RootStatus
from rootfind.typing import ScalarFn

logger = logging.getLogger(__name__)


def find(
    f: ScalarFn,
    lo: float,
    hi: float,
    tol: float,
    settings: FindSettings | None = None,
) -> RootResult:
    """Find ``x`` in ``[lo, hi]`` with ``abs(f(x)) < tol``.

    ``lo`` may be ``-inf`` and/or ``hi`` may be ``+inf``. An infinite side is
    first replaced by a finite bound through an outward doubling search, which
    assumes that going far enough toward the infinite bound reaches a point of
    opposite sign. The resulting bracket is then refined by bisection.

    Failures (NaN values, evaluation limits, no sign change on a finite domain)
    are reported through ``RootResult.status`` with the best estimate in
    ``RootResult.root``. Use :func:`find_root` or
    :meth:`RootResult.raise_for_status` to get an exception instead.

    Parameters
    ----------
    f : callable
        Scalar function ``f(x) -> float``.
    lo, hi : float
        Domain bounds with ``lo < hi``.
    tol : float
        Required bound on ``|f(x)|`` at the returned location.
    settings : FindSettings, optional
        Known bound values, evaluation cap, concurrency and iteration ceilings.

    Returns
    -------
    RootResult

    Raises
    ------
    InvalidDomainError
        If ``lo >= hi``. ``f`` is never invoked.
    InvalidSettingsError
        If a known value is supplied for an infinite bound.
    """
    settings = FindSettings() if settings is None else settings
    resolution = resolve_bounds(f, lo, hi, tol, settings)
    min_bound, max_bound = resolution.min_bound, resolution.max_bound
    bracket = None
    if min_bound is not None and max_bound is not None:
        bracket = (min_bound.loc, max_bound.loc)

    if not resolution.ok:
        best = resolution.best_estimate()
        logger.debug("Bound resolution failed: %s", resolution.failure.value)
        return RootResult(
            root=best.loc if best is not None else math.nan,
            status=resolution.failure,
            evaluations=resolution.evaluations,
            f_at_root=best.value if best is not None else math.nan,
            method="bracket",
            bracket=bracket if resolution.failure is RootStatus.NO_BRACKET else None,
        )

    hit = resolution.satisfied(tol)
    if hit is not None:
        return RootResult(
            root=hit.loc,
            status=RootStatus.CONVERGED,
            evaluations=resolution.evaluations,
            f_at_root=hit.value,
            method="bracket",
            bracket=bracket,
        )

    logger.debug("Bisecting bracket [%r, %r]", min_bound.loc, max_bound.loc)
    return bisection_method(
        f,
        min_bound,
        max_bound,
        tol,
        evaluations=resolution.evaluations,
        max_evaluations=settings.max_evaluations,
        max_iter=settings.bisection_max_iter,
    )


def find_root(
    f: ScalarFn,
    lo: float,
    hi: float,
    tol: float,
    settings: FindSettings | None = None,
) -> float:
    """Like :func:`find`, but return the root as a float and raise on failure.

    Raises
    ------
    NaNEncounteredError, EvaluationLimitError, NoBracketError
        Carry the full :class:`RootResult` as ``.result``.
    """
    result = find(f, lo, hi, tol, settings)
    result.raise_for_status()
    return result.root
