from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from rootfind.config import DEFAULT_MAX_ITER, FindSettings
from rootfind.exceptions import InvalidDomainError, InvalidSettingsError
from rootfind.numerics.evaluation import EvaluationCounter, evaluate_pair
from rootfind.types import Bound, RootStatus, best_bound, opposite_sign, same_sign
from rootfind.typing import ScalarFn

logger = logging.getLogger(__name__)

# Anchors probed when both sides of the domain are infinite
_ANCHORS = (0.0, 1.0)


@dataclass(frozen=True, slots=True)
class BoundResolution:
    """Finite bounds produced by :func:`resolve_bounds`.

    On success (``failure is None``) either one of the bounds satisfies the
    tolerance, or both are present, finite, ordered, and of strictly opposite
    sign. On failure a side that could not be resolved is ``None``.
    """

    min_bound: Bound | None
    max_bound: Bound | None
    evaluations: int
    failure: RootStatus | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def satisfied(self, tol: float) -> Bound | None:
        """First held bound with ``|value| < tol``, if any."""
        for bound in (self.min_bound, self.max_bound):
            if bound is not None and not bound.is_nan and bound.within(tol):
                return bound
        return None

    def best_estimate(self) -> Bound | None:
        return best_bound(self.min_bound, self.max_bound)


def validate_domain(lo: float, hi: float) -> None:
    if math.isnan(lo) or math.isnan(hi) or lo >= hi:
        raise InvalidDomainError(f"Require lo < hi, got lo={lo!r}, hi={hi!r}.")


def validate_tol(tol: float) -> None:
    if not (tol > 0 and math.isfinite(tol)):
        raise ValueError(f"tol must be finite and > 0, got {tol!r}")


def resolve_bounds(
    f: ScalarFn,
    lo: float,
    hi: float,
    tol: float,
    settings: FindSettings | None = None,
    *,
    evaluations: int = 0,
) -> BoundResolution:
    """Turn the domain ``[lo, hi]`` into finite, evaluated bounds.

    ``lo`` may be ``-inf`` and ``hi`` may be ``+inf``. An infinite side is
    replaced by searching outward from a finite point, assuming that going far
    enough toward the infinite bound reaches a point of opposite sign.

    Parameters
    ----------
    f : callable
        Scalar function ``f(x) -> float``.
    lo, hi : float
        Domain bounds, ``lo < hi``.
    tol : float
        A bound with ``|f| < tol`` ends the resolution early.
    settings : FindSettings, optional
        Known bound values, evaluation cap, concurrency and search ceiling.
    evaluations : int, default 0
        Evaluations already spent by the caller.

    Returns
    -------
    BoundResolution
        The two bounds, the running evaluation count, and the failure status if
        resolution did not succeed (``NAN``, ``MAX_EVALUATIONS`` or
        ``NO_BRACKET``).

    Raises
    ------
    InvalidDomainError
        If ``lo >= hi`` or either is NaN. ``f`` is not invoked.
    InvalidSettingsError
        If a known value is supplied for an infinite bound. ``f`` is not invoked.
    ValueError
        If ``tol`` is not finite and positive.
    """
    settings = FindSettings() if settings is None else settings
    validate_domain(lo, hi)
    validate_tol(tol)

    lo_inf = math.isinf(lo)
    hi_inf = math.isinf(hi)
    if settings.known_min_value is not None and lo_inf:
        raise InvalidSettingsError("known_min_value given for an infinite lower bound.")
    if settings.known_max_value is not None and hi_inf:
        raise InvalidSettingsError("known_max_value given for an infinite upper bound.")

    if settings.known_min_value is not None and abs(settings.known_min_value) < tol:
        return BoundResolution(Bound(lo, settings.known_min_value), None, evaluations)
    if settings.known_max_value is not None and abs(settings.known_max_value) < tol:
        return BoundResolution(None, Bound(hi, settings.known_max_value), evaluations)

    counter = EvaluationCounter(f, start=evaluations)
    if lo_inf and hi_inf:
        return _both_infinite(counter, tol, settings)
    if lo_inf or hi_inf:
        return _one_infinite(counter, lo, hi, tol, settings)
    return _both_finite(counter, lo, hi, tol, settings)


def _both_finite(
    counter: EvaluationCounter,
    lo: float,
    hi: float,
    tol: float,
    settings: FindSettings,
) -> BoundResolution:
    min_val = settings.known_min_value
    max_val = settings.known_max_value
    if min_val is None and max_val is None:
        min_val, max_val = evaluate_pair(counter, lo, hi, concurrent=settings.concurrent)
    else:
        if min_val is None:
            min_val = counter(lo)
        if max_val is None and not math.isnan(min_val):
            max_val = counter(hi)

    min_bound = Bound(lo, min_val)
    max_bound = None if max_val is None else Bound(hi, max_val)
    logger.debug("Finite bounds: f(%r)=%r, f(%r)=%r", lo, min_val, hi, max_val)
    return _check_pair(min_bound, max_bound, tol, counter.count, allow_same_sign=False)


def _one_infinite(
    counter: EvaluationCounter,
    lo: float,
    hi: float,
    tol: float,
    settings: FindSettings,
) -> BoundResolution:
    if math.isinf(hi):
        known, loc, direction = settings.known_min_value, lo, 1.0
    else:
        known, loc, direction = settings.known_max_value, hi, -1.0

    start = Bound(loc, counter(loc) if known is None else known)
    if start.is_nan:
        return _oriented(start, None, direction, counter.count, RootStatus.NAN)
    if start.within(tol):
        return _oriented(start, None, direction, counter.count)

    logger.debug("Searching toward %s from %r", _side(direction), start.loc)
    return doubling_search(
        counter,
        start,
        direction,
        tol,
        max_evaluations=settings.max_evaluations,
        max_iter=settings.search_max_iter,
    )


def _both_infinite(
    counter: EvaluationCounter, tol: float, settings: FindSettings
) -> BoundResolution:
    a, b = _ANCHORS
    fa, fb = evaluate_pair(counter, a, b, concurrent=settings.concurrent)
    anchor_a = Bound(a, fa)
    anchor_b = None if fb is None else Bound(b, fb)

    resolution = _check_pair(anchor_a, anchor_b, tol, counter.count, allow_same_sign=True)
    if not resolution.ok or resolution.satisfied(tol) is not None:
        return resolution
    if opposite_sign(fa, fb):
        logger.debug("Anchors %r and %r bracket a root", a, b)
        return resolution

    # |f| shrinking toward the lower anchor means the root lies toward -inf
    if abs(fa) < abs(fb):
        start, direction = anchor_a, -1.0
    else:
        start, direction = anchor_b, 1.0
    logger.debug(
        "Anchors f(%r)=%r, f(%r)=%r; searching toward %s", a, fa, b, fb, _side(direction)
    )
    return doubling_search(
        counter,
        start,
        direction,
        tol,
        max_evaluations=settings.max_evaluations,
        max_iter=settings.search_max_iter,
    )


def doubling_search(
    counter: EvaluationCounter,
    start: Bound,
    direction: float,
    tol: float,
    *,
    max_evaluations: int = 0,
    max_iter: int = DEFAULT_MAX_ITER,
) -> BoundResolution:
    """Step away from ``start`` with geometrically growing steps until the sign flips.

    Probes ``start.loc + step * direction`` for ``step = 1, 2, 4, ...``. A probe
    with sign opposite to the running bound, or with ``|f| < tol``, becomes the
    far end of the bracket. A same-sign probe replaces the running bound.

    Parameters
    ----------
    counter : EvaluationCounter
        Counted function for the current solve.
    start : Bound
        Finite starting bound with a nonzero value.
    direction : float
        ``+1.0`` to search toward ``+inf``, ``-1.0`` toward ``-inf``.
    tol : float
        Tolerance on ``|f|``.
    max_evaluations : int, default 0
        Evaluation cap, checked before each probe; ``<= 0`` disables it.
    max_iter : int, default 100
        Ceiling on the number of probes.

    Returns
    -------
    BoundResolution
        Bounds ordered by location. On ``NAN`` or ``MAX_EVALUATIONS`` the far
        side is ``None`` and the running bound is the best estimate.
    """
    running = start
    step = 1.0
    for _ in range(max_iter):
        if counter.exhausted(max_evaluations):
            break
        loc = start.loc + step * direction
        if not math.isfinite(loc):
            break
        value = counter(loc)
        if math.isnan(value):
            logger.debug("NaN at %r during search toward %s", loc, _side(direction))
            return _oriented(running, None, direction, counter.count, RootStatus.NAN)

        probe = Bound(loc, value)
        if not same_sign(running.value, value) or probe.within(tol):
            logger.debug("Bracketed between %r and %r", running.loc, probe.loc)
            return _oriented(running, probe, direction, counter.count)

        running = probe
        step *= 2.0

    logger.debug(
        "No sign change toward %s after %d evaluations", _side(direction), counter.count
    )
    return _oriented(running, None, direction, counter.count, RootStatus.MAX_EVALUATIONS)


def _check_pair(
    first: Bound,
    second: Bound | None,
    tol: float,
    evaluations: int,
    *,
    allow_same_sign: bool,
) -> BoundResolution:
    if second is None or first.is_nan or second.is_nan:
        return BoundResolution(first, second, evaluations, RootStatus.NAN)
    if first.within(tol) or second.within(tol) or allow_same_sign:
        return BoundResolution(first, second, evaluations)
    if not opposite_sign(first.value, second.value):
        logger.debug("No sign change between %r and %r", first.loc, second.loc)
        return BoundResolution(first, second, evaluations, RootStatus.NO_BRACKET)
    return BoundResolution(first, second, evaluations)


def _oriented(
    near: Bound,
    far: Bound | None,
    direction: float,
    evaluations: int,
    failure: RootStatus | None = None,
) -> BoundResolution:
    if direction > 0:
        return BoundResolution(near, far, evaluations, failure)
    return BoundResolution(far, near, evaluations, failure)


def _side(direction: float) -> str:
    return "+inf" if direction > 0 else "-inf"
