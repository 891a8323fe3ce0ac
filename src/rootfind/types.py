from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from rootfind.exceptions import (
    EvaluationLimitError,
    NaNEncounteredError,
    NoBracketError,
    SolveFailedError,
)


class RootStatus(str, Enum):
    """Outcome of a root search.

    Attributes
    ----------
    CONVERGED : str
        A location with ``|f(x)| < tol`` was found ("converged").
    MAX_EVALUATIONS : str
        The evaluation cap or an iteration ceiling was reached first
        ("max_evaluations").
    NAN : str
        The function returned NaN at some probe ("nan").
    NO_BRACKET : str
        Both ends of a finite domain have the same sign ("no_bracket").
    """

    CONVERGED = "converged"
    MAX_EVALUATIONS = "max_evaluations"
    NAN = "nan"
    NO_BRACKET = "no_bracket"


@dataclass(frozen=True, slots=True)
class Bound:
    """A location paired with the function value there."""

    loc: float
    value: float

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def within(self, tol: float) -> bool:
        return abs(self.value) < tol


def same_sign(a: float, b: float) -> bool:
    """True when ``a`` and ``b`` are both strictly positive or both strictly negative."""
    return (a > 0 and b > 0) or (a < 0 and b < 0)


def opposite_sign(a: float, b: float) -> bool:
    return (a > 0 and b < 0) or (a < 0 and b > 0)


def best_bound(*bounds: Bound | None) -> Bound | None:
    """Return the bound with the smallest ``|value|``.

    Missing bounds and NaN values are skipped. Ties go to the first bound given.
    Returns ``None`` when no candidate has a usable value.
    """
    best = None
    for bound in bounds:
        if bound is None or bound.is_nan:
            continue
        if best is None or abs(bound.value) < abs(best.value):
            best = bound
    return best


_FAILURES: dict[RootStatus, type[SolveFailedError]] = {
    RootStatus.NAN: NaNEncounteredError,
    RootStatus.MAX_EVALUATIONS: EvaluationLimitError,
    RootStatus.NO_BRACKET: NoBracketError,
}


@dataclass(frozen=True, slots=True)
class RootResult:
    """Result container for :func:`rootfind.find`.

    Parameters
    ----------
    root : float
        Location with ``|f(root)| < tol`` on success. On failure, the location of
        the held bound with the smallest ``|f|`` (NaN when none is known).
    status : RootStatus
        How the search ended.
    evaluations : int
        Number of times ``f`` was invoked. Known values supplied through settings
        are not counted.
    f_at_root : float
        Function value at ``root`` (NaN when unknown).
    iterations : int, default 0
        Bisection steps taken. Zero when the answer came from bound resolution.
    method : str, default "bisection"
        ``"bracket"`` when bound resolution produced the answer, ``"bisection"``
        when the refiner did.
    bracket : tuple[float, float] | None
        Last bracket held, as ``(lo, hi)`` locations, when one existed.
    """

    root: float
    status: RootStatus
    evaluations: int
    f_at_root: float
    iterations: int = 0
    method: str = "bisection"
    bracket: tuple[float, float] | None = None

    @property
    def converged(self) -> bool:
        return self.status is RootStatus.CONVERGED

    def raise_for_status(self) -> None:
        """Raise the :class:`SolveFailedError` subclass matching ``status``.

        Does nothing for a converged result.
        """
        if self.converged:
            return
        exc_type = _FAILURES[self.status]
        raise exc_type(
            f"Root search ended with status {self.status.value!r} after "
            f"{self.evaluations} evaluations (best estimate {self.root!r}).",
            self,
        )
