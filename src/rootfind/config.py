from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_MAX_ITER = 100


@dataclass(frozen=True, slots=True)
class FindSettings:
    """Options for :func:`rootfind.find`.

    Parameters
    ----------
    known_min_value, known_max_value : float | None
        Function value at the lower / upper bound when already known, so that
        point is not evaluated. Only valid for a finite bound.
    max_evaluations : int, default 0
        Cap on the total number of function evaluations. The cap is checked at
        iteration boundaries, so the realized count may exceed it by one.
        ``<= 0`` means no cap beyond the iteration ceilings.
    concurrent : bool, default False
        Evaluate the two independent starting points (both finite bounds, or the
        anchors 0 and 1 for a doubly infinite domain) in parallel. ``f`` must be
        safe to call from two threads at once.
    search_max_iter : int, default 100
        Ceiling on doubling steps when searching toward an infinite bound.
    bisection_max_iter : int, default 100
        Ceiling on bisection steps.
    """

    known_min_value: float | None = None
    known_max_value: float | None = None
    max_evaluations: int = 0
    concurrent: bool = False
    search_max_iter: int = DEFAULT_MAX_ITER
    bisection_max_iter: int = DEFAULT_MAX_ITER

    def __post_init__(self) -> None:
        for name in ("known_min_value", "known_max_value"):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        if not isinstance(self.max_evaluations, int):
            raise ValueError("max_evaluations must be an int")
        if self.search_max_iter <= 0 or self.bisection_max_iter <= 0:
            raise ValueError("search_max_iter and bisection_max_iter must be > 0")
