from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rootfind.types import RootResult


class RootFindingError(Exception):
    """Base class for root-finding failures."""


class InvalidDomainError(RootFindingError, ValueError):
    """Raised when the search domain is empty or malformed (``lo >= hi`` or NaN).

    The check runs before any evaluation, so the function is never invoked for a
    rejected domain.
    """


class InvalidSettingsError(RootFindingError, ValueError):
    """Raised when settings supply a known function value for an infinite bound."""


class SolveFailedError(RootFindingError):
    """Raised by :meth:`RootResult.raise_for_status` for an unsuccessful solve.

    Parameters
    ----------
    message : str
        Human readable description of the failure.
    result : RootResult
        The full result of the failed solve. ``result.root`` holds the best
        estimate found: the held bound with the smallest ``|f|``.
    """

    def __init__(self, message: str, result: RootResult) -> None:
        super().__init__(message)
        self.result = result

    @property
    def best_estimate(self) -> float:
        return self.result.root


class NaNEncounteredError(SolveFailedError):
    """Raised when the function returned NaN at a probed location."""


class EvaluationLimitError(SolveFailedError):
    """Raised when the evaluation cap or an iteration ceiling was reached."""


class NoBracketError(SolveFailedError):
    """Raised when a finite domain shows no sign change at its endpoints."""
