"""
rootfind

Derivative-free root finding for scalar functions on finite or infinite domains.

The main entry point is available at the top level:

    from rootfind import find

    result = find(lambda x: x - 7, float("-inf"), float("inf"), tol=1e-12)
"""

from .config import FindSettings
from .exceptions import (
    EvaluationLimitError,
    InvalidDomainError,
    InvalidSettingsError,
    NaNEncounteredError,
    NoBracketError,
    RootFindingError,
    SolveFailedError,
)
from .solver import find, find_root
from .types import Bound, RootResult, RootStatus

__all__ = [
    # Types
    "Bound",
    "RootResult",
    "RootStatus",
    "FindSettings",
    # Solvers
    "find",
    "find_root",
    # Errors
    "RootFindingError",
    "InvalidDomainError",
    "InvalidSettingsError",
    "SolveFailedError",
    "NaNEncounteredError",
    "EvaluationLimitError",
    "NoBracketError",
]
