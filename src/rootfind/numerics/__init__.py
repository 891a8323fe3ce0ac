# src/rootfind/numerics/__init__.py
"""
Numerical building blocks (advanced API).

Top-level package `rootfind` exposes the everyday `find` API.
This subpackage exposes the bound resolution and bisection stages separately.
"""

from .bisection import bisection_method
from .bounds import BoundResolution, doubling_search, resolve_bounds
from .evaluation import EvaluationCounter, evaluate_pair

__all__ = [
    # Bound resolution
    "BoundResolution",
    "resolve_bounds",
    "doubling_search",
    # Refinement
    "bisection_method",
    # Evaluation
    "EvaluationCounter",
    "evaluate_pair",
]
