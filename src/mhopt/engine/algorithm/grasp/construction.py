"""
Randomized-greedy construction phase of GRASP.
"""

from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from mhopt.foundation.exceptions import InvalidParameterError
from mhopt.foundation.problem.solution import Solution, make_candidate_list
from mhopt.foundation.problem.types import Evaluator


class ConstructiveHeuristic(Protocol):
    def construct(self, evaluator: Evaluator, rng: np.random.Generator) -> tuple[Solution, list[int]]:
        """Return a new solution and the candidate list left over for local search."""
        ...


class RandomizedGreedyConstruction:
    """
    Basic GRASP construction with a value-based restricted candidate list.

    At each step the candidates whose insertion delta is within
    ``min + alpha * (max - min)`` form the RCL and one of them is inserted at
    random. Construction stops once an insertion fails to lower the cost (the
    last inserted element is kept; local search may remove it) or when no
    candidate has a finite delta.
    """

    def __init__(self, alpha: float = 0.05) -> None:
        if not 0.0 <= float(alpha) <= 1.0:
            raise InvalidParameterError("alpha", alpha, "in [0, 1]")
        self.alpha = float(alpha)

    def restricted_candidates(self, evaluator: Evaluator, solution: Solution, candidates: list[int]) -> list[int]:
        deltas = np.array([evaluator.evaluate_insertion_cost(c, solution) for c in candidates], dtype=float)
        finite = np.isfinite(deltas)
        if not finite.any():
            return []
        min_cost = float(deltas[finite].min())
        max_cost = float(deltas[finite].max())
        threshold = min_cost + self.alpha * (max_cost - min_cost)
        return [c for c, d, ok in zip(candidates, deltas, finite) if ok and d <= threshold]

    def construct(self, evaluator: Evaluator, rng: np.random.Generator) -> tuple[Solution, list[int]]:
        solution = Solution()
        evaluator.evaluate(solution)
        candidates = make_candidate_list(evaluator.domain_size)
        previous = math.inf
        while previous > solution.cost:
            previous = solution.cost
            rcl = self.restricted_candidates(evaluator, solution, candidates)
            if not rcl:
                break
            chosen = rcl[int(rng.integers(len(rcl)))]
            candidates.remove(chosen)
            solution.append(chosen)
            evaluator.evaluate(solution)
        return solution, candidates


__all__ = ["ConstructiveHeuristic", "RandomizedGreedyConstruction"]
