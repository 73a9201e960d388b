# algorithm/grasp/grasp.py
"""
Greedy Randomized Adaptive Search Procedure.

Each iteration builds a solution with a constructive heuristic and refines it
with a local-search engine; the lowest-cost solution across iterations is the
incumbent. Costs are minimized, so maximization problems are passed in their
inverse form.
"""

from __future__ import annotations

import logging

import numpy as np

from mhopt.engine.algorithm.localsearch import LocalSearch
from mhopt.foundation.exceptions import InvalidParameterError
from mhopt.foundation.problem.solution import Solution
from mhopt.foundation.problem.types import Evaluator

from .construction import ConstructiveHeuristic, RandomizedGreedyConstruction


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class GRASP:
    def __init__(
        self,
        evaluator: Evaluator,
        iterations: int,
        *,
        construction: ConstructiveHeuristic | None = None,
        local_search: LocalSearch | None = None,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if int(iterations) < 1:
            raise InvalidParameterError("iterations", iterations, "a positive integer")
        self.evaluator = evaluator
        self.iterations = int(iterations)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.construction = construction or RandomizedGreedyConstruction()
        self.local_search = local_search or LocalSearch(evaluator, rng=self.rng)
        self.best_solution: Solution | None = None
        self.best_history: list[float] = []

    def solve(self) -> Solution:
        """Run every iteration and return a copy of the incumbent."""
        self.best_solution = None
        self.best_history = []
        for i in range(self.iterations):
            solution = self.iterate()
            if self.best_solution is None or solution.cost < self.best_solution.cost:
                self.best_solution = solution.copy()
                _logger().info("(Iter. %d) BestSol = %s", i, self.best_solution)
            self.best_history.append(self.best_solution.cost)
        assert self.best_solution is not None
        return self.best_solution.copy()

    def iterate(self) -> Solution:
        """One construction + local-search round."""
        solution, candidates = self.construction.construct(self.evaluator, self.rng)
        self.local_search.run(solution, candidates)
        return solution


__all__ = ["GRASP"]
