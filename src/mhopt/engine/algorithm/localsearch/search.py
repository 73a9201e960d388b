"""
Insertion / removal / exchange local search over a solution and its
candidate list.

The engine minimizes: an evaluator in minimization form (e.g. ``QBFInverse``)
must be supplied when the underlying objective is to be maximized.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from mhopt.foundation.problem.solution import Solution
from mhopt.foundation.problem.types import Evaluator

# Smallest positive double: deltas must fall below its negation to count as improving.
IMPROVEMENT_TOLERANCE = float(np.finfo(float).smallest_subnormal)


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    delta: float = math.inf
    candidate_in: int | None = None
    candidate_out: int | None = None

    @property
    def kind(self) -> str | None:
        if self.candidate_in is not None and self.candidate_out is not None:
            return "exchange"
        if self.candidate_in is not None:
            return "insertion"
        if self.candidate_out is not None:
            return "removal"
        return None

    @property
    def improves(self) -> bool:
        return self.delta < -IMPROVEMENT_TOLERANCE


class LocalSearch:
    """
    Applies the best (or first) improving move until none is left.

    Args:
        evaluator: Objective in minimization form.
        first_improving: Stop scanning a move category at the first strictly
            improving candidate instead of scanning it completely.
        rng: Generator used to shuffle the solution and the candidate list.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        *,
        first_improving: bool = False,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.evaluator = evaluator
        self.first_improving = bool(first_improving)
        self.rng = rng if rng is not None else np.random.default_rng()

    def run(self, solution: Solution, candidates: list[int]) -> int:
        """
        Improve ``solution`` in place; ``candidates`` is kept disjoint from it.

        Returns the number of applied moves.
        """
        self.rng.shuffle(solution)
        applied = 0
        while True:
            move = self.best_move(solution, self.refresh_candidates(candidates))
            if not move.improves:
                break
            self.apply(move, solution, candidates)
            applied += 1
        _logger().debug("Local search converged after %d moves (cost=%s).", applied, solution.cost)
        return applied

    def refresh_candidates(self, candidates: list[int]) -> list[int]:
        """Candidates scanned in the next iteration (shuffled in place)."""
        self.rng.shuffle(candidates)
        return candidates

    def best_move(self, solution: Solution, candidates: list[int]) -> Move:
        """Scan removals, then exchanges, then insertions; lowest delta wins, ties keep the earlier move."""
        ev = self.evaluator
        first = self.first_improving
        best = Move()

        for cand_out in solution:
            delta = ev.evaluate_removal_cost(cand_out, solution)
            if delta < best.delta:
                best = Move(delta, None, cand_out)
                if first and best.improves:
                    break

        found = False
        for cand_in in candidates:
            for cand_out in solution:
                delta = ev.evaluate_exchange_cost(cand_in, cand_out, solution)
                if delta < best.delta:
                    best = Move(delta, cand_in, cand_out)
                    if first and best.improves:
                        found = True
                        break
            if found:
                break

        for cand_in in candidates:
            delta = ev.evaluate_insertion_cost(cand_in, solution)
            if delta < best.delta:
                best = Move(delta, cand_in, None)
                if first and best.improves:
                    break

        return best

    def apply(self, move: Move, solution: Solution, candidates: list[int]) -> None:
        """Apply ``move`` and re-evaluate the solution from scratch."""
        if move.candidate_out is not None:
            solution.remove(move.candidate_out)
            candidates.append(move.candidate_out)
        if move.candidate_in is not None:
            solution.append(move.candidate_in)
            candidates.remove(move.candidate_in)
        self.evaluator.evaluate(solution)


__all__ = ["IMPROVEMENT_TOLERANCE", "LocalSearch", "Move"]
