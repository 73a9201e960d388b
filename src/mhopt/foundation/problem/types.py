from __future__ import annotations

from typing import Protocol

from .solution import Solution


class Evaluator(Protocol):
    """
    Objective capability consumed by every search strategy.

    ``evaluate`` recomputes the cost from scratch and stores it in
    ``solution.cost``; the three move deltas are side-effect free.
    """

    @property
    def domain_size(self) -> int: ...

    def evaluate(self, solution: Solution) -> float: ...

    def evaluate_insertion_cost(self, elem: int, solution: Solution) -> float: ...

    def evaluate_removal_cost(self, elem: int, solution: Solution) -> float: ...

    def evaluate_exchange_cost(self, elem_in: int, elem_out: int, solution: Solution) -> float: ...


__all__ = ["Evaluator"]
