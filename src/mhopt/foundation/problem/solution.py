"""
Solution (fenotype) and candidate-list helpers shared by all strategies.
"""

from __future__ import annotations

import math
from collections.abc import Iterable


class Solution(list):
    """
    Selected variable indices plus the cost last computed for them.

    The cost is only meaningful after an evaluator has (re)evaluated the
    current membership; evaluators write it back as a side effect of
    ``evaluate``.
    """

    def __init__(self, elements: Iterable[int] = (), cost: float = math.inf) -> None:
        super().__init__(int(e) for e in elements)
        self.cost = float(cost)

    def copy(self) -> "Solution":
        return Solution(self, cost=self.cost)

    def __repr__(self) -> str:
        return f"Solution: cost=[{self.cost}], size=[{len(self)}], elements={list(self)}"


def make_candidate_list(domain_size: int, solution: Iterable[int] = ()) -> list[int]:
    """All indices of ``range(domain_size)`` that are not in ``solution``, ascending."""
    taken = set(solution)
    return [i for i in range(domain_size) if i not in taken]


def is_disjoint(solution: Iterable[int], candidates: Iterable[int]) -> bool:
    return set(solution).isdisjoint(candidates)


__all__ = ["Solution", "make_candidate_list", "is_disjoint"]
