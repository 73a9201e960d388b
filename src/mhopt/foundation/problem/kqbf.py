"""
Knapsack-constrained QBF evaluators.
"""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np

from .instances import read_kqbf_instance
from .qbf import QBF
from .solution import Solution


class KQBF(QBF):
    """
    QBF subject to ``sum_i w_i x_i <= capacity``.

    Moves that would overload the knapsack get the worst possible delta so no
    search strategy ever applies them. A full evaluation of an overloaded
    solution is penalized by ``P * (1 + excess)`` with ``P = 2 * sum|A| + 1``,
    which places every infeasible solution below every feasible one.
    """

    def __init__(self, matrix: np.ndarray, weights: np.ndarray, capacity: float) -> None:
        super().__init__(matrix)
        w = np.asarray(weights, dtype=float)
        if w.shape != (self.domain_size,):
            raise ValueError(f"Expected {self.domain_size} item weights; got shape {w.shape}.")
        self.weights = w
        self.capacity = float(capacity)
        self.penalty = 2.0 * float(np.abs(self.A).sum()) + 1.0

    @classmethod
    def from_file(cls, path: str | Path) -> "KQBF":
        matrix, weights, capacity = read_kqbf_instance(path)
        return cls(matrix, weights, capacity)

    def load(self, solution: Solution) -> float:
        return float(self.variables(solution) @ self.weights)

    def is_feasible(self, solution: Solution) -> bool:
        return self.load(solution) <= self.capacity

    def _overload_penalty(self, load: float) -> float:
        excess = load - self.capacity
        if excess <= 0:
            return 0.0
        return self.penalty * (1.0 + excess)

    def _value(self, x: np.ndarray) -> float:
        return super()._value(x) - self._overload_penalty(float(x @ self.weights))

    def _insertion(self, x: np.ndarray, i: int) -> float:
        if x[i] == 1:
            return 0.0
        if float(x @ self.weights) + self.weights[i] > self.capacity:
            return -math.inf
        return super()._insertion(x, i)

    def _removal(self, x: np.ndarray, i: int) -> float:
        if x[i] == 0:
            return 0.0
        load = float(x @ self.weights)
        relief = self._overload_penalty(load) - self._overload_penalty(load - self.weights[i])
        return super()._removal(x, i) + relief

    def _exchange(self, x: np.ndarray, i: int, o: int) -> float:
        if i == o or x[i] == 1 or x[o] == 0:
            return super()._exchange(x, i, o)
        load = float(x @ self.weights)
        if load - self.weights[o] + self.weights[i] > self.capacity:
            return -math.inf
        return super()._exchange(x, i, o) + self._overload_penalty(load)


class KQBFInverse(KQBF):
    """KQBF with every value negated (minimization form)."""

    sign = -1.0


__all__ = ["KQBF", "KQBFInverse"]
