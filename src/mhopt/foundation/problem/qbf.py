"""
Quadratic binary function evaluators.

``QBF`` maximizes f(x) = x^T A x over binary vectors; ``QBFInverse`` negates
every value so that minimizing strategies (GRASP, local search) can maximize
the same function.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .instances import read_qbf_instance
from .solution import Solution


class QBF:
    """
    Evaluator for the quadratic binary function defined by ``matrix``.

    Incremental deltas follow from the contribution of variable ``i``:
    ``sum_{j != i} x_j (A_ij + A_ji) + A_ii``.
    """

    sign = 1.0

    def __init__(self, matrix: np.ndarray) -> None:
        A = np.asarray(matrix, dtype=float)
        if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape[0] == 0:
            raise ValueError(f"QBF matrix must be square and non-empty; got shape {A.shape}.")
        self.A = A
        self._sym = A + A.T

    @classmethod
    def from_file(cls, path: str | Path) -> "QBF":
        return cls(read_qbf_instance(path))

    @property
    def domain_size(self) -> int:
        return int(self.A.shape[0])

    # ------------------------------------------------------------------
    # Full evaluation
    # ------------------------------------------------------------------

    def variables(self, solution: Solution) -> np.ndarray:
        x = np.zeros(self.domain_size, dtype=float)
        if len(solution):
            x[list(solution)] = 1.0
        return x

    def _value(self, x: np.ndarray) -> float:
        return float(x @ self.A @ x)

    def evaluate(self, solution: Solution) -> float:
        cost = self.sign * self._value(self.variables(solution))
        solution.cost = cost
        return cost

    # ------------------------------------------------------------------
    # Move deltas
    # ------------------------------------------------------------------

    def evaluate_insertion_cost(self, elem: int, solution: Solution) -> float:
        return self.sign * self._insertion(self.variables(solution), elem)

    def evaluate_removal_cost(self, elem: int, solution: Solution) -> float:
        return self.sign * self._removal(self.variables(solution), elem)

    def evaluate_exchange_cost(self, elem_in: int, elem_out: int, solution: Solution) -> float:
        return self.sign * self._exchange(self.variables(solution), elem_in, elem_out)

    def _contribution(self, x: np.ndarray, i: int) -> float:
        diag = self.A[i, i]
        return float(x @ self._sym[i]) - 2.0 * x[i] * diag + diag

    def _insertion(self, x: np.ndarray, i: int) -> float:
        if x[i] == 1:
            return 0.0
        return self._contribution(x, i)

    def _removal(self, x: np.ndarray, i: int) -> float:
        if x[i] == 0:
            return 0.0
        return -self._contribution(x, i)

    def _exchange(self, x: np.ndarray, i: int, o: int) -> float:
        if i == o:
            return 0.0
        if x[i] == 1:
            return self._removal(x, o)
        if x[o] == 0:
            return self._insertion(x, i)
        return self._contribution(x, i) - self._contribution(x, o) - self._sym[i, o]


class QBFInverse(QBF):
    """QBF with every value negated (minimization form)."""

    sign = -1.0


__all__ = ["QBF", "QBFInverse"]
