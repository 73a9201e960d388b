"""
Name -> evaluator lookup used by the facade and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mhopt.foundation.exceptions import InvalidProblemError

from .kqbf import KQBF, KQBFInverse
from .qbf import QBF, QBFInverse
from .types import Evaluator


@dataclass(frozen=True)
class ProblemSpec:
    key: str
    label: str
    maximize: type[QBF]
    minimize: type[QBF]
    description: str = ""


PROBLEMS: dict[str, ProblemSpec] = {
    "qbf": ProblemSpec(
        key="qbf",
        label="MAX-QBF",
        maximize=QBF,
        minimize=QBFInverse,
        description="Unconstrained quadratic binary function.",
    ),
    "kqbf": ProblemSpec(
        key="kqbf",
        label="MAX-KQBF",
        maximize=KQBF,
        minimize=KQBFInverse,
        description="Quadratic binary function with a knapsack constraint.",
    ),
}


def available_problem_names() -> tuple[str, ...]:
    return tuple(PROBLEMS)


def make_evaluator(problem: str, path: str | Path, *, minimize: bool = False) -> Evaluator:
    """
    Load ``path`` as an instance of ``problem``.

    ``minimize=True`` returns the inverse evaluator expected by GRASP and the
    local-search engine.
    """
    try:
        spec = PROBLEMS[problem.lower()]
    except KeyError:
        raise InvalidProblemError(problem, list(PROBLEMS)) from None
    cls = spec.minimize if minimize else spec.maximize
    return cls.from_file(path)


__all__ = ["ProblemSpec", "PROBLEMS", "available_problem_names", "make_evaluator"]
