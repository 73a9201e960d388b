from __future__ import annotations

import numpy as np

from mhopt.foundation.exceptions import InvalidParameterError
from mhopt.foundation.problem.types import Evaluator

from .search import LocalSearch


def sample_size(n_candidates: int, fraction: float) -> int:
    """``n_candidates * fraction`` rounded half up."""
    return int(np.floor(n_candidates * fraction + 0.5))


class SampledLocalSearch(LocalSearch):
    """
    Local search over a random sample of the candidate list.

    Every iteration reshuffles the full candidate list and scans only its
    first ``sample_size`` entries. Applied moves still update the full list.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        *,
        sample_fraction: float = 0.5,
        first_improving: bool = False,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 < float(sample_fraction) <= 1.0:
            raise InvalidParameterError("sample_fraction", sample_fraction, "in (0, 1]")
        super().__init__(evaluator, first_improving=first_improving, rng=rng)
        self.sample_fraction = float(sample_fraction)

    def refresh_candidates(self, candidates: list[int]) -> list[int]:
        self.rng.shuffle(candidates)
        return candidates[: sample_size(len(candidates), self.sample_fraction)]


__all__ = ["SampledLocalSearch", "sample_size"]
