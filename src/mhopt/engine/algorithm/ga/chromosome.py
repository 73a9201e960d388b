from __future__ import annotations

from collections.abc import Iterable
from typing import Union

import numpy as np


class Chromosome:
    """
    Fixed-length gene array with a cached fitness.

    Assigning a gene through ``chromosome[locus] = value`` discards the cached
    fitness, so a stale value can never be read back. Reading the fitness of
    an unevaluated chromosome raises ``RuntimeError``.
    """

    __slots__ = ("_genes", "_fitness")

    def __init__(self, genes: Union[Iterable[float], np.ndarray], fitness: float | None = None) -> None:
        arr = np.array(genes, copy=True)
        if arr.ndim != 1:
            raise ValueError(f"genes must be one-dimensional; got shape {arr.shape}.")
        self._genes = arr
        self._fitness = None if fitness is None else float(fitness)

    @property
    def genes(self) -> np.ndarray:
        view = self._genes.view()
        view.flags.writeable = False
        return view

    @property
    def fitness(self) -> float:
        if self._fitness is None:
            raise RuntimeError("fitness read before the chromosome was evaluated.")
        return self._fitness

    @fitness.setter
    def fitness(self, value: float) -> None:
        self._fitness = float(value)

    @property
    def is_evaluated(self) -> bool:
        return self._fitness is not None

    def invalidate(self) -> None:
        self._fitness = None

    def copy(self) -> "Chromosome":
        """Deep copy of genes and cached fitness."""
        return Chromosome(self._genes, self._fitness)

    def __len__(self) -> int:
        return int(self._genes.shape[0])

    def __getitem__(self, locus: int):
        return self._genes[locus]

    def __setitem__(self, locus: int, value) -> None:
        self._genes[locus] = value
        self._fitness = None

    def __repr__(self) -> str:
        return f"Chromosome(genes={self._genes.tolist()}, fitness={self._fitness})"


Population = list[Chromosome]


__all__ = ["Chromosome", "Population"]
