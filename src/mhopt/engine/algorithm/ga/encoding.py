"""
Problem-specific hooks of the genetic algorithm.

The controller never inspects genes itself: decoding, random generation,
fitness and per-locus mutation all go through a ``GeneticEncoding``.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np

from mhopt.foundation.problem.solution import Solution
from mhopt.foundation.problem.types import Evaluator

from .chromosome import Chromosome


class GeneticEncoding(Protocol):
    @property
    def chromosome_size(self) -> int: ...

    def random_genes(self, rng: np.random.Generator) -> np.ndarray: ...

    def decode(self, chromosome: Chromosome) -> Solution: ...

    def fitness(self, chromosome: Chromosome) -> float: ...

    def mutate_gene(self, chromosome: Chromosome, locus: int, rng: np.random.Generator) -> None: ...


class BinaryEncoding:
    """
    One 0/1 gene per decision variable; a 1 selects the variable.

    Fitness is the evaluator's cost of the decoded solution, so the evaluator
    must be in maximization form.
    """

    def __init__(self, evaluator: Evaluator) -> None:
        self.evaluator = evaluator

    @property
    def chromosome_size(self) -> int:
        return int(self.evaluator.domain_size)

    def random_genes(self, rng: np.random.Generator) -> np.ndarray:
        return rng.integers(0, 2, size=self.chromosome_size, dtype=np.int8)

    def decode(self, chromosome: Chromosome) -> Solution:
        solution = Solution(np.flatnonzero(chromosome.genes))
        self.evaluator.evaluate(solution)
        return solution

    def fitness(self, chromosome: Chromosome) -> float:
        return self.decode(chromosome).cost

    def mutate_gene(self, chromosome: Chromosome, locus: int, rng: np.random.Generator) -> None:
        chromosome[locus] = 1 - chromosome[locus]


__all__ = ["GeneticEncoding", "BinaryEncoding"]
