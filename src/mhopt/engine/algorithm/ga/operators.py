"""
Selection, crossover and mutation primitives for the generational GA.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .chromosome import Chromosome


def binary_tournament(first: Chromosome, second: Chromosome) -> Chromosome:
    """Fitter of the two; ties go to ``second``."""
    if first.fitness > second.fitness:
        return first
    return second


def tournament_selection(population: Sequence[Chromosome], n_parents: int, rng: np.random.Generator) -> list[Chromosome]:
    """
    Binary tournaments with replacement until ``n_parents`` winners are drawn.

    Winners are returned by reference, so one individual may appear several
    times (including against itself).
    """
    pop_size = len(population)
    if pop_size == 0:
        raise ValueError("population is empty.")
    parents: list[Chromosome] = []
    while len(parents) < n_parents:
        index1 = int(rng.integers(pop_size))
        index2 = int(rng.integers(pop_size))
        parents.append(binary_tournament(population[index1], population[index2]))
    return parents


def draw_crosspoints(size: int, rng: np.random.Generator) -> tuple[int, int]:
    """``p1`` uniform over [0, size], then ``p2`` uniform over [p1, size]."""
    p1 = int(rng.integers(size + 1))
    p2 = p1 + int(rng.integers(size + 1 - p1))
    return p1, p2


def two_point_crossover(
    parent1: Chromosome,
    parent2: Chromosome,
    p1: int,
    p2: int,
) -> tuple[Chromosome, Chromosome]:
    """
    Swap the genes in ``[p1, p2)`` between two parents.

        Parent 1:    X1 ... Xp1-1 | Xp1 ... Xp2-1 | Xp2 ... Xn
        Parent 2:    Y1 ... Yp1-1 | Yp1 ... Yp2-1 | Yp2 ... Yn

        Offspring 1: X1 ... Xp1-1 | Yp1 ... Yp2-1 | Xp2 ... Xn
        Offspring 2: Y1 ... Yp1-1 | Xp1 ... Xp2-1 | Yp2 ... Yn

    The offspring come back unevaluated.
    """
    size = len(parent1)
    if len(parent2) != size:
        raise ValueError(f"parents differ in length: {size} != {len(parent2)}.")
    if not 0 <= p1 <= p2 <= size:
        raise ValueError(f"crossover points ({p1}, {p2}) out of range for chromosome size {size}.")
    child1 = parent1.genes.copy()
    child2 = parent2.genes.copy()
    child1[p1:p2] = parent2.genes[p1:p2]
    child2[p1:p2] = parent1.genes[p1:p2]
    return Chromosome(child1), Chromosome(child2)


def mutation_loci(size: int, prob: float, rng: np.random.Generator) -> np.ndarray:
    """Positions picked independently with probability ``prob``."""
    if size == 0:
        return np.empty(0, dtype=int)
    prob = float(np.clip(prob, 0.0, 1.0))
    mask = rng.random(size) < prob
    return np.flatnonzero(mask)


__all__ = [
    "binary_tournament",
    "tournament_selection",
    "draw_crosspoints",
    "two_point_crossover",
    "mutation_loci",
]
