# algorithm/ga/ga.py
"""
Generational genetic algorithm core.

The controller maximizes chromosome fitness. Each generation runs binary
tournament selection, two-point crossover, per-gene mutation and elitist
replacement of the worst offspring by the best chromosome found so far.
Problem-specific behaviour lives in the ``GeneticEncoding`` it is given.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from mhopt.foundation.exceptions import InvalidParameterError
from mhopt.foundation.problem.solution import Solution

from .chromosome import Chromosome, Population
from .encoding import GeneticEncoding
from .operators import draw_crosspoints, mutation_loci, tournament_selection, two_point_crossover


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def best_of(population: Population) -> Chromosome:
    """First chromosome with the highest fitness."""
    if not population:
        raise ValueError("population is empty.")
    best_fitness = -math.inf
    best = population[0]
    for c in population:
        if c.fitness > best_fitness:
            best_fitness = c.fitness
            best = c
    return best


def worst_index(population: Population) -> int:
    """Index of the first chromosome with the lowest fitness."""
    if not population:
        raise ValueError("population is empty.")
    worst_fitness = math.inf
    worst = 0
    for i, c in enumerate(population):
        if c.fitness < worst_fitness:
            worst_fitness = c.fitness
            worst = i
    return worst


class GeneticAlgorithm:
    """
    Elitist generational GA over a fixed-size population.

    ``solve()`` runs exactly ``generations`` generations (no early stop) and
    returns the decoded best-known chromosome. All random draws go through
    ``rng`` in a fixed order, so a seeded generator reproduces a run exactly.
    """

    def __init__(
        self,
        encoding: GeneticEncoding,
        generations: int,
        pop_size: int,
        mutation_rate: float,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> None:
        if int(generations) < 1:
            raise InvalidParameterError("generations", generations, "a positive integer")
        if int(pop_size) < 2 or int(pop_size) % 2 != 0:
            raise InvalidParameterError("pop_size", pop_size, "an even integer >= 2")
        if not 0.0 <= float(mutation_rate) <= 1.0:
            raise InvalidParameterError("mutation_rate", mutation_rate, "a probability in [0, 1]")
        self.encoding = encoding
        self.generations = int(generations)
        self.pop_size = int(pop_size)
        self.mutation_rate = float(mutation_rate)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.population: Population = []
        self.best_chromosome: Chromosome | None = None
        self.best_solution: Solution | None = None
        self.best_history: list[float] = []

    @property
    def chromosome_size(self) -> int:
        return int(self.encoding.chromosome_size)

    def solve(self) -> Solution:
        """Run the configured number of generations and return the best solution."""
        self.initialize()
        interval = max(1, self.generations // 10)
        for g in range(1, self.generations + 1):
            self.step(g)
            if g % interval == 0 and _logger().isEnabledFor(logging.DEBUG):
                _logger().debug("(Gen. %d) CurrSol = %s", g, self.encoding.decode(best_of(self.population)))
        assert self.best_solution is not None
        return self.best_solution

    def initialize(self) -> None:
        """Create and evaluate the initial population and seed the best-known record."""
        self.population = self.initialize_population()
        best = best_of(self.population)
        self.best_chromosome = best.copy()
        self.best_solution = self.encoding.decode(best)
        self.best_history = [self.best_chromosome.fitness]
        _logger().info("(Gen. 0) BestSol = %s", self.best_solution)

    def step(self, generation: int) -> None:
        """Advance the population by one generation."""
        if self.best_chromosome is None:
            raise RuntimeError("step() called before initialize().")
        parents = self.select_parents(self.population)
        offspring = self.crossover(parents)
        mutants = self.mutate(offspring)
        self.population = self.select_population(mutants)

        pop_best = best_of(self.population)
        if pop_best.fitness > self.best_chromosome.fitness:
            self.best_solution = self.encoding.decode(pop_best)
            self.best_chromosome = pop_best.copy()
            _logger().info("(Gen. %d) BestSol = %s", generation, self.best_solution)
        self.best_history.append(self.best_chromosome.fitness)

    # ------------------------------------------------------------------
    # Generation phases
    # ------------------------------------------------------------------

    def evaluate(self, chromosome: Chromosome) -> Chromosome:
        chromosome.fitness = self.encoding.fitness(chromosome)
        return chromosome

    def initialize_population(self) -> Population:
        population: Population = []
        while len(population) < self.pop_size:
            population.append(self.evaluate(Chromosome(self.encoding.random_genes(self.rng))))
        return population

    def select_parents(self, population: Population) -> Population:
        return tournament_selection(population, self.pop_size, self.rng)

    def crossover(self, parents: Population) -> Population:
        """
        Two-point crossover on adjacent parent pairs.

        A pair made of the same individual twice is copied through untouched.
        """
        if len(parents) < self.pop_size:
            raise ValueError(f"expected {self.pop_size} parents; got {len(parents)}.")
        offspring: Population = []
        for i in range(0, self.pop_size, 2):
            parent1, parent2 = parents[i], parents[i + 1]
            if parent1 is parent2:
                offspring.append(parent1.copy())
                offspring.append(parent2.copy())
                continue
            p1, p2 = draw_crosspoints(self.chromosome_size, self.rng)
            child1, child2 = two_point_crossover(parent1, parent2, p1, p2)
            offspring.append(self.evaluate(child1))
            offspring.append(self.evaluate(child2))
        return offspring

    def mutate(self, offspring: Population) -> Population:
        """
        Touch each individual with probability ``mutation_rate``; inside a
        touched individual every locus mutates with ``mutation_rate / 10``.
        """
        for c in offspring:
            if self.rng.random() < self.mutation_rate:
                for locus in mutation_loci(len(c), self.mutation_rate / 10, self.rng):
                    self.encoding.mutate_gene(c, int(locus), self.rng)
                if not c.is_evaluated:
                    self.evaluate(c)
        return offspring

    def select_population(self, offspring: Population) -> Population:
        """Replace the worst offspring by a copy of the best-known chromosome if it is worse."""
        assert self.best_chromosome is not None
        idx = worst_index(offspring)
        if offspring[idx].fitness < self.best_chromosome.fitness:
            del offspring[idx]
            offspring.append(self.best_chromosome.copy())
        return offspring


__all__ = ["GeneticAlgorithm", "best_of", "worst_index"]
