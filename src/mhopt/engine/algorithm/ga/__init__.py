from .chromosome import Chromosome, Population
from .encoding import BinaryEncoding, GeneticEncoding
from .ga import GeneticAlgorithm, best_of, worst_index
from .operators import (
    binary_tournament,
    draw_crosspoints,
    mutation_loci,
    tournament_selection,
    two_point_crossover,
)

__all__ = [
    "BinaryEncoding",
    "Chromosome",
    "GeneticAlgorithm",
    "GeneticEncoding",
    "Population",
    "best_of",
    "binary_tournament",
    "draw_crosspoints",
    "mutation_loci",
    "tournament_selection",
    "two_point_crossover",
    "worst_index",
]
