from .ga import BinaryEncoding, Chromosome, GeneticAlgorithm
from .grasp import GRASP, RandomizedGreedyConstruction
from .localsearch import LocalSearch, Move, SampledLocalSearch

__all__ = [
    "BinaryEncoding",
    "Chromosome",
    "GRASP",
    "GeneticAlgorithm",
    "LocalSearch",
    "Move",
    "RandomizedGreedyConstruction",
    "SampledLocalSearch",
]
