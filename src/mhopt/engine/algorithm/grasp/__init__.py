from .construction import ConstructiveHeuristic, RandomizedGreedyConstruction
from .grasp import GRASP

__all__ = ["ConstructiveHeuristic", "GRASP", "RandomizedGreedyConstruction"]
