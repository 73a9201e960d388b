from .sampled import SampledLocalSearch, sample_size
from .search import IMPROVEMENT_TOLERANCE, LocalSearch, Move

__all__ = ["IMPROVEMENT_TOLERANCE", "LocalSearch", "Move", "SampledLocalSearch", "sample_size"]
