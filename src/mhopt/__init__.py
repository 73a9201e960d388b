from .api import RunResult, build_solver, run
from .engine.algorithm import (
    GRASP,
    BinaryEncoding,
    Chromosome,
    GeneticAlgorithm,
    LocalSearch,
    Move,
    RandomizedGreedyConstruction,
    SampledLocalSearch,
)
from .engine.config import GAConfig, GRASPConfig, RunConfig, load_run_spec
from .foundation.logging import configure_mhopt_logging
from .foundation.problem import (
    KQBF,
    QBF,
    Evaluator,
    KQBFInverse,
    QBFInverse,
    Solution,
    make_candidate_list,
    make_evaluator,
)

__all__ = [
    "run",
    "build_solver",
    "RunResult",
    "RunConfig",
    "GAConfig",
    "GRASPConfig",
    "load_run_spec",
    "configure_mhopt_logging",
    "Evaluator",
    "QBF",
    "QBFInverse",
    "KQBF",
    "KQBFInverse",
    "Solution",
    "make_candidate_list",
    "make_evaluator",
    "Chromosome",
    "BinaryEncoding",
    "GeneticAlgorithm",
    "LocalSearch",
    "SampledLocalSearch",
    "Move",
    "GRASP",
    "RandomizedGreedyConstruction",
]
