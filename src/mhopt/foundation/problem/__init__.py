from .instances import read_kqbf_instance, read_qbf_instance
from .kqbf import KQBF, KQBFInverse
from .qbf import QBF, QBFInverse
from .registry import available_problem_names, make_evaluator
from .solution import Solution, is_disjoint, make_candidate_list
from .types import Evaluator

__all__ = [
    "Evaluator",
    "KQBF",
    "KQBFInverse",
    "QBF",
    "QBFInverse",
    "Solution",
    "available_problem_names",
    "is_disjoint",
    "make_candidate_list",
    "make_evaluator",
    "read_kqbf_instance",
    "read_qbf_instance",
]
