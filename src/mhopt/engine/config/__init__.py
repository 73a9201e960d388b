from .loader import load_run_spec
from .run import (
    DEFAULT_ALGORITHM,
    DEFAULT_PROBLEM,
    DEFAULT_SEED,
    ENABLED_ALGORITHMS,
    NEIGHBORHOODS,
    GAConfig,
    GRASPConfig,
    RunConfig,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_PROBLEM",
    "DEFAULT_SEED",
    "ENABLED_ALGORITHMS",
    "NEIGHBORHOODS",
    "GAConfig",
    "GRASPConfig",
    "RunConfig",
    "load_run_spec",
]
