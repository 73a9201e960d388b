"""Run configuration for the GA and GRASP strategies."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from mhopt.foundation.exceptions import (
    InvalidAlgorithmError,
    InvalidParameterError,
    InvalidProblemError,
    MissingConfigError,
)
from mhopt.foundation.problem.registry import available_problem_names

from .base import _SerializableConfig, _known_fields

ENABLED_ALGORITHMS = ("ga", "grasp")
NEIGHBORHOODS = ("full", "sampled")
DEFAULT_ALGORITHM = "ga"
DEFAULT_PROBLEM = "qbf"
DEFAULT_SEED = 42


def _number(name: str, value: Any, kind: type) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, f"a number of type {kind.__name__}") from None


@dataclass(frozen=True)
class GAConfig(_SerializableConfig):
    generations: int = 1000
    pop_size: int = 100
    mutation_rate: float = 0.01

    def validate(self) -> "GAConfig":
        if _number("generations", self.generations, int) < 1:
            raise InvalidParameterError("generations", self.generations, "a positive integer")
        pop_size = _number("pop_size", self.pop_size, int)
        if pop_size < 2 or pop_size % 2 != 0:
            raise InvalidParameterError("pop_size", self.pop_size, "an even integer >= 2")
        if not 0.0 <= _number("mutation_rate", self.mutation_rate, float) <= 1.0:
            raise InvalidParameterError("mutation_rate", self.mutation_rate, "a probability in [0, 1]")
        return self


@dataclass(frozen=True)
class GRASPConfig(_SerializableConfig):
    iterations: int = 1000
    alpha: float = 0.05
    first_improving: bool = False
    neighborhood: str = "full"
    sample_fraction: float = 0.5

    def validate(self) -> "GRASPConfig":
        if _number("iterations", self.iterations, int) < 1:
            raise InvalidParameterError("iterations", self.iterations, "a positive integer")
        if not 0.0 <= _number("alpha", self.alpha, float) <= 1.0:
            raise InvalidParameterError("alpha", self.alpha, "in [0, 1]")
        if self.neighborhood not in NEIGHBORHOODS:
            raise InvalidParameterError("neighborhood", self.neighborhood, f"one of {', '.join(NEIGHBORHOODS)}")
        if not 0.0 < _number("sample_fraction", self.sample_fraction, float) <= 1.0:
            raise InvalidParameterError("sample_fraction", self.sample_fraction, "in (0, 1]")
        return self


@dataclass(frozen=True)
class RunConfig(_SerializableConfig):
    """
    Everything needed to build and run one solver.

    Examples:
        cfg = RunConfig(algorithm="grasp", problem="qbf", instance="instances/qbf020")
        cfg = RunConfig.from_dict({"algorithm": "ga", "instance": "qbf020", "ga": {"pop_size": 50}})
    """

    algorithm: str = DEFAULT_ALGORITHM
    problem: str = DEFAULT_PROBLEM
    instance: Optional[str] = None
    seed: int = DEFAULT_SEED
    ga: GAConfig = field(default_factory=GAConfig)
    grasp: GRASPConfig = field(default_factory=GRASPConfig)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "RunConfig":
        """
        Create a configuration from a (YAML/JSON-loaded) mapping.

        Unknown keys are ignored; ``ga`` and ``grasp`` blocks may be partial.
        """
        data = _known_fields(cls, config)
        ga_block = data.pop("ga", None) or {}
        grasp_block = data.pop("grasp", None) or {}
        for name, block in (("ga", ga_block), ("grasp", grasp_block)):
            if not isinstance(block, Mapping):
                raise InvalidParameterError(name, block, f"a mapping of {name} settings")
        if "instance" in data and data["instance"] is not None:
            data["instance"] = str(data["instance"])
        return cls(
            **data,
            ga=GAConfig(**_known_fields(GAConfig, ga_block)),
            grasp=GRASPConfig(**_known_fields(GRASPConfig, grasp_block)),
        )

    def with_overrides(self, overrides: Mapping[str, Any]) -> "RunConfig":
        """Return a copy with non-None top-level, ``ga`` and ``grasp`` values replaced."""

        def _set(cls: type) -> Dict[str, Any]:
            return {k: v for k, v in _known_fields(cls, overrides).items() if v is not None and k not in {"ga", "grasp"}}

        return replace(
            self,
            **_set(RunConfig),
            ga=replace(self.ga, **_set(GAConfig)),
            grasp=replace(self.grasp, **_set(GRASPConfig)),
        )

    def validate(self) -> "RunConfig":
        if self.algorithm not in ENABLED_ALGORITHMS:
            raise InvalidAlgorithmError(self.algorithm, list(ENABLED_ALGORITHMS))
        if self.problem not in available_problem_names():
            raise InvalidProblemError(self.problem, list(available_problem_names()))
        if not self.instance:
            raise MissingConfigError("instance", "RunConfig")
        _number("seed", self.seed, int)
        if self.algorithm == "ga":
            self.ga.validate()
        else:
            self.grasp.validate()
        return self


__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_PROBLEM",
    "DEFAULT_SEED",
    "ENABLED_ALGORITHMS",
    "NEIGHBORHOODS",
    "GAConfig",
    "GRASPConfig",
    "RunConfig",
]
