"""
Command-line entry point: ``mhopt --algorithm grasp --problem qbf --instance instances/qbf/qbf020``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from mhopt.api import run
from mhopt.engine.config import (
    DEFAULT_ALGORITHM,
    DEFAULT_PROBLEM,
    DEFAULT_SEED,
    ENABLED_ALGORITHMS,
    NEIGHBORHOODS,
    RunConfig,
    load_run_spec,
)
from mhopt.foundation.exceptions import MHOptError
from mhopt.foundation.logging import configure_mhopt_logging
from mhopt.foundation.problem.registry import available_problem_names


def _probability(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a float in [0, 1]; got '{text}'.") from None
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"expected a float in [0, 1]; got {value}.")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer; got '{text}'.") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer; got {value}.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mhopt",
        description="Maximize a (knapsack-constrained) quadratic binary function with a GA or GRASP.",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML/JSON run specification. CLI arguments override file values.",
    )
    parser.add_argument("--algorithm", choices=ENABLED_ALGORITHMS, default=None, help=f"Search strategy (default: {DEFAULT_ALGORITHM}).")
    parser.add_argument("--problem", choices=available_problem_names(), default=None, help=f"Problem family (default: {DEFAULT_PROBLEM}).")
    parser.add_argument("--instance", default=None, help="Instance file to load.")
    parser.add_argument("--seed", type=int, default=None, help=f"Random seed (default: {DEFAULT_SEED}).")

    ga = parser.add_argument_group("genetic algorithm")
    ga.add_argument("--generations", type=_positive_int, default=None, help="Number of generations.")
    ga.add_argument("--pop-size", type=_positive_int, default=None, help="Population size (even).")
    ga.add_argument("--mutation-rate", type=_probability, default=None, help="Mutation rate in [0, 1].")

    grasp = parser.add_argument_group("GRASP")
    grasp.add_argument("--iterations", type=_positive_int, default=None, help="Number of GRASP iterations.")
    grasp.add_argument("--alpha", type=_probability, default=None, help="RCL greediness in [0, 1] (0 = pure greedy).")
    grasp.add_argument(
        "--first-improving",
        action="store_true",
        default=None,
        help="Use first-improving instead of best-improving local search.",
    )
    grasp.add_argument("--neighborhood", choices=NEIGHBORHOODS, default=None, help="Full or sampled candidate neighborhood.")
    grasp.add_argument("--sample-fraction", type=float, default=None, help="Share of candidates scanned by the sampled neighborhood.")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress every tenth of the run.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the final result.")
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    base = RunConfig.from_dict(load_run_spec(args.config)) if args.config else RunConfig()
    overrides: dict[str, Any] = {k: v for k, v in vars(args).items() if k not in {"config", "verbose", "quiet"}}
    return base.with_overrides(overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING if args.quiet else logging.DEBUG if args.verbose else logging.INFO
    configure_mhopt_logging(level=level)

    try:
        config = resolve_config(args)
        result = run(config)
    except (MHOptError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"maxVal = {result.objective}")
    print(f"bestSol = {result.solution}")
    print(f"Time = {result.elapsed:.3f} seg")
    return 0


if __name__ == "__main__":
    sys.exit(main())
