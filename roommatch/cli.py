"""CLI entry-point: assign rooms from a config file + CLI overrides."""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import structlog

from roommatch.core.config import DEFAULT_CONFIG_PATH, SolverConfig, load_config
from roommatch.core.errors import (
    ConfigError,
    InsufficientPopulationError,
    InvalidProblemError,
    MatchingError,
    MissingConstraintError,
)
from roommatch.core.logging import StepTimer, configure_logging
from roommatch.core.rng import SeededRNG
from roommatch.evaluation.reports import format_solution
from roommatch.matching.assigner import RoomAssigner

logger = structlog.get_logger("roommatch")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="roommatch",
        description="Pair people into rooms according to their preferences.",
    )
    p.add_argument("config", nargs="?", default=DEFAULT_CONFIG_PATH,
                   help=f"Path to TOML or YAML config (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--solutions", type=int, default=None,
                   help="Number of random pairings to sample")
    p.add_argument("--seed", type=int, default=None,
                   help="Master seed (default: fresh entropy)")
    p.add_argument("--workers", type=int, default=None,
                   help="Worker processes for sampling")
    p.add_argument("--output_dir", type=str, default=None,
                   help="Write events.jsonl, summary.json and rooms.csv under this directory")
    p.add_argument("--log_level", type=str, default=None)
    return p


def _apply_overrides(solver: SolverConfig, args: argparse.Namespace) -> None:
    """Mutate *solver* in-place with any non-None CLI overrides."""
    if args.solutions is not None:
        solver.solutions = args.solutions
    if args.seed is not None:
        solver.seed = args.seed
    if args.workers is not None:
        solver.workers = args.workers
    if args.output_dir is not None:
        solver.output_dir = args.output_dir
    if args.log_level is not None:
        solver.log_level = args.log_level


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or "INFO")
    timer = StepTimer(logger)

    try:
        with timer.step("Loading config file", path=args.config):
            cfg = load_config(args.config)
    except (FileNotFoundError, ConfigError) as e:
        logger.error("Could not load config", path=args.config, error=str(e))
        return 2

    _apply_overrides(cfg.solver, args)
    if cfg.solver.solutions < 0 or cfg.solver.workers < 1:
        logger.error(
            "Invalid solver settings",
            solutions=cfg.solver.solutions,
            workers=cfg.solver.workers,
        )
        return 2
    configure_logging(cfg.solver.log_level)

    with timer.step("Initialising rng") as info:
        rng = SeededRNG(cfg.solver.seed)
        info["seed"] = rng.seed

    assigner = RoomAssigner(cfg, rng, timer=timer)
    try:
        result = assigner.run()
    except (InvalidProblemError, MissingConstraintError, InsufficientPopulationError) as e:
        logger.error("Invalid rooming problem", error=str(e))
        return 2
    except MatchingError as e:
        logger.error("Matching failed", error=str(e), seed=rng.seed)
        return 1

    print(format_solution(result.solution))
    if result.run_dir:
        logger.info("Results written", run_dir=result.run_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
