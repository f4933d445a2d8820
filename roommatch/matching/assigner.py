"""Room assignment run – validation, sampling, selection and reporting.

Wraps each step in a ``StepTimer`` so the console shows how long
generation and selection took. When ``output_dir`` is configured, a run
directory receives ``events.jsonl``, ``summary.json`` and ``rooms.csv``.
"""
from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Any, Optional

from roommatch.core.config import RoomingConfig
from roommatch.core.logging import EventLogger, StepTimer
from roommatch.core.rng import SeededRNG
from roommatch.core.types import Solution
from roommatch.evaluation.metrics import compute_metrics
from roommatch.evaluation.reports import write_rooms_csv, write_summary
from roommatch.matching.constraints import validate_problem
from roommatch.matching.matcher import GreedyPreferenceMatcher, Matcher
from roommatch.matching.sampler import generate_solutions
from roommatch.matching.selection import best_solutions, select_best


@dataclass
class AssignmentResult:
    solution: Solution
    solutions: list[Solution]
    optimal: int
    seed: int
    metrics: dict[str, Any] = field(default_factory=dict)
    run_dir: Optional[str] = None


class RoomAssigner:
    """Samples ``config.solver.solutions`` pairings and keeps the best one."""

    def __init__(
        self,
        config: RoomingConfig,
        rng: SeededRNG,
        timer: Optional[StepTimer] = None,
        matcher: Optional[Matcher] = None,
    ):
        self.config = config
        self.rng = rng
        self.timer = timer or StepTimer()
        self.matcher: Matcher = matcher or GreedyPreferenceMatcher()

        self.run_dir: Optional[str] = None
        if config.solver.output_dir:
            timestamp = time.strftime("%Y%m%d_%H%M%S")
            self.run_dir = os.path.join(
                config.solver.output_dir, f"{timestamp}_s{rng.seed}"
            )

    def run(self) -> AssignmentResult:
        cfg = self.config
        solver = cfg.solver

        with self.timer.step("Validating constraints", people=len(cfg.people)):
            validate_problem(cfg.people, cfg.constraints).raise_for_violation()

        with self.timer.step(
            "Generating solutions",
            solutions=solver.solutions,
            workers=solver.workers,
        ):
            solutions = generate_solutions(
                cfg.people,
                cfg.constraints,
                solver.solutions,
                self.rng,
                workers=solver.workers,
                matcher=self.matcher,
            )

        with self.timer.step("Finding optimal solutions") as info:
            optimal = best_solutions(solutions)
            info["found"] = len(optimal)

        with self.timer.step("Selecting solution", seed=self.rng.seed):
            solution = select_best(solutions, self.rng)

        result = AssignmentResult(
            solution=solution,
            solutions=solutions,
            optimal=len(optimal),
            seed=self.rng.seed,
            metrics=compute_metrics(solutions, solution),
        )

        if self.run_dir is not None:
            with self.timer.step("Writing run outputs", run_dir=self.run_dir):
                self._write_outputs(result)
            result.run_dir = self.run_dir
        return result

    def _write_outputs(self, result: AssignmentResult) -> None:
        event_logger = EventLogger(self.run_dir)
        try:
            for i, sample in enumerate(result.solutions):
                event_logger.log_sample(i, sample)
            event_logger.log_selection(result.solution, result.optimal, result.seed)
        finally:
            event_logger.close()

        metrics = dict(result.metrics)
        metrics["seed"] = result.seed
        metrics["workers"] = self.config.solver.workers
        write_summary(metrics, self.run_dir)
        write_rooms_csv(result.solution, self.run_dir)
