"""Console step timing, structlog setup, and JSONL run logging."""
from __future__ import annotations

import json
import logging
import os
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

from roommatch.core.types import Solution

_UNITS = ("ns", "μs", "ms", "s")


def format_duration(nanoseconds: int) -> str:
    """Render an elapsed time, moving to a coarser unit while above 5000."""
    value = nanoseconds
    unit = 0
    while value > 5000 and unit < len(_UNITS) - 1:
        value //= 1000
        unit += 1
    return f"{value}{_UNITS[unit]}"


def configure_logging(level: str = "INFO") -> None:
    """Route stdlib logging and structlog to a colored console renderer."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class StepTimer:
    """Logs each pipeline step together with how long it took.

    The matching core never sees this; the assigner wraps its own steps.
    """

    def __init__(self, logger: Optional[Any] = None):
        self.logger = logger if logger is not None else structlog.get_logger("roommatch")

    @contextmanager
    def step(self, event: str, **fields: Any) -> Iterator[dict[str, Any]]:
        """Time the wrapped block; fields added to the yielded dict are logged too."""
        extra: dict[str, Any] = {}
        start = time.perf_counter_ns()
        yield extra
        took = format_duration(time.perf_counter_ns() - start)
        self.logger.info(event, **fields, **extra, took=took)


class EventLogger:
    """Writes per-sample and selection events as newline-delimited JSON."""

    def __init__(self, run_dir: str):
        self.run_dir = run_dir
        os.makedirs(run_dir, exist_ok=True)
        self._events_path = os.path.join(run_dir, "events.jsonl")
        self._file = open(self._events_path, "a", encoding="utf-8")

    @property
    def path(self) -> str:
        return self._events_path

    def log_sample(self, index: int, solution: Solution) -> None:
        event: dict[str, Any] = {
            "event": "sample",
            "index": index,
            "preferred": solution.preferred,
            "accepted": solution.accepted,
            "unpreferred": solution.unpreferred,
            "pairs": [list(pair) for pair in solution.pairs],
        }
        self._file.write(json.dumps(event) + "\n")

    def log_selection(self, solution: Solution, tied: int, seed: int) -> None:
        event: dict[str, Any] = {
            "event": "selected",
            "seed": seed,
            "tied_solutions": tied,
            "preferred": solution.preferred,
            "accepted": solution.accepted,
            "unpreferred": solution.unpreferred,
            "pairs": [list(pair) for pair in solution.pairs],
            "tiers": [tier.value for tier in solution.tiers],
        }
        self._file.write(json.dumps(event) + "\n")

    def close(self) -> None:
        self._file.flush()
        self._file.close()
