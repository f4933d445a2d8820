"""Render the winning solution and write summary JSON / rooms CSV."""
from __future__ import annotations

import csv
import json
import os
from typing import Any

from roommatch.core.types import Solution


def format_solution(solution: Solution) -> str:
    """Plain-text result block for the console."""
    lines = [
        f"RESULT preferred matchups:   {solution.preferred}",
        f"       accepted matchups:    {solution.accepted}",
        f"       unpreferred matchups: {solution.unpreferred}",
    ]
    for i, (first, second) in enumerate(solution.pairs, 1):
        lines.append(f"       ROOM {i}: {first} & {second}")
    return "\n".join(lines)


def write_summary(metrics: dict[str, Any], run_dir: str) -> str:
    """Write aggregate metrics as ``summary.json``."""
    path = os.path.join(run_dir, "summary.json")
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)
    return path


_ROOM_FIELDS = ["room", "first", "second", "tier"]


def write_rooms_csv(solution: Solution, run_dir: str) -> str:
    """Write one row per room of the winning solution as ``rooms.csv``."""
    path = os.path.join(run_dir, "rooms.csv")
    tiers = solution.tiers or (None,) * len(solution.pairs)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=_ROOM_FIELDS)
        writer.writeheader()
        for i, ((first, second), tier) in enumerate(zip(solution.pairs, tiers), 1):
            writer.writerow({
                "room": i,
                "first": first,
                "second": second,
                "tier": tier.value if tier is not None else "",
            })
    return path
