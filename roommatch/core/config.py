"""Configuration loading and defaults.

A config file holds one ``config`` table with solver settings and one table
per person::

    [config]
    solutions = 1000

    [alice]
    preferred = ["bob"]
    unpreferred = ["carol"]

``.toml`` files are read with ``tomllib``; ``.yaml``/``.yml`` files (and any
other extension) with PyYAML.
"""
from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from roommatch.core.errors import ConfigError
from roommatch.core.types import ConstraintEntry

DEFAULT_CONFIG_PATH = "config.toml"
CONFIG_SECTION = "config"


@dataclass
class SolverConfig:
    solutions: int = 1000
    seed: Optional[int] = None          # None → fresh entropy, logged for replay
    workers: int = 1
    output_dir: Optional[str] = None    # None → no run directory is written
    log_level: str = "INFO"


@dataclass
class RoomingConfig:
    solver: SolverConfig = field(default_factory=SolverConfig)
    people: list[str] = field(default_factory=list)
    constraints: dict[str, ConstraintEntry] = field(default_factory=dict)


def load_config(path: str) -> RoomingConfig:
    """Load a rooming problem from a TOML or YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    if file_path.suffix.lower() == ".toml":
        with open(file_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    else:
        with open(file_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a table")
    return _dict_to_config(data)


_SOLVER_SCALARS = {
    "solutions": int,
    "seed": int,
    "workers": int,
    "output_dir": str,
    "log_level": str,
}


def _dict_to_config(data: dict[str, Any]) -> RoomingConfig:
    if CONFIG_SECTION not in data:
        raise ConfigError(f"Missing [{CONFIG_SECTION}] table")
    cfg = RoomingConfig(solver=_parse_solver(data[CONFIG_SECTION]))

    for key, value in data.items():
        if key == CONFIG_SECTION:
            continue
        name = str(key)
        if not isinstance(value, dict):
            raise ConfigError(f"Entry for {name!r} must be a table")
        cfg.people.append(name)
        cfg.constraints[name] = ConstraintEntry(
            preferred=_name_list(value, "preferred", name),
            unpreferred=_name_list(value, "unpreferred", name),
        )
    return cfg


def _parse_solver(section: Any) -> SolverConfig:
    if not isinstance(section, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] must be a table")
    if "solutions" not in section:
        raise ConfigError(f"[{CONFIG_SECTION}] is missing 'solutions'")

    solver = SolverConfig()
    for key, kind in _SOLVER_SCALARS.items():
        if key not in section or section[key] is None:
            continue
        value = section[key]
        # bool is an int subclass
        if kind is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"[{CONFIG_SECTION}] {key} must be an integer")
        if kind is str and not isinstance(value, str):
            raise ConfigError(f"[{CONFIG_SECTION}] {key} must be a string")
        setattr(solver, key, value)

    if solver.solutions < 0:
        raise ConfigError(f"[{CONFIG_SECTION}] solutions must be non-negative")
    if solver.workers < 1:
        raise ConfigError(f"[{CONFIG_SECTION}] workers must be at least 1")
    return solver


def _name_list(table: dict[str, Any], key: str, owner: str) -> tuple[str, ...]:
    raw = table.get(key, [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ConfigError(f"{owner!r}: '{key}' must be a list of names")
    for item in raw:
        if not isinstance(item, str):
            raise ConfigError(f"{owner!r}: '{key}' contains non-string {item!r}")
    return tuple(raw)
