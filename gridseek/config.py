"""Runtime settings resolved from the environment and CLI overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping

MIN_SIZE = 2
MAX_SIZE = 200
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_KEYS: dict[str, str] = {
    "size": "GRIDSEEK_SIZE",
    "obstacle_density": "GRIDSEEK_DENSITY",
    "step_delay": "GRIDSEEK_STEP_DELAY",
    "seed": "GRIDSEEK_SEED",
    "log_level": "GRIDSEEK_LOG_LEVEL",
}


@dataclass(frozen=True)
class FinderConfig:
    size: int = 40
    obstacle_density: float = 0.3
    step_delay: float = 0.01
    seed: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise ValueError(
                f"Grid size must be between {MIN_SIZE} and {MAX_SIZE}, got {self.size}."
            )
        if not 0 <= self.obstacle_density < 1:
            raise ValueError(
                f"Obstacle density must be in [0, 1), got {self.obstacle_density}."
            )
        if self.step_delay < 0:
            raise ValueError(f"Step delay must be >= 0, got {self.step_delay}.")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}."
            )


_PARSERS: dict[str, Callable[[str], Any]] = {
    "size": int,
    "obstacle_density": float,
    "step_delay": float,
    "seed": int,
    "log_level": str.upper,
}


def load_config(env: Mapping[str, str] | None = None, **overrides: Any) -> FinderConfig:
    env = os.environ if env is None else env
    values: dict[str, Any] = {}
    for name, key in ENV_KEYS.items():
        raw = env.get(key)
        if raw is None or raw == "":
            continue
        try:
            values[name] = _PARSERS[name](raw)
        except ValueError as exc:
            raise ValueError(f"Invalid value for {key}: {raw!r}") from exc

    known = {item.name for item in fields(FinderConfig)}
    for name, value in overrides.items():
        if name not in known:
            raise TypeError(f"Unknown config option: {name}")
        if value is not None:
            values[name] = value
    return FinderConfig(**values)
