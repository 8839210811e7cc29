"""
Run configuration for the binary genetic search.

Handles YAML loading, merging with command-line overrides, validation,
and conversion of the target string into a gene array.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union
import re

import numpy as np
import yaml


_BINARY_TARGET = re.compile(r"[01]+")


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


@dataclass
class RunConfig:
    """
    Settings for one search run.

    Attributes:
        population_size: Number of individuals per generation
        uniform_rate: Crossover rate (read by evolve only with use_configured_rates)
        mutation_rate: Mutation rate (read by evolve only with use_configured_rates)
        elitist: Keep the fittest individual between generations
        target: Target genome as a string of '0' and '1'
        random_seed: Seed for the random generator (None draws a fresh one)
        max_generations: Stop after this many evolve() calls (None = unbounded)
        use_configured_rates: Wire uniform_rate/mutation_rate into evolve()
        history_csv: Optional path for the per-generation history log
        report_every: Print a progress line every N generations
    """
    population_size: int = 50
    uniform_rate: float = 0.5
    mutation_rate: float = 0.015
    elitist: bool = True
    target: str = "110011"
    random_seed: Optional[int] = None
    max_generations: Optional[int] = None
    use_configured_rates: bool = False
    history_csv: Optional[str] = None
    report_every: int = 1

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        """
        Build a RunConfig from a dictionary, ignoring None values.

        Raises:
            ConfigValidationError: If the dictionary has unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**{k: v for k, v in data.items() if v is not None})

    def merged(self, overrides: Dict[str, Any]) -> "RunConfig":
        """Return a copy with non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RunConfig.from_dict(values)

    def target_genes(self) -> np.ndarray:
        """Target string converted to a gene array."""
        return parse_target(self.target)


def load_run_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is not a YAML mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError("Configuration file must contain a mapping")

    # YAML reads unquoted bit strings as numbers, and leading zeros as octal
    target = config.get('target')
    if isinstance(target, (int, float)) and not isinstance(target, bool):
        raise ConfigValidationError(
            f"'target' was read as the number {target}. Quote it in the YAML file "
            "(e.g. target: '0110'), since unquoted bit strings with leading zeros "
            "are parsed as numbers"
        )

    return config


def parse_target(target: str) -> np.ndarray:
    """
    Convert a string of '0'/'1' characters into a gene array.

    Raises:
        ConfigValidationError: If target is empty or has other characters
    """
    if not isinstance(target, str) or not _BINARY_TARGET.fullmatch(target):
        raise ConfigValidationError(
            f"Invalid target: {target!r}. Must be a non-empty string of 0s and 1s"
        )
    return np.array([1 if c == '1' else 0 for c in target], dtype=np.uint8)


def _is_rate(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and 0.0 <= value <= 1.0


def validate_run_config(config: RunConfig) -> None:
    """
    Validate run configuration values.

    Args:
        config: Run configuration

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    parse_target(config.target)

    size = config.population_size
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise ConfigValidationError(
            f"'population_size' must be a positive integer, got: {size}"
        )

    for name in ('uniform_rate', 'mutation_rate'):
        value = getattr(config, name)
        if not _is_rate(value):
            raise ConfigValidationError(f"'{name}' must be a number in [0, 1], got: {value}")

    if not isinstance(config.elitist, bool):
        raise ConfigValidationError(f"'elitist' must be true or false, got: {config.elitist}")

    if not isinstance(config.use_configured_rates, bool):
        raise ConfigValidationError(
            f"'use_configured_rates' must be true or false, got: {config.use_configured_rates}"
        )

    limit = config.max_generations
    if limit is not None and (not isinstance(limit, int) or isinstance(limit, bool) or limit < 0):
        raise ConfigValidationError(
            f"'max_generations' must be a non-negative integer, got: {limit}"
        )

    every = config.report_every
    if not isinstance(every, int) or isinstance(every, bool) or every <= 0:
        raise ConfigValidationError(
            f"'report_every' must be a positive integer, got: {every}"
        )

    seed = config.random_seed
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigValidationError(
            f"'random_seed' must be a non-negative integer, got: {seed}"
        )
