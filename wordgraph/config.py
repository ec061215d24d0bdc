"""
wordgraph configuration.

Values are layered, later layers winning:
1. Dataclass defaults
2. Optional YAML config file
3. WORDGRAPH_* environment variables
4. Command-line flags (applied by the CLI)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class WordGraphConfig:
    """Settings for ingestion, analyses and output files."""

    # Ingestion
    encoding: str = "utf-8"

    # PageRank
    damping_factor: float = 0.85
    max_iterations: int = 100
    tolerance: float = 1e-6

    # Randomness (bridge insertion, walks); None draws from OS entropy
    seed: Optional[int] = None

    # Output files
    dot_output_path: str = "graph.dot"
    image_output_path: str = "graph.png"
    dot_executable: str = "dot"
    walk_output_path: str = "random_walk.txt"

    log_level: str = "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _get_float_env(name: str, default: float) -> float:
    """Get float environment variable with safe default."""
    try:
        return float(os.environ.get(name, str(default)))
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid {name}={os.environ.get(name)!r}")
        return default


def _get_int_env(name: str, default: Optional[int]) -> Optional[int]:
    """Get integer environment variable with safe default."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}")
        return default


def _load_yaml_file(config_path: Path) -> Dict[str, Any]:
    """Load a YAML mapping, returning {} when the file is unusable."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Could not load config file {config_path}: {e}")
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Config file {config_path} does not contain a mapping; ignoring it")
        return {}
    return data


def _apply_mapping(config: WordGraphConfig, data: Dict[str, Any]) -> WordGraphConfig:
    known = {f.name for f in fields(WordGraphConfig)}
    updates = {}
    for key, value in data.items():
        if key in known:
            updates[key] = value
        else:
            logger.warning(f"Unknown config key ignored: {key}")
    return replace(config, **updates)


def _apply_environment(config: WordGraphConfig) -> WordGraphConfig:
    """
    Apply environment overrides.

    Environment Variables:
        WORDGRAPH_DAMPING: PageRank damping factor
        WORDGRAPH_MAX_ITERATIONS: PageRank iteration cap
        WORDGRAPH_TOLERANCE: PageRank L1 convergence tolerance
        WORDGRAPH_SEED: Seed for bridge insertion and random walks
        WORDGRAPH_LOG_LEVEL: Logging level name
    """
    return replace(
        config,
        damping_factor=_get_float_env('WORDGRAPH_DAMPING', config.damping_factor),
        max_iterations=_get_int_env('WORDGRAPH_MAX_ITERATIONS', config.max_iterations),
        tolerance=_get_float_env('WORDGRAPH_TOLERANCE', config.tolerance),
        seed=_get_int_env('WORDGRAPH_SEED', config.seed),
        log_level=os.environ.get('WORDGRAPH_LOG_LEVEL', config.log_level),
    )


def load_config(config_path: Optional[Union[str, Path]] = None) -> WordGraphConfig:
    """
    Load configuration with fallback priority:
    1. Environment variables
    2. Custom config file (if provided and readable)
    3. Defaults
    """
    config = WordGraphConfig()

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            config = _apply_mapping(config, _load_yaml_file(path))
        else:
            logger.warning(f"Config file not found: {path}")

    return _apply_environment(config)
