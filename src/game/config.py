"""Puzzle configuration loading.

Example config.yaml:
  grid_size: 20
  difficulty: 0
  num_start_points: 2
  max_attempts: 1000
  seed: 42
  dictionary_path: data/words.txt
"""

from pathlib import Path

import yaml

from .models import PuzzleConfig


def load_config(config_path: str | Path) -> PuzzleConfig:
    """Load puzzle configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return PuzzleConfig(**(data or {}))
