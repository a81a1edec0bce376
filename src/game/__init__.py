"""Puzzle generation and play sessions for crossgame."""

from .models import (
    PuzzleConfig,
    GenerationResult,
    MoveResult,
    PuzzleSnapshot,
)
from .config import load_config
from .generator import (
    GenerationError,
    GenerationState,
    find_solvable_grid,
    choose_start_points,
    random_border_cell,
    rate_difficulty,
)
from .puzzle import Puzzle

__all__ = [
    "PuzzleConfig",
    "GenerationResult",
    "MoveResult",
    "PuzzleSnapshot",
    "load_config",
    "GenerationError",
    "GenerationState",
    "find_solvable_grid",
    "choose_start_points",
    "random_border_cell",
    "rate_difficulty",
    "Puzzle",
]
