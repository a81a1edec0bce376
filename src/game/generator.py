"""
Generate-and-test loop for solvable grids.

Each attempt fills a fresh grid, scans it for every word, and checks
whether the discovered words link all start points:

    EMPTY -> FILLING -> SCANNING -> CHECKING_CONNECTIVITY -> SOLVED | RETRY

RETRY throws the grid away and starts over with new letters (and new
start points unless they were fixed by the caller).
"""

import logging
import random
from enum import Enum
from typing import List, Optional

from ..engine.connectivity import is_connected
from ..engine.dictionary import Dictionary
from ..engine.grid import Grid, letter_model_for
from ..engine.models import Cell
from ..engine.scanner import scan
from .models import GenerationResult

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    EMPTY = "empty"
    FILLING = "filling"
    SCANNING = "scanning"
    CHECKING_CONNECTIVITY = "checking_connectivity"
    SOLVED = "solved"
    RETRY = "retry"


def random_border_cell(size: int, rng: random.Random) -> Cell:
    """Pick a side (top, right, bottom, left), then a position along it."""
    side = rng.randrange(4)
    offset = rng.randrange(size)
    if side == 0:
        return (0, offset)
    if side == 1:
        return (offset, size - 1)
    if side == 2:
        return (size - 1, offset)
    return (offset, 0)


def choose_start_points(size: int, count: int, rng: random.Random) -> List[Cell]:
    """
    Pick `count` distinct random border cells.

    Raises:
        ValueError: If the border has fewer than `count` cells
    """
    border = 4 * (size - 1) if size > 1 else 1
    if count > border:
        raise ValueError(f"{count} start points don't fit on the border of a {size}x{size} grid")

    points: List[Cell] = []
    while len(points) < count:
        cell = random_border_cell(size, rng)
        if cell not in points:
            points.append(cell)
    return points


def rate_difficulty(found_word_count: int) -> int:
    """
    Rate a solved grid by how many words it holds.

    Returns:
        0 for word-rich grids up to 3 for sparse ones
    """
    if found_word_count > 1300:
        return 0
    elif found_word_count > 900:
        return 1
    elif found_word_count > 500:
        return 2
    return 3


def find_solvable_grid(
    dictionary: Dictionary,
    size: int = 20,
    difficulty: int = 0,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = 1000,
    start_points: Optional[List[Cell]] = None,
    num_start_points: int = 2,
) -> GenerationResult:
    """
    Keep generating random grids until the found words link every start point.

    Args:
        dictionary: Words to scan for
        size: Grid size
        difficulty: 0..2, selects the letter pool
        rng: Optional random generator for reproducibility
        max_attempts: Give up after this many grids; None never gives up
        start_points: Fixed start points; re-drawn on every attempt if None
        num_start_points: How many points to draw when not fixed

    Returns:
        GenerationResult; `solved` is False if max_attempts ran out

    Raises:
        ValueError: If num_start_points exceeds the number of border cells
    """
    rng = rng or random.Random()
    letter_model = letter_model_for(difficulty)
    state = GenerationState.EMPTY
    attempts = 0

    while max_attempts is None or attempts < max_attempts:
        attempts += 1

        state = GenerationState.FILLING
        grid = Grid.fill(size, letter_model, rng)
        points = list(start_points) if start_points else choose_start_points(size, num_start_points, rng)

        state = GenerationState.SCANNING
        result = scan(grid, dictionary)

        state = GenerationState.CHECKING_CONNECTIVITY
        if is_connected(result.found_words, points, size):
            state = GenerationState.SOLVED
            rating = rate_difficulty(result.word_count)
            logger.info(
                f"Solvable {size}x{size} grid after {attempts} attempt(s): "
                f"{result.word_count} words, rating {rating}"
            )
            logger.debug(f"Grid:\n{grid.render()}")
            return GenerationResult(
                solved=True,
                attempts=attempts,
                grid=grid,
                start_points=points,
                found_words=result.found_words,
                usage=result.usage,
                rating=rating,
            )

        state = GenerationState.RETRY
        logger.debug(f"Attempt {attempts}: {result.word_count} words, start points {points} not linked")

    logger.warning(f"No solvable {size}x{size} grid in {attempts} attempts (last state: {state.value})")
    return GenerationResult(solved=False, attempts=attempts)


class GenerationError(Exception):
    """Raised when no solvable grid was found within the attempt budget."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"Could not generate a solvable grid in {attempts} attempts")
