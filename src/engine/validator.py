"""
Validation of player-drawn paths.

A gesture is accepted as the next found word when:
1. Both endpoints are on the grid, distinct, and on a straight line
2. It touches a word already found (unless nothing is found yet)
3. Its letters, read either way, form a dictionary word
4. It isn't already covered by a single found word
"""

from typing import List, Optional, Sequence

from .dictionary import Dictionary
from .geometry import full_path, is_collinear
from .grid import Grid
from .models import Cell, FoundWord, PathCheck


def is_valid_start_cell(
    cell: Cell,
    start_points: Sequence[Cell],
    found_words: Sequence[FoundWord],
) -> bool:
    """A path may only begin on a start point or on an already-found cell."""
    if cell in start_points:
        return True
    return any(cell in found.cells for found in found_words)


def _reject(
    code: str,
    message: str,
    path: Optional[List[Cell]] = None,
    word: Optional[str] = None,
) -> PathCheck:
    return PathCheck(valid=False, code=code, message=message, path=path or [], word=word)


def check_path(
    start: Cell,
    end: Cell,
    grid: Grid,
    dictionary: Dictionary,
    found_words: Sequence[FoundWord],
) -> PathCheck:
    """
    Decide whether the gesture from start to end is an acceptable new word.

    Rejections are reported in the result, never raised.

    Returns:
        PathCheck with the enumerated path and word when valid
    """
    if not grid.in_bounds(start) or not grid.in_bounds(end):
        return _reject("OUT_OF_BOUNDS", f"Path {start} -> {end} leaves the {grid.size}x{grid.size} grid")

    if start == end:
        return _reject("ZERO_LENGTH", f"Path starts and ends at {start}")

    if not is_collinear(start, end):
        return _reject("NOT_COLLINEAR", f"Path {start} -> {end} is not horizontal, vertical or diagonal")

    path = full_path(start, end)
    word = grid.word_along(path)

    if found_words:
        found_cells = set()
        for found in found_words:
            found_cells.update(found.path)
        if not any(cell in found_cells for cell in path):
            return _reject("DETACHED", f"'{word}' does not touch any found word", path, word)

    if not dictionary.is_valid_word(word):
        return _reject("INVALID_WORD", f"'{word}' is not a valid dictionary word", path, word)

    path_cells = set(path)
    for found in found_words:
        if path_cells <= found.cells:
            return _reject("DUPLICATE", f"'{word}' is already covered by '{found.word}'", path, word)

    return PathCheck(valid=True, message=f"Found '{word}'", path=path, word=word)
