"""
Directional word scan over a whole grid.

From every cell, grow a string outward in each of the 8 directions one
letter at a time. Every prefix that reads as a dictionary word (in either
orientation) is recorded as its own FoundWord; duplicates and overlaps are
kept, since word density is what makes a grid solvable.
"""

from typing import List

from .dictionary import Dictionary
from .geometry import DIRECTIONS
from .grid import Grid, empty_usage
from .models import Cell, FoundWord, ScanResult


def find_words_from_cell(grid: Grid, dictionary: Dictionary, start: Cell) -> List[FoundWord]:
    """Find every word starting at `start` in any of the 8 directions."""
    found: List[FoundWord] = []

    for direction in DIRECTIONS:
        row, col = start
        word = ""
        path: List[Cell] = []

        while grid.in_bounds((row, col)) and len(word) < dictionary.max_length:
            word += grid.letter_at((row, col))
            path.append((row, col))

            if dictionary.is_valid_word(word):
                found.append(FoundWord(word=word, path=tuple(path)))

            row += direction.d_row
            col += direction.d_col

    return found


def scan(grid: Grid, dictionary: Dictionary) -> ScanResult:
    """
    Find every straight-line word on the grid.

    The grid is left untouched; usage counts come back in the result.

    Args:
        grid: The letter grid to scan
        dictionary: Words to look for

    Returns:
        ScanResult with all found words and how many paths cross each cell
    """
    found_words: List[FoundWord] = []
    usage = empty_usage(grid.size)

    for row in range(grid.size):
        for col in range(grid.size):
            for found in find_words_from_cell(grid, dictionary, (row, col)):
                found_words.append(found)
                for r, c in found.path:
                    usage[r][c] += 1

    return ScanResult(found_words=found_words, usage=usage)
