"""Letter grid and random fill."""

import random
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import Cell


LetterModel = Literal["frequency", "uniform"]

# Common English letters repeated to bias the draw; rare letters appear once
FREQUENCY_POOL = "EETTAAOOINNSSRRHHDDLLUUCCMMFFYYWGGPBBVKKJJXQZ"
UNIFORM_POOL = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

LETTER_POOLS: Dict[str, str] = {
    "frequency": FREQUENCY_POOL,
    "uniform": UNIFORM_POOL,
}


def letter_model_for(difficulty: int) -> LetterModel:
    """Easiest level draws from the frequency pool, the rest are uniform."""
    return "frequency" if difficulty == 0 else "uniform"


class Grid(BaseModel):
    """
    Square matrix of uppercase letters.

    Letters are fixed when the grid is created and never change
    during generation or play.
    """

    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    letters: Tuple[Tuple[str, ...], ...]

    @model_validator(mode="after")
    def check_shape(self) -> "Grid":
        if len(self.letters) != self.size or any(len(row) != self.size for row in self.letters):
            raise ValueError(f"Grid letters must be {self.size}x{self.size}")
        for row in self.letters:
            for letter in row:
                if len(letter) != 1 or not ('A' <= letter <= 'Z'):
                    raise ValueError(f"Invalid grid letter: {letter!r}")
        return self

    @classmethod
    def fill(
        cls,
        size: int,
        letter_model: LetterModel = "frequency",
        rng: Optional[random.Random] = None,
    ) -> "Grid":
        """
        Create a grid with every cell drawn independently from a letter pool.

        Args:
            size: Number of rows (and columns)
            letter_model: "frequency" (weighted toward common letters) or "uniform"
            rng: Optional random generator for reproducibility

        Returns:
            A new Grid
        """
        rng = rng or random.Random()
        pool = LETTER_POOLS[letter_model]
        letters = tuple(tuple(rng.choice(pool) for _ in range(size)) for _ in range(size))
        return cls(size=size, letters=letters)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from strings, one per row."""
        return cls(size=len(rows), letters=tuple(tuple(row.upper()) for row in rows))

    def in_bounds(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.size and 0 <= col < self.size

    def letter_at(self, cell: Cell) -> str:
        row, col = cell
        return self.letters[row][col]

    def word_along(self, path: List[Cell]) -> str:
        """Read the letters along a path, in path order."""
        return ''.join(self.letter_at(cell) for cell in path)

    def rows(self) -> List[str]:
        return [''.join(row) for row in self.letters]

    def render(self) -> str:
        """Render the grid to a string."""
        return '\n'.join(' '.join(row) for row in self.letters)


def empty_usage(size: int) -> List[List[int]]:
    """A zeroed usage-counter matrix."""
    return [[0] * size for _ in range(size)]
