"""Data models for the word-search engine."""

from typing import List, Optional, Set, Tuple, NamedTuple
from pydantic import BaseModel, Field, ConfigDict


# (row, col)
Cell = Tuple[int, int]


class Direction(NamedTuple):
    """One of the 8 compass steps a straight path can take."""
    name: str
    d_row: int
    d_col: int


class FoundWord(BaseModel):
    """A committed straight-line path whose letters form a dictionary word."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    path: Tuple[Cell, ...] = Field(..., min_length=1)

    @property
    def start(self) -> Cell:
        return self.path[0]

    @property
    def end(self) -> Cell:
        return self.path[-1]

    @property
    def cells(self) -> Set[Cell]:
        return set(self.path)


class ScanResult(BaseModel):
    """Every word occurrence found on a grid, with per-cell usage counts."""
    found_words: List[FoundWord] = Field(default_factory=list)
    usage: List[List[int]] = Field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.found_words)


class PathCheck(BaseModel):
    """Outcome of validating a candidate gesture."""
    valid: bool
    code: Optional[str] = None  # None when valid
    message: str = ""
    word: Optional[str] = None
    path: List[Cell] = Field(default_factory=list)
