"""
Pydantic models for the game layer.

Configuration, generation results and the read-only snapshot handed to
renderers. The session logic itself lives in puzzle.py.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..engine.grid import Grid
from ..engine.models import Cell, FoundWord, PathCheck


class PuzzleConfig(BaseModel):
    """Configuration for a puzzle session."""
    grid_size: int = Field(default=20, ge=2)
    difficulty: int = Field(default=0, ge=0, le=2)
    num_start_points: int = Field(default=2, ge=2)
    start_points: Optional[List[Cell]] = None  # Fixed points; random border cells if None
    max_attempts: Optional[int] = Field(default=1000, ge=1)  # None retries forever
    seed: Optional[int] = None
    dictionary_path: Optional[str] = None
    auto_advance: bool = True

    @model_validator(mode="after")
    def check_start_points(self) -> "PuzzleConfig":
        if self.start_points is None:
            if self.num_start_points > 4 * (self.grid_size - 1):
                raise ValueError(
                    f"{self.num_start_points} start points don't fit on the border "
                    f"of a {self.grid_size}x{self.grid_size} grid"
                )
            return self

        if len(self.start_points) < 2:
            raise ValueError("At least two start points are required")
        if len(set(self.start_points)) != len(self.start_points):
            raise ValueError("Start points must be distinct")

        last = self.grid_size - 1
        for row, col in self.start_points:
            if not (0 <= row <= last and 0 <= col <= last):
                raise ValueError(f"Start point {(row, col)} is outside the grid")
            if row not in (0, last) and col not in (0, last):
                raise ValueError(f"Start point {(row, col)} is not on the border")
        return self


class GenerationResult(BaseModel):
    """Outcome of the generate-and-test loop."""
    solved: bool
    attempts: int = 0
    grid: Optional[Grid] = None
    start_points: List[Cell] = Field(default_factory=list)
    found_words: List[FoundWord] = Field(default_factory=list)
    usage: List[List[int]] = Field(default_factory=list)
    rating: Optional[int] = None  # 0 (many words) .. 3 (few words)


class MoveResult(BaseModel):
    """Result of committing the current path."""
    accepted: bool
    check: Optional[PathCheck] = None  # None if there was nothing to commit
    won: bool = False


class PuzzleSnapshot(BaseModel):
    """Read-only view of the puzzle for renderers."""
    model_config = ConfigDict(frozen=True)

    grid: List[str] = Field(default_factory=list)
    usage: List[List[int]] = Field(default_factory=list)
    start_points: List[Cell] = Field(default_factory=list)
    found_words: List[FoundWord] = Field(default_factory=list)
    current_path: List[Cell] = Field(default_factory=list)
    difficulty: int = 0
    rounds_won: int = 0
