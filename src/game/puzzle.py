import logging
import random
from typing import Callable, Dict, Iterable, List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from ..engine.connectivity import is_connected
from ..engine.dictionary import Dictionary, DictionaryLoadError, load_dictionary
from ..engine.geometry import lies_between
from ..engine.grid import Grid
from ..engine.models import Cell, FoundWord
from ..engine.validator import check_path, is_valid_start_cell
from .generator import GenerationError, find_solvable_grid
from .models import GenerationResult, MoveResult, PuzzleConfig, PuzzleSnapshot

logger = logging.getLogger(__name__)

MAX_DIFFICULTY = 2


class Puzzle(BaseModel):
    """
    One player's puzzle session.

    Owns the grid, start points, found words and the path being drawn.
    The input controller drives it through begin_path, extend_path,
    commit_path and cancel_path; renderers read snapshot().

    Attributes:
        config: Session configuration
        word_source: Optional callable returning the word list
        dictionary: Loaded once, reused by every rebuild
        grid: Current letter grid (None until initialize())
        start_points: Border cells the player must link
        found_words: Words committed by the player
        current_path: Path being drawn: [], [start] or [start, end]
        usage: How many committed paths cross each cell
        difficulty: 0..2, selects the letter pool
        rounds_won: Number of puzzles solved in this session
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: PuzzleConfig = Field(default_factory=PuzzleConfig)
    word_source: Optional[Callable[[], Iterable[str]]] = None
    dictionary: Optional[Dictionary] = None
    grid: Optional[Grid] = None
    start_points: List[Cell] = Field(default_factory=list)
    found_words: List[FoundWord] = Field(default_factory=list)
    current_path: List[Cell] = Field(default_factory=list)
    usage: List[List[int]] = Field(default_factory=list)
    difficulty: int = Field(default=0, ge=0, le=MAX_DIFFICULTY)
    rounds_won: int = 0
    last_generation: Optional[GenerationResult] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator and starting difficulty after model creation."""
        self._rng = random.Random(self.config.seed)
        if "difficulty" not in self.model_fields_set:
            self.difficulty = self.config.difficulty

    @classmethod
    def create(
        cls,
        config: Optional[PuzzleConfig] = None,
        word_source: Optional[Callable[[], Iterable[str]]] = None,
        **config_kwargs: Any
    ) -> "Puzzle":
        """
        Factory method to create an uninitialized puzzle.

        Args:
            config: Optional PuzzleConfig instance
            word_source: Optional callable returning words; overrides config.dictionary_path
            **config_kwargs: Config parameters if config not provided

        Returns:
            A new Puzzle; call initialize() before playing
        """
        if config is None:
            config = PuzzleConfig(**config_kwargs)

        return cls(config=config, word_source=word_source)

    def initialize(self) -> GenerationResult:
        """
        Build a fresh solvable puzzle.

        Loads the dictionary on first use, then generates grids until one
        links every start point. The words found while generating only
        prove the grid is solvable; the player starts with none.

        The session state is only replaced once a solvable grid exists, so
        a failed rebuild leaves the previous puzzle in place.

        Raises:
            DictionaryLoadError: If the word list can't be loaded
            GenerationError: If max_attempts ran out
        """
        if self.dictionary is None:
            self.dictionary = self._load_dictionary()

        result = find_solvable_grid(
            self.dictionary,
            size=self.config.grid_size,
            difficulty=self.difficulty,
            rng=self._rng,
            max_attempts=self.config.max_attempts,
            start_points=self.config.start_points,
            num_start_points=self.config.num_start_points,
        )
        self.last_generation = result

        if not result.solved:
            raise GenerationError(result.attempts)

        self.grid = result.grid
        self.start_points = list(result.start_points)
        self.found_words = []
        self.current_path = []
        # Shading starts from the generation scan's word density
        self.usage = [row.copy() for row in result.usage]
        return result

    def _load_dictionary(self) -> Dictionary:
        """Load words from the word source or the configured file."""
        if self.word_source is not None:
            try:
                words = list(self.word_source())
            except Exception as e:
                raise DictionaryLoadError(f"Word source failed: {e}") from e
            dictionary = Dictionary(words)
            if not len(dictionary):
                raise DictionaryLoadError("Word source returned no words")
            return dictionary

        if self.config.dictionary_path:
            return load_dictionary(self.config.dictionary_path)

        raise DictionaryLoadError("No word source or dictionary_path configured")

    def _require_grid(self) -> Grid:
        if self.grid is None:
            raise ValueError("Puzzle not initialized. Call initialize() first.")
        return self.grid

    def begin_path(self, cell: Cell) -> bool:
        """
        Start drawing a path.

        Only start points and cells of found words can begin a path.

        Returns:
            True if the path was started
        """
        grid = self._require_grid()
        if not grid.in_bounds(cell):
            return False
        if not is_valid_start_cell(cell, self.start_points, self.found_words):
            return False

        self.current_path = [cell]
        return True

    def extend_path(self, cell: Cell) -> bool:
        """Move the end of the current path to `cell`."""
        if not self.current_path:
            return False

        start = self.current_path[0]
        if cell == start:
            return False

        self.current_path = [start, cell]
        return True

    def cancel_path(self) -> None:
        """Drop the path being drawn."""
        self.current_path = []

    def commit_path(self) -> MoveResult:
        """
        Try to accept the current path as a found word.

        The current path is always cleared. On a win the puzzle is rebuilt,
        one level harder if auto_advance is set.

        Returns:
            MoveResult with the validation outcome

        Raises:
            GenerationError: If the rebuild after a win runs out of attempts.
                The winning word stays committed, rounds_won and difficulty
                are already updated, and the solved grid is kept, so
                has_won() is still True and initialize() can be retried.
        """
        grid = self._require_grid()

        if len(self.current_path) < 2:
            self.current_path = []
            return MoveResult(accepted=False)

        start, end = self.current_path[0], self.current_path[-1]
        self.current_path = []

        check = check_path(start, end, grid, self.dictionary, self.found_words)
        if not check.valid:
            logger.debug(f"Rejected path {start} -> {end}: {check.code}")
            return MoveResult(accepted=False, check=check)

        self._add_found_word(FoundWord(word=check.word, path=check.path))

        if self.has_won():
            self._on_win()
            return MoveResult(accepted=True, check=check, won=True)

        return MoveResult(accepted=True, check=check)

    def _add_found_word(self, found: FoundWord) -> None:
        """Commit a word and bump the usage counter of every cell on its path."""
        self._require_grid()
        self.found_words.append(found)
        for row, col in found.path:
            self.usage[row][col] += 1

    def has_won(self) -> bool:
        """Check whether the found words link every start point."""
        grid = self._require_grid()
        return is_connected(self.found_words, self.start_points, grid.size)

    def _on_win(self) -> None:
        self.rounds_won += 1
        logger.info(f"Puzzle solved with {len(self.found_words)} words at difficulty {self.difficulty}")

        if self.config.auto_advance and self.difficulty < MAX_DIFFICULTY:
            self.difficulty += 1

        self.initialize()

    def set_difficulty(self, level: int) -> GenerationResult:
        """
        Switch difficulty and rebuild the puzzle from scratch.

        The loaded dictionary is reused.
        """
        if not 0 <= level <= MAX_DIFFICULTY:
            raise ValueError(f"Difficulty must be between 0 and {MAX_DIFFICULTY}, got {level}")

        self.difficulty = level
        return self.initialize()

    def is_start_point(self, cell: Cell) -> bool:
        return cell in self.start_points

    def is_cell_in_found_words(self, cell: Cell) -> bool:
        return any(cell in found.cells for found in self.found_words)

    def is_cell_in_current_path(self, cell: Cell) -> bool:
        if not self.current_path:
            return False
        return lies_between(cell, self.current_path[0], self.current_path[-1])

    def snapshot(self) -> PuzzleSnapshot:
        """Read-only copy of everything a renderer needs."""
        grid = self._require_grid()
        return PuzzleSnapshot(
            grid=grid.rows(),
            usage=[row.copy() for row in self.usage],
            start_points=list(self.start_points),
            found_words=list(self.found_words),
            current_path=list(self.current_path),
            difficulty=self.difficulty,
            rounds_won=self.rounds_won,
        )

    def get_state(self) -> Dict:
        """
        Get the current puzzle state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing puzzle state
        """
        return {
            "grid_size": self.config.grid_size,
            "difficulty": self.difficulty,
            "initialized": self.grid is not None,
            "start_points": list(self.start_points),
            "found_words": [found.word for found in self.found_words],
            "current_path": list(self.current_path),
            "rounds_won": self.rounds_won,
            "generation_attempts": self.last_generation.attempts if self.last_generation else 0,
        }
