"""Tests for the generate-and-test loop."""

import random
import string
from pathlib import Path

import pytest

from src.engine import Dictionary, load_dictionary
from src.game import (
    choose_start_points,
    find_solvable_grid,
    random_border_cell,
    rate_difficulty,
)


LETTERS = Dictionary(string.ascii_uppercase)
COMMON_WORDS = Path(__file__).parent / "data" / "common_words.txt"


def on_border(cell, size):
    row, col = cell
    return row in (0, size - 1) or col in (0, size - 1)


class TestStartPoints:
    """Test random border start points."""

    def test_border_cells(self):
        rng = random.Random(5)
        for _ in range(200):
            cell = random_border_cell(8, rng)
            assert on_border(cell, 8)
            assert 0 <= cell[0] < 8 and 0 <= cell[1] < 8

    def test_all_sides_used(self):
        rng = random.Random(6)
        cells = [random_border_cell(10, rng) for _ in range(400)]
        assert any(r == 0 for r, _ in cells)
        assert any(r == 9 for r, _ in cells)
        assert any(c == 0 for _, c in cells)
        assert any(c == 9 for _, c in cells)

    def test_distinct_points(self):
        points = choose_start_points(3, 8, random.Random(7))
        assert len(points) == 8
        assert len(set(points)) == 8

    def test_more_points_than_border_cells(self):
        with pytest.raises(ValueError):
            choose_start_points(3, 9, random.Random(7))

    def test_single_cell_grid_has_one_border_cell(self):
        assert choose_start_points(1, 1, random.Random(7)) == [(0, 0)]
        with pytest.raises(ValueError):
            choose_start_points(1, 2, random.Random(7))

    def test_generation_rejects_unplaceable_start_points(self):
        with pytest.raises(ValueError):
            find_solvable_grid(LETTERS, size=3, rng=random.Random(8), num_start_points=9)


class TestRateDifficulty:
    """Test rating a solved grid by word count."""

    def test_thresholds(self):
        assert rate_difficulty(1301) == 0
        assert rate_difficulty(1300) == 1
        assert rate_difficulty(901) == 1
        assert rate_difficulty(900) == 2
        assert rate_difficulty(501) == 2
        assert rate_difficulty(500) == 3
        assert rate_difficulty(0) == 3


class TestFindSolvableGrid:
    """Test the generation loop."""

    def test_dense_dictionary_solves_first_try(self):
        """Every cell is a word, so the first grid is solvable."""
        result = find_solvable_grid(LETTERS, size=6, rng=random.Random(1))
        assert result.solved is True
        assert result.attempts == 1
        assert result.grid.size == 6
        assert len(result.start_points) == 2
        assert all(on_border(p, 6) for p in result.start_points)
        assert len(result.found_words) == 6 * 6 * 8
        assert result.rating == 3
        assert all(count == 8 for row in result.usage for count in row)

    def test_gives_up_after_max_attempts(self):
        """A word longer than the grid can never be found."""
        result = find_solvable_grid(
            Dictionary(["ABCDEFGHIJ"]), size=4, rng=random.Random(2), max_attempts=3
        )
        assert result.solved is False
        assert result.attempts == 3
        assert result.grid is None

    def test_fixed_start_points_kept(self):
        points = [(0, 0), (5, 5), (0, 5)]
        result = find_solvable_grid(LETTERS, size=6, rng=random.Random(3), start_points=points)
        assert result.solved is True
        assert result.start_points == points

    def test_more_start_points(self):
        result = find_solvable_grid(LETTERS, size=6, rng=random.Random(4), num_start_points=4)
        assert len(set(result.start_points)) == 4

    def test_seeded_generation_is_reproducible(self):
        a = find_solvable_grid(LETTERS, size=5, rng=random.Random(9))
        b = find_solvable_grid(LETTERS, size=5, rng=random.Random(9))
        assert a.grid == b.grid
        assert a.start_points == b.start_points

    def test_terminates_on_large_grid(self):
        """A 20x20 grid with a list of common English words is solved within budget."""
        common = load_dictionary(COMMON_WORDS)
        assert len(common) >= 1000
        assert all(len(word) >= 2 for word in common)

        for seed in range(3):
            result = find_solvable_grid(
                common, size=20, difficulty=0, rng=random.Random(seed), max_attempts=100
            )
            assert result.solved is True
            assert result.attempts <= 100
            assert all(len(found.word) >= 2 for found in result.found_words)
