"""Word-search engine for crossgame."""

from .models import Cell, Direction, FoundWord, ScanResult, PathCheck
from .dictionary import Dictionary, DictionaryLoadError, load_dictionary
from .grid import Grid, LetterModel, FREQUENCY_POOL, UNIFORM_POOL, letter_model_for, empty_usage
from .geometry import DIRECTIONS, is_collinear, full_path, lies_between, neighbors
from .scanner import scan, find_words_from_cell
from .connectivity import connected_cells, is_connected
from .validator import check_path, is_valid_start_cell

__all__ = [
    # Models
    "Cell",
    "Direction",
    "FoundWord",
    "ScanResult",
    "PathCheck",
    # Dictionary
    "Dictionary",
    "DictionaryLoadError",
    "load_dictionary",
    # Grid
    "Grid",
    "LetterModel",
    "FREQUENCY_POOL",
    "UNIFORM_POOL",
    "letter_model_for",
    "empty_usage",
    # Geometry
    "DIRECTIONS",
    "is_collinear",
    "full_path",
    "lies_between",
    "neighbors",
    # Scanning and connectivity
    "scan",
    "find_words_from_cell",
    "connected_cells",
    "is_connected",
    # Path validation
    "check_path",
    "is_valid_start_cell",
]
