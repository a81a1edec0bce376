"""Breadth-first connectivity over found-word cells."""

from collections import deque
from typing import Iterable, List, Set

from .geometry import neighbors
from .models import Cell, FoundWord


def connected_cells(found_words: Iterable[FoundWord]) -> Set[Cell]:
    """Union of every cell on any found-word path."""
    cells: Set[Cell] = set()
    for found in found_words:
        cells.update(found.path)
    return cells


def is_connected(
    found_words: Iterable[FoundWord],
    start_points: List[Cell],
    size: int,
) -> bool:
    """
    Check whether the found words link every start point.

    Searches outward from the first start point with 8-adjacency. Any
    in-bounds neighbour is queued, but only cells that belong to a found
    word are expanded. A target start point counts as reached as soon as
    it is dequeued, so it only needs to touch the network.

    Args:
        found_words: Committed (or discovered) words
        start_points: At least two cells; the first is the search origin
        size: Grid size

    Returns:
        True if every start point after the first is reached
    """
    if len(start_points) < 2:
        raise ValueError("At least two start points are required")

    network = connected_cells(found_words)
    targets = set(start_points[1:]) - {start_points[0]}
    if not targets:
        return True

    origin = start_points[0]
    queue = deque([origin])
    queued = {origin}
    visited: Set[Cell] = set()

    while queue:
        cell = queue.popleft()

        if cell in targets:
            targets.discard(cell)
            if not targets:
                return True

        if cell in visited or cell not in network:
            continue
        visited.add(cell)

        for neighbor in neighbors(cell, size):
            if neighbor not in queued:
                queued.add(neighbor)
                queue.append(neighbor)

    return False
