"""Straight-line path geometry on the grid."""

from typing import List, Tuple

from .models import Cell, Direction


DIRECTIONS: Tuple[Direction, ...] = (
    Direction("N", -1, 0),
    Direction("NE", -1, 1),
    Direction("E", 0, 1),
    Direction("SE", 1, 1),
    Direction("S", 1, 0),
    Direction("SW", 1, -1),
    Direction("W", 0, -1),
    Direction("NW", -1, -1),
)


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_collinear(start: Cell, end: Cell) -> bool:
    """True if the two cells share a row, a column, or a diagonal."""
    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def full_path(start: Cell, end: Cell) -> List[Cell]:
    """
    Enumerate every cell from start to end inclusive.

    The endpoints must be collinear (see is_collinear). Callers validate
    this first; a bent pair raises ValueError.
    """
    if not is_collinear(start, end):
        raise ValueError(f"Cells {start} and {end} are not on a straight line")

    step_row = sign(end[0] - start[0])
    step_col = sign(end[1] - start[1])

    row, col = start
    path = [(row, col)]
    while (row, col) != end:
        row += step_row
        col += step_col
        path.append((row, col))

    return path


def lies_between(cell: Cell, start: Cell, end: Cell) -> bool:
    """
    Check whether `cell` is on the segment from start to end.

    Only the two endpoints are used; the path is never enumerated.
    """
    row, col = cell
    start_row, start_col = start
    end_row, end_col = end

    if start == end:
        return cell == start

    # Horizontal
    if start_row == end_row:
        return row == start_row and min(start_col, end_col) <= col <= max(start_col, end_col)

    # Vertical
    if start_col == end_col:
        return col == start_col and min(start_row, end_row) <= row <= max(start_row, end_row)

    # Diagonal
    if abs(end_row - start_row) == abs(end_col - start_col):
        offset_row = row - start_row
        offset_col = col - start_col
        return (
            abs(offset_row) == abs(offset_col)
            and abs(offset_row) <= abs(end_row - start_row)
            and (offset_row == 0 or sign(offset_row) == sign(end_row - start_row))
            and (offset_col == 0 or sign(offset_col) == sign(end_col - start_col))
        )

    return False


def neighbors(cell: Cell, size: int) -> List[Cell]:
    """All in-bounds cells one step away in any of the 8 directions."""
    row, col = cell
    result = []
    for direction in DIRECTIONS:
        r, c = row + direction.d_row, col + direction.d_col
        if 0 <= r < size and 0 <= c < size:
            result.append((r, c))
    return result
