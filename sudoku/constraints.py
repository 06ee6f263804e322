from typing import Optional

from .state import Grid
from .types import EMPTY, MIN_VALUE, CellChoice, Coordinate


def box_origin(grid: Grid, r: int, c: int) -> Coordinate:
    return grid.box_size * (r // grid.box_size), grid.box_size * (c // grid.box_size)


def is_legal(grid: Grid, r: int, c: int, value: int) -> bool:
    cells = grid.cells
    for i in range(grid.side_length):
        if cells[r][i] == value or cells[i][c] == value:
            return False

    box_row, box_col = box_origin(grid, r, c)
    for a in range(grid.box_size):
        for b in range(grid.box_size):
            if cells[box_row + a][box_col + b] == value:
                return False

    return True


def candidates_for(grid: Grid, r: int, c: int) -> list[int]:
    cells = grid.cells
    remaining = set(range(MIN_VALUE, grid.side_length + 1))
    for i in range(grid.side_length):
        remaining.discard(cells[r][i])
        remaining.discard(cells[i][c])

    box_row, box_col = box_origin(grid, r, c)
    for a in range(grid.box_size):
        for b in range(grid.box_size):
            remaining.discard(cells[box_row + a][box_col + b])

    return sorted(remaining)


def first_empty_cell(grid: Grid) -> Optional[Coordinate]:
    """Scan the whole board once, recounting filled cells into grid.fill_count.

    Returns the first empty cell in row-major order, or None for a full board.
    """
    first: Optional[Coordinate] = None
    filled = 0
    for r in range(grid.side_length):
        for c in range(grid.side_length):
            if grid.cells[r][c] != EMPTY:
                filled += 1
            elif first is None:
                first = (r, c)

    grid.fill_count = filled
    return first


def next_empty_cell(grid: Grid, start_index: int) -> Optional[Coordinate]:
    """Return the first empty cell at or after start_index in row-major order.

    The scan wraps around to the top of the board once before giving up.
    """
    size = grid.side_length
    cell_count = size * size
    for offset in range(cell_count):
        index = (start_index + offset) % cell_count
        r, c = divmod(index, size)
        if grid.cells[r][c] == EMPTY:
            return r, c
    return None


def select_most_constrained_cell(grid: Grid) -> Optional[CellChoice]:
    best_choice: Optional[CellChoice] = None
    best_domain_size: Optional[int] = None

    for r in range(grid.side_length):
        for c in range(grid.side_length):
            if grid.cells[r][c] != EMPTY:
                continue

            candidates = candidates_for(grid, r, c)
            if not candidates:
                return r, c, []
            if len(candidates) == 1:
                return r, c, candidates

            domain_size = len(candidates)
            if best_domain_size is None or domain_size < best_domain_size:
                best_domain_size = domain_size
                best_choice = (r, c, candidates)

    return best_choice


def find_conflict(grid: Grid) -> Optional[Coordinate]:
    """Return the first given that repeats a value in its row, column or box."""
    for r in range(grid.side_length):
        for c in range(grid.side_length):
            value = grid.cells[r][c]
            if value == EMPTY:
                continue
            grid.cells[r][c] = EMPTY
            legal = is_legal(grid, r, c, value)
            grid.cells[r][c] = value
            if not legal:
                return r, c
    return None
