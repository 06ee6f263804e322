from dataclasses import dataclass

from .types import EMPTY, Cells
from .validation import box_size_for, validate_and_normalize_cells


@dataclass
class Grid:
    cells: Cells
    side_length: int
    box_size: int
    fill_count: int = 0


def build_grid(cells: Cells) -> Grid:
    normalized_cells = validate_and_normalize_cells(cells)
    side_length = len(normalized_cells)
    return Grid(
        cells=normalized_cells,
        side_length=side_length,
        box_size=box_size_for(side_length),
        fill_count=count_filled(normalized_cells),
    )


def empty_grid(side_length: int = 9) -> Grid:
    return Grid(
        cells=[[EMPTY for _ in range(side_length)] for _ in range(side_length)],
        side_length=side_length,
        box_size=box_size_for(side_length),
    )


def count_filled(cells: Cells) -> int:
    return sum(1 for row in cells for value in row if value != EMPTY)


def apply_value(grid: Grid, r: int, c: int, value: int) -> None:
    grid.cells[r][c] = value
    grid.fill_count += 1


def revert_value(grid: Grid, r: int, c: int) -> None:
    grid.cells[r][c] = EMPTY
    grid.fill_count -= 1


def copy_cells(grid: Grid) -> Cells:
    return [row[:] for row in grid.cells]


def grids_equal(first: Grid, second: Grid) -> bool:
    if first.side_length != second.side_length:
        return False
    for r in range(first.side_length):
        for c in range(first.side_length):
            if first.cells[r][c] != second.cells[r][c]:
                return False
    return True
