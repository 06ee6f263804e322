from typing import Optional

from .constraints import find_conflict, first_empty_cell
from .search import place_sequential
from .state import Grid, build_grid, copy_cells, grids_equal
from .types import Cells, TraceLog, TraceMeta, TraceStep
from .utils import record_step, trace


def solve(
    grid: Grid,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[TraceStep]] = None,
    trace_meta: Optional[TraceMeta] = None,
    trace_max_steps: int = 1000,
) -> bool:
    """Solve grid in place.

    Returns True with the grid holding the first solution found, or False
    with every cell back to its value before the call.
    """
    conflict = find_conflict(grid)
    if conflict is not None:
        r, c = conflict
        message = f"Given value {grid.cells[r][c]} at ({r}, {c}) conflicts with its row, column or box"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, 0, "conflict", message, row=r, col=c, value=grid.cells[r][c])
        return False

    first_cell = first_empty_cell(grid)
    trace(
        trace_enabled,
        trace_log,
        f"Initialized search: side_length={grid.side_length}, box_size={grid.box_size}, filled_cells={grid.fill_count}",
    )

    return place_sequential(
        grid=grid,
        cell=first_cell,
        trace_enabled=trace_enabled,
        trace_log=trace_log,
        trace_steps=trace_steps,
        trace_meta=trace_meta,
        trace_max_steps=trace_max_steps,
        depth=0,
    )


def solve_board(
    cells: Cells,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[TraceStep]] = None,
    trace_meta: Optional[TraceMeta] = None,
    trace_max_steps: int = 1000,
) -> Cells:
    grid = build_grid(cells)
    if not solve(
        grid,
        trace_enabled=trace_enabled,
        trace_log=trace_log,
        trace_steps=trace_steps,
        trace_meta=trace_meta,
        trace_max_steps=trace_max_steps,
    ):
        raise ValueError("No valid solution for the provided board")

    return copy_cells(grid)


def boards_equal(first: Grid, second: Grid) -> bool:
    return grids_equal(first, second)
