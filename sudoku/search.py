from typing import Optional

from .constraints import is_legal, next_empty_cell, select_most_constrained_cell
from .state import Grid, apply_value, revert_value
from .types import Coordinate, TraceLog, TraceMeta, TraceStep
from .utils import indent, linear_index, record_step, trace


def place_sequential(
    grid: Grid,
    cell: Optional[Coordinate],
    trace_enabled: bool,
    trace_log: Optional[TraceLog],
    trace_steps: Optional[list[TraceStep]],
    trace_meta: Optional[TraceMeta],
    trace_max_steps: int,
    depth: int,
) -> bool:
    """Plain backtracking over cells in row-major order.

    Only runs while fewer than side_length cells are filled; past that point
    the search continues with place_most_constrained.
    """
    if cell is None or grid.fill_count >= grid.side_length:
        message = f"{indent(depth)}Switch to most-constrained search at fill count {grid.fill_count}"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "switch_phase", message)
        return place_most_constrained(
            grid=grid,
            trace_enabled=trace_enabled,
            trace_log=trace_log,
            trace_steps=trace_steps,
            trace_meta=trace_meta,
            trace_max_steps=trace_max_steps,
            depth=depth,
        )

    r, c = cell
    message = f"{indent(depth)}Select cell ({r}, {c}) in sequence"
    trace(trace_enabled, trace_log, message)
    record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "select_cell", message, row=r, col=c)

    for value in range(1, grid.side_length + 1):
        if not is_legal(grid, r, c, value):
            continue

        message = f"{indent(depth)}Try value {value} at ({r}, {c})"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "try_value", message, row=r, col=c, value=value)
        apply_value(grid, r, c, value)

        following = next_empty_cell(grid, linear_index(r, c, grid.side_length) + 1)
        if place_sequential(
            grid=grid,
            cell=following,
            trace_enabled=trace_enabled,
            trace_log=trace_log,
            trace_steps=trace_steps,
            trace_meta=trace_meta,
            trace_max_steps=trace_max_steps,
            depth=depth + 1,
        ):
            message = f"{indent(depth)}Accept value {value} at ({r}, {c})"
            trace(trace_enabled, trace_log, message)
            record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "accept_value", message, row=r, col=c, value=value)
            return True

        message = f"{indent(depth)}Backtrack on ({r}, {c}) value {value}"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "backtrack", message, row=r, col=c, value=value)
        revert_value(grid, r, c)

    message = f"{indent(depth)}No valid values remain for ({r}, {c})"
    trace(trace_enabled, trace_log, message)
    record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "prune_branch", message, row=r, col=c)
    return False


def place_most_constrained(
    grid: Grid,
    trace_enabled: bool,
    trace_log: Optional[TraceLog],
    trace_steps: Optional[list[TraceStep]],
    trace_meta: Optional[TraceMeta],
    trace_max_steps: int,
    depth: int,
) -> bool:
    choice = select_most_constrained_cell(grid)
    if choice is None:
        message = f"{indent(depth)}All cells assigned"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "complete", message)
        return True

    r, c, candidates = choice
    if not candidates:
        message = f"{indent(depth)}Dead end at ({r}, {c}): no candidates"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "dead_end", message, row=r, col=c, candidates=[])
        return False

    message = f"{indent(depth)}Select cell ({r}, {c}) with {len(candidates)} candidates"
    trace(trace_enabled, trace_log, message)
    record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "select_cell", message, row=r, col=c, candidates=candidates)

    for value in candidates:
        message = f"{indent(depth)}Try value {value} at ({r}, {c})"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "try_value", message, row=r, col=c, value=value)
        apply_value(grid, r, c, value)

        if place_most_constrained(
            grid=grid,
            trace_enabled=trace_enabled,
            trace_log=trace_log,
            trace_steps=trace_steps,
            trace_meta=trace_meta,
            trace_max_steps=trace_max_steps,
            depth=depth + 1,
        ):
            message = f"{indent(depth)}Accept value {value} at ({r}, {c})"
            trace(trace_enabled, trace_log, message)
            record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "accept_value", message, row=r, col=c, value=value)
            return True

        message = f"{indent(depth)}Backtrack on ({r}, {c}) value {value}"
        trace(trace_enabled, trace_log, message)
        record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "backtrack", message, row=r, col=c, value=value)
        revert_value(grid, r, c)

    message = f"{indent(depth)}No valid values remain for ({r}, {c})"
    trace(trace_enabled, trace_log, message)
    record_step(trace_steps, trace_meta, trace_max_steps, grid.cells, depth, "prune_branch", message, row=r, col=c)
    return False
