from typing import Optional

from .types import Cells, TraceLog, TraceMeta, TraceStep


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def indent(depth: int) -> str:
    return "  " * depth


def record_step(
    trace_steps: Optional[list[TraceStep]],
    trace_meta: Optional[TraceMeta],
    trace_max_steps: int,
    cells: Cells,
    depth: int,
    event: str,
    message: str,
    row: Optional[int] = None,
    col: Optional[int] = None,
    value: Optional[int] = None,
    candidates: Optional[list[int]] = None,
) -> None:
    if trace_steps is None:
        return
    if len(trace_steps) >= trace_max_steps:
        if trace_meta is not None:
            trace_meta["truncated"] = True
        return
    trace_steps.append(
        {
            "event": event,
            "message": message,
            "depth": depth,
            "row": row,
            "col": col,
            "value": value,
            "candidates": candidates,
            "grid": [grid_row[:] for grid_row in cells],
        }
    )


def linear_index(row: int, col: int, side_length: int) -> int:
    return row * side_length + col
