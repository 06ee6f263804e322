import argparse
from pathlib import Path
from typing import Optional

from sudoku.board_text import format_board_text, parse_board_text
from sudoku.solver import solve
from sudoku.state import Grid, build_grid, copy_cells
from sudoku.types import Cells


def run(grid: Grid) -> Optional[Cells]:
    if not solve(grid):
        return None
    return copy_cells(grid)


def run_with_trace(grid: Grid) -> tuple[Optional[Cells], list[str]]:
    trace_log: list[str] = []
    solved = solve(grid, trace_enabled=True, trace_log=trace_log)
    return (copy_cells(grid) if solved else None), trace_log


def load_board_from_file(input_path: str) -> Grid:
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc
    except OSError as exc:
        raise ValueError(f"unable to open input file: {input_path}") from exc

    return build_grid(parse_board_text(text))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a Sudoku board read from a text file")
    parser.add_argument("input", help="Path to a text file with one board row per line, 0 for empty cells")
    parser.add_argument("--trace", action="store_true", help="Print the solver trace after the board")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        grid = load_board_from_file(args.input)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")

    if args.trace:
        solution, trace_log = run_with_trace(grid)
    else:
        solution, trace_log = run(grid), []

    if solution is None:
        print("No solution")
    else:
        print(format_board_text(solution))
    for line in trace_log:
        print(line)

    return 0 if solution is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
