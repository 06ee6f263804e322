"""Plain-text board format.

One row per line, one digit per cell, 0 for an empty cell. Whitespace inside
a line is ignored and blank lines are skipped, so both ``530070000`` and
``5 3 0 0 7 0 0 0 0`` describe the same row.
"""

from .types import Cells


BOX_ROW_SEPARATOR = "------+-------+------"


def parse_board_text(text: str) -> Cells:
    cells: Cells = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        row: list[int] = []
        for char in line:
            if char.isspace():
                continue
            if char not in "0123456789":
                raise ValueError(f"line {line_number} contains invalid character {char!r}")
            row.append(int(char))
        if row:
            cells.append(row)

    if not cells:
        raise ValueError("board text contains no rows")
    return cells


def format_board_rows(cells: Cells) -> list[str]:
    side_length = len(cells)
    if side_length != 9:
        return [" ".join(str(value) for value in row) for row in cells]

    rows: list[str] = []
    for r, row in enumerate(cells):
        groups = [" ".join(str(value) for value in row[start : start + 3]) for start in range(0, 9, 3)]
        rows.append(" | ".join(groups))
        if r in (2, 5):
            rows.append(BOX_ROW_SEPARATOR)
    return rows


def format_board_text(cells: Cells) -> str:
    return "\n".join(format_board_rows(cells))
