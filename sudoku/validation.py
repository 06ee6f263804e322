import math

from .types import EMPTY, MAX_SIDE_LENGTH, Cells


def box_size_for(side_length: int) -> int:
    if side_length < 1:
        raise ValueError("side length must be at least 1")
    if side_length > MAX_SIDE_LENGTH:
        raise ValueError(f"side length {side_length} exceeds the supported maximum of {MAX_SIDE_LENGTH}")
    box_size = math.isqrt(side_length)
    if box_size * box_size != side_length:
        raise ValueError(f"side length {side_length} is not a perfect square")
    return box_size


def validate_and_normalize_cells(cells: Cells) -> Cells:
    if not isinstance(cells, list) or not cells:
        raise ValueError("board must be a non-empty list of rows")

    side_length = len(cells)
    box_size_for(side_length)

    normalized_cells: Cells = []
    for row_index, row in enumerate(cells):
        if not isinstance(row, list) or len(row) != side_length:
            raise ValueError(f"row {row_index} must contain exactly {side_length} values")

        normalized_row = []
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("board entries must be integers")
            if value < EMPTY or value > side_length:
                raise ValueError(f"board entries must be between {EMPTY} and {side_length}")
            normalized_row.append(value)

        normalized_cells.append(normalized_row)

    return normalized_cells


def validate_coordinate(side_length: int, row: int, col: int) -> None:
    if not 0 <= row < side_length:
        raise ValueError(f"row must be between 0 and {side_length - 1}")
    if not 0 <= col < side_length:
        raise ValueError(f"col must be between 0 and {side_length - 1}")
