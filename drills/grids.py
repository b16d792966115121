"""Grid exercises on square and rectangular boards."""

from __future__ import annotations

from collections.abc import Sequence

_DIGITS = frozenset("123456789")
_EMPTY = "."


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Tell whether the filled cells repeat no digit in a row, column or box."""
    seen: set[tuple[str, int | tuple[int, int], str]] = set()
    for row, cells in enumerate(board):
        for column, cell in enumerate(cells):
            if cell == _EMPTY:
                continue
            if cell not in _DIGITS:
                raise ValueError(f"unexpected cell {cell!r} at ({row}, {column})")
            keys = {
                ("row", row, cell),
                ("column", column, cell),
                ("box", (row // 3, column // 3), cell),
            }
            if keys & seen:
                return False
            seen |= keys
    return True


def island_perimeter(grid: Sequence[Sequence[int]]) -> int:
    """Return the perimeter of the land cells (ones) in the grid."""
    height = len(grid)
    perimeter = 0
    for row, cells in enumerate(grid):
        width = len(cells)
        for column, cell in enumerate(cells):
            if cell != 1:
                continue
            perimeter += 4
            if row > 0:
                perimeter -= grid[row - 1][column]
            if row < height - 1:
                perimeter -= grid[row + 1][column]
            if column > 0:
                perimeter -= cells[column - 1]
            if column < width - 1:
                perimeter -= cells[column + 1]
    return perimeter


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_values in zip(matrix, rotated):
        row[:] = new_values