"""Number grids: adjacent products, triangle paths and minimal matrix paths."""

from __future__ import annotations

from math import prod
from typing import Sequence

Grid = Sequence[Sequence[int]]

# Right, down, down-right and up-right.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (-1, 1))


def parse_grid(text: str) -> list[list[int]]:
    """Read rows of integers separated by whitespace or commas; blank lines are skipped."""
    rows = []
    for line in text.splitlines():
        fields = line.replace(",", " ").split()
        if fields:
            rows.append([int(field) for field in fields])
    return rows


def _check_rectangular(grid: Grid, what: str) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError(f"{what} must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError(f"{what} rows must all have the same length")
    return len(grid), width


def max_adjacent_product(grid: Grid, run: int = 4) -> int:
    """Largest product of ``run`` adjacent numbers in a line across, down or diagonally."""
    if run < 1:
        raise ValueError(f"run must be positive: {run}")
    height, width = _check_rectangular(grid, "grid")
    best: int | None = None
    for row in range(height):
        for col in range(width):
            for d_row, d_col in _DIRECTIONS:
                end_row = row + d_row * (run - 1)
                end_col = col + d_col * (run - 1)
                if not (0 <= end_row < height and 0 <= end_col < width):
                    continue
                value = prod(grid[row + d_row * k][col + d_col * k] for k in range(run))
                if best is None or value > best:
                    best = value
    if best is None:
        raise ValueError(f"no run of {run} numbers fits in a {height}x{width} grid")
    return best


def max_triangle_path(triangle: Grid) -> int:
    """Largest sum on a path from the apex to the base, stepping to an adjacent number."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    for index, row in enumerate(triangle):
        if len(row) != index + 1:
            raise ValueError(f"row {index} must hold {index + 1} numbers, not {len(row)}")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + max(left, right) for value, left, right in zip(row, best, best[1:])]
    return best[0]


def min_path_sum(matrix: Grid) -> int:
    """Smallest sum on a path from top left to bottom right moving only right or down."""
    _, width = _check_rectangular(matrix, "matrix")
    above: list[int] = []
    for row in matrix:
        current: list[int] = []
        for col, value in enumerate(row):
            candidates = []
            if above:
                candidates.append(above[col])
            if current:
                candidates.append(current[-1])
            current.append(value + (min(candidates) if candidates else 0))
        above = current
    return above[width - 1]