"""Calendars, divisor sums, number spirals and figurate-number sequences."""

from __future__ import annotations

import calendar
from math import comb, isqrt

_MONTH_NAMES = (
    " jan", " feb", " mar", " apr", " may", " jun",
    " jul", " aug", " sep", " oct", " nov", " dec",
)
_WEEK_HEADER = " sun mon tue wed thu fri sat"


def _check_years(first_year: int, last_year: int) -> None:
    if first_year < 1 or last_year < 1:
        raise ValueError(f"years must be positive: {first_year}, {last_year}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def _sunday_column(year: int, month: int) -> int:
    """Column of the first day in a week starting on Sunday."""
    return (calendar.weekday(year, month, 1) + 1) % 7


def count_first_sundays(first_year: int = 1901, last_year: int = 2000) -> int:
    """How many months from ``first_year`` to ``last_year`` begin on a Sunday."""
    _check_years(first_year, last_year)
    return sum(
        1
        for year in range(first_year, last_year + 1)
        for month in range(1, 13)
        if _sunday_column(year, month) == 0
    )


def render_calendar(first_year: int, last_year: int) -> str:
    """Month grids, weeks starting on Sunday, for every year in the range."""
    _check_years(first_year, last_year)
    parts = []
    for year in range(first_year, last_year + 1):
        parts.append(f"####### {year}  #####################\n")
        for month, name in enumerate(_MONTH_NAMES, 1):
            parts.append(f"{name}\n{_WEEK_HEADER}\n")
            column = _sunday_column(year, month)
            parts.append("    " * column)
            for day in range(1, calendar.monthrange(year, month)[1] + 1):
                parts.append(f"{day:4d}")
                if column == 6:
                    parts.append("\n")
                column = (column + 1) % 7
            parts.append("\n\n")
    return "".join(parts)


def proper_divisors(number: int) -> list[int]:
    """Divisors of ``number`` smaller than itself, in increasing order."""
    if number < 1:
        raise ValueError(f"number must be positive: {number}")
    divisors = set()
    for d in range(1, isqrt(number) + 1):
        if number % d == 0:
            divisors.update((d, number // d))
    divisors.discard(number)
    return sorted(divisors)


def abundant_numbers(limit: int = 28123) -> list[int]:
    """Numbers from 1 to ``limit`` whose proper divisors sum to more than themselves."""
    _check_non_negative("limit", limit)
    sums = [0] * (limit + 1)
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit + 1, divisor):
            sums[multiple] += divisor
    return [n for n in range(1, limit + 1) if sums[n] > n]


def non_abundant_sum(limit: int = 28123) -> int:
    """Sum of the numbers 1..``limit`` that are not the sum of two abundant numbers."""
    abundant = abundant_numbers(limit)
    representable = bytearray(limit + 1)
    for index, first in enumerate(abundant):
        for second in abundant[index:]:
            total = first + second
            if total > limit:
                break
            representable[total] = 1
    return sum(n for n in range(1, limit + 1) if not representable[n])


_CLOCKWISE = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiral_matrix(size: int) -> list[list[int]]:
    """A square of side ``size`` filled 1, 2, 3... spiralling clockwise from the centre.

    The first step goes to the right of the centre.
    """
    if size < 1 or size % 2 == 0:
        raise ValueError(f"size must be a positive odd number: {size}")
    grid = [[0] * size for _ in range(size)]
    row = col = size // 2
    grid[row][col] = 1
    direction = 0
    for value in range(2, size * size + 1):
        d_row, d_col = _CLOCKWISE[direction]
        row, col = row + d_row, col + d_col
        grid[row][col] = value
        turn = (direction + 1) % 4
        t_row, t_col = row + _CLOCKWISE[turn][0], col + _CLOCKWISE[turn][1]
        if 0 <= t_row < size and 0 <= t_col < size and grid[t_row][t_col] == 0:
            direction = turn
    return grid


def spiral_diagonal_sum(size: int = 1001) -> int:
    """Sum of both diagonals of the number spiral of side ``size``."""
    if size < 1 or size % 2 == 0:
        raise ValueError(f"size must be a positive odd number: {size}")
    return 1 + sum(4 * side * side - 6 * (side - 1) for side in range(3, size + 1, 2))


def _pentagonal(n: int) -> int:
    return n * (3 * n - 1) // 2


def pentagonal_pairs(count: int = 10000) -> list[tuple[int, int]]:
    """Pairs of pentagonal numbers whose sum and difference are both pentagonal.

    Only the first ``count`` - 1 pentagonal numbers are paired; for each smaller
    member the first larger partner found is kept.
    """
    _check_non_negative("count", count)
    pentagonals = [_pentagonal(n) for n in range(1, count)]
    if not pentagonals:
        return []
    ceiling = 2 * pentagonals[-1]
    known = set()
    n = 1
    while (value := _pentagonal(n)) <= ceiling:
        known.add(value)
        n += 1
    pairs = []
    for index, low in enumerate(pentagonals):
        for high in pentagonals[index + 1 :]:
            if high + low in known and high - low in known:
                pairs.append((low, high))
                break
    return pairs


def tri_pent_hex(count: int = 100000) -> list[int]:
    """Numbers among the first ``count`` hexagonal, pentagonal and triangle numbers alike."""
    _check_non_negative("count", count)
    triangles = {p * (p + 1) // 2 for p in range(1, count + 1)}
    pentagonals = {_pentagonal(p) for p in range(1, count + 1)}
    hexagonals = (p * (2 * p - 1) for p in range(1, count + 1))
    return [h for h in hexagonals if h in pentagonals and h in triangles]


def lattice_paths(rows: int = 20, cols: int = 20) -> int:
    """Right-and-down routes through a grid of ``rows`` by ``cols`` cells."""
    _check_non_negative("rows", rows)
    _check_non_negative("cols", cols)
    return comb(rows + cols, rows)


_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def _is_prime(number: int) -> bool:
    """Miller-Rabin test, deterministic for the sizes a spiral reaches."""
    if number < 2:
        return False
    for p in _WITNESSES:
        if number % p == 0:
            return number == p
    d, shifts = number - 1, 0
    while d % 2 == 0:
        d //= 2
        shifts += 1
    for a in _WITNESSES:
        x = pow(a, d, number)
        if x in (1, number - 1):
            continue
        for _ in range(shifts - 1):
            x = x * x % number
            if x == number - 1:
                break
        else:
            return False
    return True


def spiral_prime_side_length(threshold: float = 0.1) -> int:
    """Smallest spiral side whose diagonals hold a share of primes below ``threshold``."""
    if not 0 < threshold <= 1:
        raise ValueError(f"threshold must be in (0, 1]: {threshold}")
    primes, total, side = 0, 1, 1
    while True:
        side += 2
        corner = side * side
        primes += sum(_is_prime(corner - k * (side - 1)) for k in (1, 2, 3))
        total += 4
        if primes / total < threshold:
            return side


def distinct_powers(limit: int = 100) -> int:
    """How many distinct values a**b takes for a and b from 2 to ``limit``."""
    _check_non_negative("limit", limit)
    terms = range(2, limit + 1)
    return len({a**b for a in terms for b in terms})