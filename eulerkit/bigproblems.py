"""Problems that need numbers larger than a machine word."""

from __future__ import annotations

from itertools import product
from typing import NamedTuple

from eulerkit.bignum import RLong, count_digits, power


class PowerDigitSum(NamedTuple):
    """The largest digit sum found and the power that produced it."""

    digit_sum: int
    base: int
    exponent: int


def first_fibonacci_with_digits(digits: int) -> int:
    """Index of the first Fibonacci term (F1 = F2 = 1) with at least ``digits`` digits."""
    if digits < 1:
        raise ValueError(f"digits must be positive: {digits}")
    if digits == 1:
        return 1
    previous, current, index = 1, 1, 2
    while count_digits(current) < digits:
        previous, current = current, previous + current
        index += 1
    return index


def self_powers_sum(limit: int) -> int:
    """Sum of n**n for n from 1 to ``limit``."""
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    return sum(int(power(n, n)) for n in range(1, limit + 1))


def digit_sum(number: int | RLong) -> int:
    """Sum of the decimal digits of a non-negative number."""
    value = int(number)
    if value < 0:
        raise ValueError(f"number must not be negative: {value}")
    return sum(map(int, str(value)))


def max_power_digit_sum(limit: int) -> PowerDigitSum:
    """Largest digit sum of base**exponent with both in 1..``limit``.

    Bases are scanned outermost; the first power reaching the maximum wins.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive: {limit}")
    best: PowerDigitSum | None = None
    for base, exponent in product(range(1, limit + 1), repeat=2):
        total = digit_sum(power(base, exponent))
        if best is None or total > best.digit_sum:
            best = PowerDigitSum(total, base, exponent)
    assert best is not None
    return best