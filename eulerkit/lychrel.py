"""Lychrel candidates: numbers that never reach a palindrome by reverse-and-add."""

from __future__ import annotations

from eulerkit.bignum import RLong, is_palindrome, reverse_add

DEFAULT_ITERATIONS = 50


def _check_iterations(max_iterations: int) -> None:
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be positive: {max_iterations}")


def is_lychrel(number: int, max_iterations: int = DEFAULT_ITERATIONS) -> bool:
    """True when reverse-and-add yields no palindrome within ``max_iterations`` steps.

    The starting number itself is not checked; at least one step is always taken.
    """
    _check_iterations(max_iterations)
    value = RLong.from_int(number)
    for _ in range(max_iterations):
        value = reverse_add(value)
        if is_palindrome(value):
            return False
    return True


def lychrel_iterations(
    limit: int, max_iterations: int = DEFAULT_ITERATIONS
) -> dict[int, int]:
    """Steps needed to reach a palindrome for each number in 1..``limit`` - 1.

    A number that hits the cap is recorded with the cap. When an intermediate sum
    is a smaller number already measured, its count is added on and the walk stops.
    """
    _check_iterations(max_iterations)
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")
    table: dict[int, int] = {}
    for number in range(1, limit):
        value = RLong.from_int(number)
        steps = 0
        while True:
            value = reverse_add(value)
            steps += 1
            if is_palindrome(value) or steps >= max_iterations:
                table[number] = steps
                break
            known = table.get(int(value))
            if known:
                table[number] = steps + known
                break
    return table


def count_lychrel(limit: int, max_iterations: int = DEFAULT_ITERATIONS) -> int:
    """How many numbers below ``limit`` are Lychrel candidates."""
    table = lychrel_iterations(limit, max_iterations)
    return sum(1 for steps in table.values() if steps >= max_iterations)