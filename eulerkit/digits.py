"""Problems about the decimal digits of numbers."""

from __future__ import annotations

from functools import lru_cache
from itertools import chain, count
from math import factorial

from eulerkit.bignum import _natural


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")


def is_pandigital(number: int) -> bool:
    """True when an n-digit number uses each digit 1..n exactly once."""
    digits = str(_natural(number, "number"))
    return sorted(digits) == list("123456789"[: len(digits)])


def digit_power_sum(number: int, power: int) -> int:
    """Sum of each decimal digit raised to ``power``."""
    power = _natural(power, "power")
    return sum(int(d) ** power for d in str(_natural(number, "number")))


def digit_power_numbers(power: int = 5, limit: int = 10_000_000) -> list[int]:
    """Numbers from 2 below ``limit`` equal to the sum of their digits to ``power``."""
    _check_limit(limit)
    power = _natural(power, "power")
    table = {str(d): d**power for d in range(10)}
    return [n for n in range(2, limit) if n == sum(table[c] for c in str(n))]


def pandigital_products(limit: int = 10_000) -> list[int]:
    """Distinct products p*q with p, q below ``limit`` whose identity is 1..9 pandigital.

    Products appear in the order first found, scanning p outermost.
    """
    _check_limit(limit)
    products: dict[int, None] = {}
    for p in range(1, limit):
        for q in range(1, limit):
            product = p * q
            text = f"{p}{q}{product}"
            if len(text) > 9:
                break
            if len(text) == 9 and is_pandigital(int(text)):
                products.setdefault(product, None)
    return list(products)


_FACTORIALS = {str(d): factorial(d) for d in range(10)}


def digit_factorial_sum(number: int) -> int:
    """Sum of the factorials of the decimal digits."""
    return sum(_FACTORIALS[d] for d in str(_natural(number, "number")))


def digit_factorions(limit: int = 10_000_000) -> list[int]:
    """Numbers from 3 below ``limit`` equal to the sum of their digit factorials."""
    _check_limit(limit)
    return [n for n in range(3, limit) if n == digit_factorial_sum(n)]


def is_double_base_palindrome(number: int) -> bool:
    """True when the number is a palindrome in both base 10 and base 2."""
    value = _natural(number, "number")
    decimal, binary = str(value), format(value, "b")
    return decimal == decimal[::-1] and binary == binary[::-1]


def double_base_palindrome_sum(limit: int = 1_000_000) -> int:
    """Sum of the double-base palindromes from 1 below ``limit``."""
    _check_limit(limit)
    return sum(n for n in range(1, limit) if is_double_base_palindrome(n))


def concatenated_product(number: int) -> int:
    """Concatenate number*1, number*2, ... until at least nine digits are reached."""
    number = _natural(number, "number")
    if number == 0:
        raise ValueError("number must be positive")
    text = str(number)
    for multiplier in count(2):
        if len(text) >= 9:
            break
        text += str(number * multiplier)
    return int(text)


def largest_pandigital_multiple(limit: int = 500_000) -> int:
    """Largest pandigital concatenated product over the numbers 1..``limit``."""
    if limit < 1:
        raise ValueError(f"limit must be positive: {limit}")
    return max(
        value
        for value in map(concatenated_product, range(1, limit + 1))
        if is_pandigital(value)
    )


def champernowne_digits(limit: int = 500_000) -> dict[int, int]:
    """Digits at positions 1, 10, 100, ... of the concatenation of 1..``limit`` - 1."""
    _check_limit(limit)
    digits = chain.from_iterable(map(str, range(1, limit)))
    found: dict[int, int] = {}
    target = 1
    for position, digit in enumerate(digits, 1):
        if position == target:
            found[position] = int(digit)
            target *= 10
    return found


def permuted_multiples(max_multiplier: int = 6) -> int:
    """Smallest x whose multiples 2x..``max_multiplier``*x all permute its digits."""
    if not 2 <= max_multiplier <= 9:
        raise ValueError(f"max_multiplier must be between 2 and 9: {max_multiplier}")
    for x in count(1):
        key = sorted(str(x))
        if all(sorted(str(x * k)) == key for k in range(2, max_multiplier + 1)):
            return x
    raise AssertionError("unreachable")


def _square_digit_sum(number: int) -> int:
    return sum(int(d) ** 2 for d in str(number))


def square_digit_chain_end(number: int) -> int:
    """Follow the sum of squared digits until it reaches 1 or 89, and return which."""
    value = _natural(number, "number")
    if value == 0:
        raise ValueError("number must be positive")
    while value not in (1, 89):
        value = _square_digit_sum(value)
    return value


def count_chains_to_89(limit: int = 10_000_000) -> int:
    """How many numbers from 1 below ``limit`` have a square-digit chain ending at 89."""
    _check_limit(limit)
    end = lru_cache(maxsize=None)(square_digit_chain_end)
    return sum(1 for n in range(1, limit) if end(_square_digit_sum(n)) == 89)