"""Arbitrary-size natural numbers stored as base 10**10 limbs."""

from __future__ import annotations

import argparse
from collections import Counter
from typing import Sequence

BASE_DIGITS = 10
BASE = 10**BASE_DIGITS


def _natural(value: object, what: str = "value") -> int:
    """Return ``value`` as a non-negative int, or raise."""
    if isinstance(value, RLong):
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int or RLong, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")
    return value


def _digit(value: object) -> int:
    digit = _natural(value, "digit")
    if digit > 9:
        raise ValueError(f"digit must be between 0 and 9: {digit}")
    return digit


class RLong:
    """An immutable natural number built from base 10**10 limbs, lowest first."""

    __slots__ = ("_value",)

    def __init__(self, *args: int) -> None:
        if not args:
            raise TypeError("RLong needs at least one limb")
        self._value = sum(
            _natural(limb, "limb") * BASE**position for position, limb in enumerate(args)
        )

    @classmethod
    def from_int(cls, value: int) -> RLong:
        """Build a number from a plain non-negative int."""
        return cls(_natural(value))

    @property
    def limbs(self) -> tuple[int, ...]:
        """The base 10**10 limbs, least significant first."""
        value = self._value
        limbs = []
        while True:
            value, limb = divmod(value, BASE)
            limbs.append(limb)
            if not value:
                return tuple(limbs)

    def _digits(self) -> str:
        # Zero has no counted digits, as in the digit-count rules below.
        return str(self._value) if self._value else ""

    def add(self, other: RLong | int) -> RLong:
        """Return the sum with another RLong or a plain int."""
        return RLong.from_int(self._value + _natural(other, "addend"))

    def push_left(self, digit: int) -> RLong:
        """Shift one decimal place up and put ``digit`` in the units place."""
        return RLong.from_int(self._value * 10 + _digit(digit))

    def reverse(self) -> RLong:
        """Return the number with its decimal digits in reverse order."""
        result = RLong(0)
        for char in reversed(str(self._value)):
            result = result.push_left(int(char))
        return result

    def multiply(self, multiplier: int) -> RLong:
        """Return the product with a non-negative int."""
        return RLong.from_int(self._value * _natural(multiplier, "multiplier"))

    def digit_count(self) -> int:
        """Number of decimal digits; zero counts as having none."""
        return len(self._digits())

    def count_occurrence(self, digit: int) -> int:
        """How many times ``digit`` appears among the decimal digits."""
        return self._digits().count(str(_digit(digit)))

    def is_permutation(self, other: RLong | int) -> bool:
        """True when both numbers use exactly the same multiset of digits."""
        other = other if isinstance(other, RLong) else RLong.from_int(other)
        return Counter(self._digits()) == Counter(other._digits())

    def to_int(self) -> int:
        """Return the value when it fits in a single limb."""
        if self._value >= BASE:
            raise OverflowError(f"{self._value} does not fit in one limb")
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RLong):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"RLong.from_int({self._value})"


def power(base: int, exponent: int) -> RLong:
    """Return ``base`` raised to ``exponent`` as an RLong."""
    return RLong.from_int(_natural(base, "base") ** _natural(exponent, "exponent"))


def count_digits(number: int | RLong) -> int:
    """Number of decimal digits, counting zero as one digit."""
    return len(str(_natural(number)))


def is_palindrome(number: int | RLong) -> bool:
    """True when the number reads the same in both directions."""
    value = number if isinstance(number, RLong) else RLong.from_int(number)
    return value.reverse() == value


def reverse_add(number: int | RLong) -> RLong:
    """Return the number plus its digit reversal."""
    value = number if isinstance(number, RLong) else RLong.from_int(number)
    return value.reverse().add(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Print two sample numbers, then repeated multiplications by 100."""
    parser = argparse.ArgumentParser(
        prog="eulerkit-bignum",
        description="Demonstrate multi-limb arithmetic.",
    )
    parser.parse_args(argv)
    first, second = RLong(10202020), RLong(33048402)
    print(first)
    print(second)
    for step in range(1, 100):
        first = first.multiply(100)
        print(f"{step} {first}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())