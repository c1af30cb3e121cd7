"""Last digits of huge powers of two."""

from __future__ import annotations

from eulerkit.bignum import BASE, RLong, _natural, power

DEFAULT_COEFFICIENT = 28433
DEFAULT_EXPONENT = 7830457


def multiply_last_ten(multiplier: int, multiplicand: int) -> int:
    """The last ten decimal digits of the product of two non-negative ints."""
    product = _natural(multiplier, "multiplier") * _natural(multiplicand, "multiplicand")
    return product % BASE


def mersenne_tail(
    coefficient: int = DEFAULT_COEFFICIENT, exponent: int = DEFAULT_EXPONENT
) -> int:
    """The last ten digits of ``coefficient`` * 2**``exponent``."""
    exponent = _natural(exponent, "exponent")
    return multiply_last_ten(pow(2, exponent, BASE), coefficient)


def power_of_two(exponent: int = DEFAULT_EXPONENT) -> RLong:
    """2**``exponent`` in full, as an RLong."""
    return power(2, exponent)