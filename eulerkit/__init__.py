"""Number-theory puzzle solvers built around a small multi-limb natural-number type."""

__version__ = "0.1.0"

__all__ = [
    "bignum",
    "bigproblems",
    "lychrel",
    "mersenne",
    "primes",
    "digits",
    "words",
    "sequences",
    "grids",
    "blocks",
]