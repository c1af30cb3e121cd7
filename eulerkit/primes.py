"""Prime-number problems: sieves, circular and truncatable primes, prime sums."""

from __future__ import annotations

from collections import defaultdict
from functools import lru_cache
from itertools import combinations, count, islice, permutations, takewhile
from math import isqrt
from typing import Callable, Iterator, NamedTuple


class QuadraticPrimes(NamedTuple):
    """Coefficients of n**2 + a*n + b and how many primes it gives from n = 0."""

    count: int
    a: int
    b: int

    @property
    def product(self) -> int:
        return self.a * self.b


class ConsecutivePrimeSum(NamedTuple):
    """A prime written as a sum of ``terms`` consecutive primes."""

    terms: int
    total: int


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must not be negative: {limit}")


def is_prime(number: int) -> bool:
    """Trial-division primality test; numbers below 2 are not prime."""
    if number < 2:
        return False
    if number < 4:
        return True
    if number % 2 == 0:
        return False
    return all(number % divisor for divisor in range(3, isqrt(number) + 1, 2))


def prime_sieve(limit: int) -> list[bool]:
    """Primality flags for every number from 0 to ``limit`` inclusive."""
    _check_limit(limit)
    sieve = [True] * (limit + 1)
    sieve[: min(2, limit + 1)] = [False] * min(2, limit + 1)
    for n in range(2, isqrt(limit) + 1):
        if sieve[n]:
            sieve[n * n :: n] = [False] * len(range(n * n, limit + 1, n))
    return sieve


def _prime_run(a: int, b: int, prime: Callable[[int], bool]) -> int | None:
    """Consecutive n from 0 giving primes; None when a value goes negative first."""
    for n in count():
        value = n * n + a * n + b
        if value < 0:
            return None
        if not prime(value):
            return n
    raise AssertionError("unreachable")


def best_quadratic(limit: int = 1000) -> QuadraticPrimes:
    """The quadratic with |a|, |b| < ``limit`` giving the longest prime run.

    Coefficient a is scanned outermost, both from low to high; the first
    strictly longer run wins. A run that reaches a negative value is discarded.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive: {limit}")
    prime = lru_cache(maxsize=None)(is_prime)
    best: QuadraticPrimes | None = None
    for a in range(-limit + 1, limit):
        for b in range(-limit + 1, limit):
            run = _prime_run(a, b, prime)
            if run is not None and run > (best.count if best else 0):
                best = QuadraticPrimes(run, a, b)
    if best is None:
        raise ValueError(f"no quadratic with coefficients below {limit} yields a prime")
    return best


def _rotations(number: int) -> list[int]:
    digits = str(number)
    return [int(digits[i:] + digits[:i]) for i in range(len(digits))]


def is_circular_prime(number: int) -> bool:
    """True when every rotation of the decimal digits is prime."""
    return number >= 2 and all(is_prime(r) for r in _rotations(number))


def circular_primes(limit: int = 1_000_000) -> list[int]:
    """All circular primes below ``limit``, in increasing order."""
    _check_limit(limit)
    sieve = prime_sieve(max(limit - 1, 0))

    def prime(n: int) -> bool:
        return sieve[n] if n < len(sieve) else is_prime(n)

    return [
        n for n in range(2, limit) if sieve[n] and all(prime(r) for r in _rotations(n))
    ]


def _truncations(number: int) -> Iterator[int] | None:
    """Every left and right truncation, or None when a digit is zero."""
    digits = str(number)
    if "0" in digits:
        return None
    left = (int(digits[i:]) for i in range(len(digits)))
    right = (int(digits[:i]) for i in range(1, len(digits)))
    return (value for part in (left, right) for value in part)


def is_truncatable_prime(number: int) -> bool:
    """True when the number and all its left and right truncations are prime.

    Numbers containing a zero digit never qualify.
    """
    if number < 1:
        return False
    truncations = _truncations(number)
    return truncations is not None and all(is_prime(t) for t in truncations)


def truncatable_primes(limit: int = 1_000_000) -> list[int]:
    """Truncatable primes from 11 up to below ``limit``."""
    _check_limit(limit)
    sieve = prime_sieve(max(limit - 1, 0))
    found = []
    for n in range(11, limit):
        if not sieve[n]:
            continue
        truncations = _truncations(n)
        if truncations is not None and all(sieve[t] for t in truncations):
            found.append(n)
    return found


def pandigital_primes(limit: int = 1_000_000_000) -> list[int]:
    """Primes below ``limit`` using each digit 1..n exactly once, n being their length."""
    _check_limit(limit)
    candidates = (
        int("".join(order))
        for width in range(1, 10)
        for order in permutations("123456789"[:width])
    )
    return sorted(n for n in candidates if n < limit and is_prime(n))


def smallest_goldbach_counterexample(limit: int = 10_000) -> int | None:
    """Smallest odd composite below ``limit`` that is not a prime plus twice a square.

    Returns None when every odd composite below ``limit`` can be written so.
    """
    _check_limit(limit)
    sieve = prime_sieve(max(limit, 1))
    for odd in range(3, limit, 2):
        if sieve[odd]:
            continue
        twice_squares = takewhile(lambda t: t < odd, (2 * s * s for s in count(1)))
        if not any(sieve[odd - t] for t in twice_squares):
            return odd
    return None


def prime_permutation_sequences() -> list[tuple[int, int, int]]:
    """Four-digit primes in arithmetic progression that are digit permutations."""
    sieve = prime_sieve(10_001)
    groups: defaultdict[str, list[int]] = defaultdict(list)
    for n in range(1000, len(sieve)):
        if sieve[n]:
            groups["".join(sorted(str(n)))].append(n)
    triples = [
        (first, second, third)
        for members in groups.values()
        for first, second, third in combinations(members, 3)
        if second - first == third - second
    ]
    return sorted(triples)


def longest_consecutive_prime_sum(limit: int = 1_000_000) -> ConsecutivePrimeSum:
    """The prime up to ``limit`` that is the sum of the most consecutive primes.

    The first sum found with a strictly greater number of terms wins.
    """
    _check_limit(limit)
    sieve = prime_sieve(limit)
    primes = [n for n, flag in enumerate(sieve) if flag]
    best = ConsecutivePrimeSum(0, 0)
    for start in range(len(primes)):
        total = 0
        for terms, prime in enumerate(islice(primes, start, None), 1):
            total += prime
            if total > limit:
                break
            if sieve[total] and terms > best.terms:
                best = ConsecutivePrimeSum(terms, total)
    return best


def prime_power_triples(limit: int = 50_000_000) -> list[int]:
    """Numbers below ``limit`` expressible as p**2 + q**3 + r**4 for primes p, q, r."""
    _check_limit(limit)
    primes = [n for n, flag in enumerate(prime_sieve(isqrt(limit))) if flag]
    found: set[int] = set()
    for p in primes:
        square = p * p
        if square >= limit:
            break
        for q in primes:
            partial = square + q**3
            if partial >= limit:
                break
            for r in primes:
                total = partial + r**4
                if total >= limit:
                    break
                found.add(total)
    return sorted(found)