import pytest

from eulerkit.primes import (
    best_quadratic,
    circular_primes,
    is_circular_prime,
    is_prime,
    is_truncatable_prime,
    longest_consecutive_prime_sum,
    pandigital_primes,
    prime_permutation_sequences,
    prime_power_triples,
    prime_sieve,
    smallest_goldbach_counterexample,
    truncatable_primes,
)


def test_is_prime_agrees_with_sieve():
    sieve = prime_sieve(500)
    assert len(sieve) == 501
    assert [is_prime(n) for n in range(501)] == sieve


def test_small_and_negative_numbers_are_not_prime():
    assert not is_prime(0)
    assert not is_prime(1)
    assert not is_prime(-7)
    assert is_prime(2)


def test_prime_sieve_rejects_negative_limit():
    with pytest.raises(ValueError):
        prime_sieve(-1)


def test_prime_sieve_of_zero():
    assert prime_sieve(0) == [False]


def test_best_quadratic_gives_a_prime_run():
    best = best_quadratic(50)
    assert best.product == best.a * best.b
    assert abs(best.a) < 50 and abs(best.b) < 50
    assert all(is_prime(n * n + best.a * n + best.b) for n in range(best.count))
    assert not is_prime(best.count**2 + best.a * best.count + best.b)
    assert best.count >= 40


def test_best_quadratic_without_primes_raises():
    with pytest.raises(ValueError):
        best_quadratic(1)


def test_circular_prime_examples():
    assert is_circular_prime(197)
    assert not is_circular_prime(19)
    assert not is_circular_prime(1)


def test_circular_primes_closed_under_rotation():
    found = circular_primes(1000)
    assert found == sorted(found)
    assert all(is_circular_prime(n) for n in found)
    for n in found:
        digits = str(n)
        rotations = {int(digits[i:] + digits[:i]) for i in range(len(digits))}
        assert rotations <= set(found)
    assert 197 in found


def test_truncatable_prime_checks():
    assert is_truncatable_prime(3797)
    assert is_truncatable_prime(23)
    assert not is_truncatable_prime(103)
    assert not is_truncatable_prime(29)


def test_truncatable_primes_are_consistent():
    found = truncatable_primes(1000)
    assert all(n >= 11 for n in found)
    assert all(is_truncatable_prime(n) for n in found)
    assert 23 in found
    assert 3797 in truncatable_primes(4000)


def test_pandigital_primes_below_ten_thousand():
    found = pandigital_primes(10_000)
    assert 2143 in found
    assert all(is_prime(n) for n in found)
    for n in found:
        digits = str(n)
        assert sorted(digits) == list("123456789"[: len(digits)])
    assert found == sorted(found)


def test_goldbach_counterexample_found():
    assert smallest_goldbach_counterexample(10_000) == 5777


def test_goldbach_counterexample_none_below_small_limit():
    assert smallest_goldbach_counterexample(100) is None


def test_prime_permutation_sequences():
    triples = prime_permutation_sequences()
    assert (1487, 4817, 8147) in triples
    for first, second, third in triples:
        assert 1000 <= first < second < third < 10_000
        assert second - first == third - second
        assert sorted(str(first)) == sorted(str(second)) == sorted(str(third))
        assert is_prime(first) and is_prime(second) and is_prime(third)


def test_longest_consecutive_prime_sum_below_hundred():
    assert longest_consecutive_prime_sum(100) == (6, 41)


def test_longest_consecutive_prime_sum_is_prime_and_bounded():
    result = longest_consecutive_prime_sum(1000)
    assert result.total <= 1000
    assert is_prime(result.total)
    assert result.terms >= longest_consecutive_prime_sum(100).terms


def test_longest_consecutive_prime_sum_without_primes():
    assert longest_consecutive_prime_sum(1) == (0, 0)


def test_prime_power_triples_below_fifty():
    assert prime_power_triples(50) == [28, 33, 47, 49]


def test_prime_power_triples_monotone_in_limit():
    small = prime_power_triples(500)
    large = prime_power_triples(5000)
    assert set(small) <= set(large)
    assert all(n < 500 for n in small)


def test_prime_power_triples_rejects_negative():
    with pytest.raises(ValueError):
        prime_power_triples(-5)