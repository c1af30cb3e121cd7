import pytest

from eulerkit.mersenne import multiply_last_ten, mersenne_tail, power_of_two


def test_multiply_small_product_unchanged():
    assert multiply_last_ten(12345, 2) == 24690


def test_multiply_keeps_ten_digits():
    assert multiply_last_ten(10**10, 5) == 0
    assert multiply_last_ten(9999999999, 9999999999) < 10**10


def test_multiply_rejects_negative():
    with pytest.raises(ValueError):
        multiply_last_ten(-1, 2)


def test_tail_small_power():
    assert mersenne_tail(1, 10) == 1024


def test_tail_step_relation():
    for exponent in range(1, 60):
        assert mersenne_tail(3, exponent + 1) == multiply_last_ten(
            mersenne_tail(3, exponent), 2
        )


def test_default_tail():
    assert mersenne_tail() == 8739992576


def test_tail_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mersenne_tail(1, -1)


def test_power_of_two_small():
    assert power_of_two(10) == 1024
    assert power_of_two(0) == 1


def test_power_of_two_agrees_with_tail():
    for exponent in (1, 33, 64, 200):
        assert int(power_of_two(exponent)) % 10**10 == mersenne_tail(1, exponent)


def test_power_of_two_doubles():
    for exponent in range(0, 80):
        assert power_of_two(exponent + 1) == power_of_two(exponent).multiply(2)