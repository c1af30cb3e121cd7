import pytest

from eulerkit.bignum import (
    BASE,
    RLong,
    count_digits,
    is_palindrome,
    main,
    power,
    reverse_add,
)


@pytest.mark.parametrize("value", [0, 7, 47, 9900100000, 10202020, 33048402, 10**40 + 3])
def test_from_int_round_trip(value):
    assert int(RLong.from_int(value)) == value
    assert str(RLong.from_int(value)) == str(value)


def test_two_limb_constructor_puts_first_limb_lowest():
    number = RLong(123, 10191)
    assert int(number) == 10191 * BASE + 123
    assert number.limbs == (123, 10191)


def test_limbs_of_zero():
    assert RLong(0).limbs == (0,)


def test_constructor_rejects_bad_input():
    with pytest.raises(TypeError):
        RLong()
    with pytest.raises(ValueError):
        RLong(-1)
    with pytest.raises(TypeError):
        RLong("12")


@pytest.mark.parametrize("a,b", [(9900100000, 9900100000), (BASE - 1, 1), (5, 10**30), (0, 0)])
def test_add_matches_int_addition(a, b):
    assert RLong.from_int(a).add(RLong.from_int(b)) == a + b
    assert RLong.from_int(a).add(b) == a + b


def test_add_rejects_negative():
    with pytest.raises(ValueError):
        RLong(3).add(-1)


def test_repeated_multiply_by_hundred():
    number = RLong(10202020)
    for _ in range(99):
        number = number.multiply(100)
    assert int(number) == 10202020 * 100**99
    assert number.digit_count() == len("10202020") + 2 * 99


def test_push_left():
    assert RLong(12).push_left(3) == 123
    assert RLong(BASE - 1).push_left(9) == (BASE - 1) * 10 + 9
    with pytest.raises(ValueError):
        RLong(1).push_left(10)


@pytest.mark.parametrize("value", [47, 123, 1000, 9900100000, 10191 * BASE + 123])
def test_reverse_reverses_decimal_digits(value):
    assert str(RLong.from_int(value).reverse()) == str(int(str(value)[::-1]))


def test_digit_count_and_zero():
    assert RLong(0).digit_count() == 0
    assert RLong(0, 1).digit_count() == BASE_DIGITS_PLUS_ONE


BASE_DIGITS_PLUS_ONE = len(str(BASE))


def test_count_occurrence_counts_inner_zeros():
    number = RLong(0, 1)
    assert number.count_occurrence(0) == len(str(BASE)) - 1
    assert number.count_occurrence(1) == 1
    assert RLong(0).count_occurrence(0) == 0
    with pytest.raises(ValueError):
        number.count_occurrence(11)


def test_is_permutation():
    assert RLong(125874).is_permutation(RLong(251748))
    assert RLong(125874).is_permutation(251748)
    assert not RLong(123).is_permutation(RLong(1234))
    assert not RLong(112).is_permutation(RLong(122))


def test_to_int_only_for_single_limb():
    assert RLong(BASE - 1).to_int() == BASE - 1
    with pytest.raises(OverflowError):
        RLong(5, 1).to_int()
    assert int(RLong(5, 1)) == BASE + 5


def test_equality_and_hash():
    assert RLong(5, 1) == RLong.from_int(BASE + 5)
    assert hash(RLong(5, 1)) == hash(RLong.from_int(BASE + 5))
    assert RLong(3) != RLong(4)


@pytest.mark.parametrize("base,exponent", [(2, 10), (7, 1), (3, 0), (99, 95)])
def test_power_matches_int_power(base, exponent):
    assert int(power(base, exponent)) == base**exponent


def test_power_rejects_negative():
    with pytest.raises(ValueError):
        power(2, -1)


def test_count_digits():
    assert count_digits(0) == 1
    assert count_digits(RLong(0, 1)) == len(str(BASE))
    with pytest.raises(ValueError):
        count_digits(-5)


def test_palindromes():
    assert is_palindrome(RLong(12321))
    assert is_palindrome(7)
    assert not is_palindrome(RLong(123, 10191))


def test_reverse_add():
    total = reverse_add(47)
    assert total == 121
    assert is_palindrome(total)


def test_main_prints_sequence(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "10202020"
    assert lines[1] == "33048402"
    assert len(lines) == 101
    assert lines[-1] == f"99 {10202020 * 100**99}"