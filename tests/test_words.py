import pytest

from eulerkit.words import (
    letter_count_total,
    name_scores,
    number_letter_count,
    parse_word_list,
    triangle_word_count,
    word_value,
)


@pytest.mark.parametrize(
    ("number", "spelled"),
    [
        (3, "three"),
        (19, "nineteen"),
        (20, "twenty"),
        (21, "twentyone"),
        (100, "onehundred"),
        (105, "onehundredandfive"),
        (999, "ninehundredandninetynine"),
        (1000, "onethousand"),
    ],
)
def test_number_letter_count_matches_spelling(number, spelled):
    assert number_letter_count(number) == len(spelled)


def test_number_letter_count_worked_example():
    assert number_letter_count(342) == 23


@pytest.mark.parametrize("number", [0, 1001, -5])
def test_number_letter_count_out_of_range(number):
    with pytest.raises(ValueError):
        number_letter_count(number)


def test_number_letter_count_rejects_non_int():
    with pytest.raises(TypeError):
        number_letter_count("12")


def test_letter_count_total_small():
    words = ["one", "two", "three", "four", "five"]
    assert letter_count_total(5) == sum(len(w) for w in words)


def test_letter_count_total_is_cumulative():
    assert letter_count_total(10) == letter_count_total(9) + number_letter_count(10)


def test_letter_count_total_default():
    assert letter_count_total() == 21124


def test_letter_count_total_rejects_large_limit():
    with pytest.raises(ValueError):
        letter_count_total(1001)


def test_word_value_example():
    assert word_value("COLIN") == 53


def test_word_value_is_additive_and_case_insensitive():
    assert word_value("ab") == word_value("A") + word_value("B")
    assert word_value("colin") == word_value("COLIN")


def test_word_value_rejects_non_letters():
    with pytest.raises(ValueError):
        word_value("A-B")


def test_parse_word_list():
    assert parse_word_list('"MARY","PATRICIA",\n"LINDA"') == ["MARY", "PATRICIA", "LINDA"]


def test_parse_word_list_skips_empty_fields():
    assert parse_word_list('"A",,"B",') == ["A", "B"]


def test_name_scores_single():
    assert name_scores(["COLIN"]) == word_value("COLIN")


def test_name_scores_sorts_alphabetically():
    assert name_scores(["B", "A"]) == word_value("A") + 2 * word_value("B")


def test_name_scores_ignores_duplicates():
    assert name_scores(["B", "A", "B"]) == name_scores(["A", "B"])


def test_triangle_word_count_counts_triangle_words():
    words = ["SKY", "SKY"]
    assert triangle_word_count(words) == len(words)


def test_triangle_word_count_mixed():
    words = ["A", "B", "C"]
    assert triangle_word_count(words) == triangle_word_count(["A"]) + triangle_word_count(["C"])
    assert triangle_word_count(["B"]) == 0