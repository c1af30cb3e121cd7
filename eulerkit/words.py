"""Problems about English number words and letter-valued word lists."""

from __future__ import annotations

from math import isqrt
from typing import Iterable

_ONES = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS = {
    2: "twenty",
    3: "thirty",
    4: "forty",
    5: "fifty",
    6: "sixty",
    7: "seventy",
    8: "eighty",
    9: "ninety",
}


def _below_hundred(number: int) -> str:
    if number < 20:
        return _ONES[number]
    tens, ones = divmod(number, 10)
    return f"{_TENS[tens]} {_ONES[ones]}" if ones else _TENS[tens]


def _spell(number: int) -> str:
    """British English words for 1..1000, using "and" after the hundreds."""
    if number == 1000:
        return "one thousand"
    hundreds, rest = divmod(number, 100)
    parts = []
    if hundreds:
        parts += [_ONES[hundreds], "hundred"]
        if rest:
            parts.append("and")
    if rest:
        parts.append(_below_hundred(rest))
    return " ".join(parts)


def number_letter_count(number: int) -> int:
    """Letters used to write ``number`` (1..1000) in words, spaces not counted."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, not {type(number).__name__}")
    if not 1 <= number <= 1000:
        raise ValueError(f"number must be between 1 and 1000: {number}")
    return len(_spell(number).replace(" ", ""))


def letter_count_total(limit: int = 1000) -> int:
    """Letters used to write every number from 1 to ``limit`` in words."""
    if not 0 <= limit <= 1000:
        raise ValueError(f"limit must be between 0 and 1000: {limit}")
    return sum(number_letter_count(n) for n in range(1, limit + 1))


def _letter_value(char: str) -> int:
    if not "A" <= char <= "Z":
        raise ValueError(f"not a letter: {char!r}")
    return ord(char) - ord("A") + 1


def word_value(word: str) -> int:
    """Sum of alphabet positions (A = 1 ... Z = 26), ignoring case."""
    return sum(_letter_value(char) for char in word.upper())


def parse_word_list(text: str) -> list[str]:
    """Split a comma-separated list of quoted words, dropping quotes and whitespace."""
    words = (
        "".join(char for char in field if char != '"' and not char.isspace())
        for field in text.split(",")
    )
    return [word for word in words if word]


def name_scores(names: Iterable[str]) -> int:
    """Total of alphabetical position times word value over the distinct names."""
    return sum(
        position * word_value(name)
        for position, name in enumerate(sorted(set(names)), 1)
    )


def _is_triangle(value: int) -> bool:
    discriminant = 8 * value + 1
    return value > 0 and isqrt(discriminant) ** 2 == discriminant


def triangle_word_count(words: Iterable[str]) -> int:
    """How many words have a value that is a triangle number."""
    return sum(1 for word in words if _is_triangle(word_value(word)))