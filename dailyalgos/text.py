"""String puzzles: word prefixes, expression evaluation, fractions, run-length codes."""

from __future__ import annotations

import operator
import re
from collections import Counter
from collections.abc import Callable, Iterable
from fractions import Fraction
from functools import lru_cache
from itertools import groupby

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}
_TERM = re.compile(r"([+-]?)(\d+)/(\d+)")
_FRACTION_SUM = re.compile(r"(?:[+-]?\d+/\d+(?:[+-]\d+/\d+)*)?")
_MAX_RUN = 9


def is_prefix_of_word(sentence: str, search_word: str) -> int:
    """Return the 1-based position of the first word starting with ``search_word``, or -1."""
    return next(
        (
            position
            for position, word in enumerate(sentence.split(), start=1)
            if word.startswith(search_word)
        ),
        -1,
    )


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters found in ``allowed``."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()


@lru_cache(maxsize=1024)
def _evaluations(expression: str) -> tuple[int, ...]:
    if not expression:
        return ()
    if _is_number(expression):
        return (int(expression),)
    results: list[int] = []
    for index, char in enumerate(expression):
        if _is_number(char):
            continue
        try:
            apply = _OPERATORS[char]
        except KeyError:
            raise ValueError(f"unknown operator {char!r} in {expression!r}") from None
        left = _evaluations(expression[:index])
        right = _evaluations(expression[index + 1 :])
        results.extend(apply(a, b) for a in left for b in right)
    return tuple(results)


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of every way to parenthesise an expression of +, - and *."""
    return list(_evaluations(expression))


def fraction_addition(expression: str) -> str:
    """Add up a chain such as "-1/2+1/3" and return the reduced result as "p/q"."""
    if _FRACTION_SUM.fullmatch(expression) is None:
        raise ValueError(f"not a sum of fractions: {expression!r}")
    total = sum(
        (
            Fraction(-int(numerator) if sign == "-" else int(numerator), int(denominator))
            for sign, numerator, denominator in _TERM.findall(expression)
        ),
        Fraction(0),
    )
    return f"{total.numerator}/{total.denominator}"


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Return the words occurring exactly once across both sentences, first seen first."""
    counts = Counter(s1.split())
    counts.update(s2.split())
    return [word for word, count in counts.items() if count == 1]


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as count-character pairs, no run longer than nine."""
    parts: list[str] = []
    for char, run in groupby(word):
        full, rest = divmod(sum(1 for _ in run), _MAX_RUN)
        parts.append(f"{_MAX_RUN}{char}" * full)
        if rest:
            parts.append(f"{rest}{char}")
    return "".join(parts)


def get_lucky(s: str, k: int) -> int:
    """Replace letters by alphabet positions, then take the digit sum ``k`` times."""
    if any(not "a" <= char <= "z" for char in s):
        raise ValueError(f"only lower-case letters are allowed: {s!r}")
    digits = "".join(str(ord(char) - ord("a") + 1) for char in s)
    number = sum(map(int, digits))
    for _ in range(k - 1):
        number = sum(map(int, str(number)))
    return number


def min_changes(s: str) -> int:
    """Return how many characters must change so every aligned pair is uniform."""
    return sum(1 for first, second in zip(s[::2], s[1::2]) if first != second)


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some rotation of a non-empty ``s`` equals ``goal``."""
    return bool(s) and len(s) == len(goal) and goal in s + s